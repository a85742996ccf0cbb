"""Readers module for loading time entries and team members."""

from worklog.readers.entry_reader import EntryReader

__all__ = ["EntryReader"]
