"""CLI utility functions."""

from worklog.cli.utils.formatters import (
    format_empty_state,
    format_error,
    format_info,
    format_stats,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_empty_state",
    "format_error",
    "format_info",
    "format_stats",
    "format_success",
    "format_table",
    "format_warning",
]
