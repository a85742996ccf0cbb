"""Shared input handling for CLI commands."""

import datetime as dt
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from worklog.calculators.period_resolver import Instant
from worklog.cli.error_handlers import ConfigurationError, DataValidationError
from worklog.config import LoggingConfig, WorklogConfig, configure_logging, get_config
from worklog.models.period import Period
from worklog.models.team import TeamMember
from worklog.models.time_entry import TimeEntry
from worklog.readers.entry_reader import EntryReader

PERIOD_CHOICES = [p.value for p in Period]


def parse_now_input(value: Optional[str], settings: WorklogConfig) -> Instant:
    """Parse the ``--now`` option.

    Accepts ``YYYY-MM-DD`` (a calendar date) or an ISO 8601 datetime.
    Without a value, the current time in the configured timezone is used.

    Raises:
        DataValidationError: If the value is not a valid date or datetime
    """
    if value is None:
        return settings.now()

    text = value.strip()
    try:
        if len(text) == 10:
            return dt.date.fromisoformat(text)
        return dt.datetime.fromisoformat(text)
    except ValueError:
        raise DataValidationError(
            f"Invalid --now value: {value}",
            recovery_hint="Use YYYY-MM-DD or an ISO datetime such as 2025-01-15T09:30",
        )


def load_settings() -> WorklogConfig:
    """Load settings and configure logging for a command run.

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        settings = get_config()
        configure_logging(LoggingConfig.from_env(settings))
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            recovery_hint="Check TIMEZONE, LOG_LEVEL and WORK_HOURS_TARGET in your .env file",
        ) from e
    return settings


def load_entries(reader: EntryReader, path: Path) -> List[TimeEntry]:
    """Read an entry export, turning malformed documents into CLI errors."""
    try:
        return reader.read_file(path)
    except ValueError as e:
        raise DataValidationError(
            str(e), recovery_hint="The entries file must be a JSON array of entry objects"
        ) from e


def load_members(reader: EntryReader, path: Path) -> List[TeamMember]:
    """Read a team member export, turning malformed documents into CLI errors."""
    try:
        return reader.read_members(path)
    except ValidationError:
        raise
    except ValueError as e:
        raise DataValidationError(
            str(e), recovery_hint="The members file must be a JSON array of member objects"
        ) from e
