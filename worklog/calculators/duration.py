"""Duration utilities for the worklog engine.

This module provides low-level helpers for converting between stored
minutes and decimal hours, and for formatting durations for terminal
output. Entries always store whole minutes; hours are derived.
"""

from typing import Literal

# Quick-entry presets in hours
DURATION_PRESETS = (0.5, 1, 2, 4, 8)


def minutes_to_hours(minutes: int) -> float:
    """Convert minutes to unrounded decimal hours.

    Example:
        >>> minutes_to_hours(90)
        1.5
        >>> minutes_to_hours(0)
        0.0
    """
    return minutes / 60


def hours_to_minutes(hours: float) -> int:
    """Convert decimal hours to whole minutes, rounding to the nearest minute.

    Example:
        >>> hours_to_minutes(1.5)
        90
        >>> hours_to_minutes(0.25)
        15
    """
    return int(round(hours * 60))


def is_valid_duration_increment(hours: float) -> bool:
    """Check that a duration is a multiple of a quarter hour.

    Example:
        >>> is_valid_duration_increment(1.25)
        True
        >>> is_valid_duration_increment(1.1)
        False
    """
    return float(hours * 4).is_integer()


def format_hours(hours: float) -> str:
    """Format decimal hours with one decimal place and an hr/hrs unit.

    Example:
        >>> format_hours(1)
        '1.0 hr'
        >>> format_hours(7.333)
        '7.3 hrs'
    """
    unit = "hr" if round(hours, 1) == 1 else "hrs"
    return f"{hours:.1f} {unit}"


def format_duration(minutes: int, style: Literal["short", "long"] = "short") -> str:
    """Format a duration given in minutes.

    Args:
        minutes: Duration in minutes
        style: ``"short"`` for decimal hours, ``"long"`` for hours and minutes

    Returns:
        Formatted duration

    Example:
        >>> format_duration(90)
        '1.5 hrs'
        >>> format_duration(90, style="long")
        '1 hrs 30 mins'
        >>> format_duration(45, style="long")
        '45 mins'
    """
    if style == "short":
        return f"{minutes_to_hours(minutes):g} hrs"

    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins} mins"
    if mins == 0:
        return f"{hours} hrs"
    return f"{hours} hrs {mins} mins"
