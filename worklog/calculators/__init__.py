"""Calculator modules for the worklog engine."""

from worklog.calculators.duration import (
    DURATION_PRESETS,
    format_duration,
    format_hours,
    hours_to_minutes,
    is_valid_duration_increment,
    minutes_to_hours,
)
from worklog.calculators.period_resolver import (
    calendar_date,
    enumerate_dates,
    format_period_label,
    is_valid_period,
    month_bounds,
    period_from_param,
    resolve_range,
    week_start,
)

__all__ = [
    # duration
    "DURATION_PRESETS",
    "format_duration",
    "format_hours",
    "hours_to_minutes",
    "is_valid_duration_increment",
    "minutes_to_hours",
    # period_resolver
    "calendar_date",
    "enumerate_dates",
    "format_period_label",
    "is_valid_period",
    "month_bounds",
    "period_from_param",
    "resolve_range",
    "week_start",
]
