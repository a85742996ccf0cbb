"""Period resolution for dashboard reporting windows.

This module turns a period selector (today, week, month) plus an explicit
reference instant into a closed calendar-date range, and enumerates the
dates inside a range.

Weeks are Monday-to-Sunday. The reference instant is always passed in by
the caller so every function here is pure; nothing reads the system clock.
"""

import calendar
import datetime as dt
from typing import List, Optional, Union

from worklog.models.period import DateRange, Period

Instant = Union[dt.date, dt.datetime]

PERIOD_LABELS = {
    Period.TODAY: "Today",
    Period.WEEK: "This Week",
    Period.MONTH: "This Month",
}


def calendar_date(now: Instant) -> dt.date:
    """Return the calendar date of a reference instant.

    Timezone-aware datetimes are read in their own zone, so the caller
    controls which local day "now" falls on.

    Example:
        >>> calendar_date(dt.datetime(2025, 1, 15, 23, 30))
        datetime.date(2025, 1, 15)
    """
    if isinstance(now, dt.datetime):
        return now.date()
    return now


def week_start(day: dt.date) -> dt.date:
    """Return the Monday of the week containing ``day``."""
    return day - dt.timedelta(days=day.weekday())


def month_bounds(day: dt.date) -> DateRange:
    """Return the first through last calendar day of ``day``'s month."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return DateRange(start=day.replace(day=1), end=day.replace(day=last_day))


def resolve_range(period: Period, now: Instant) -> DateRange:
    """Resolve a period into a closed calendar-date range.

    Args:
        period: Reporting window selector
        now: Reference instant (date or datetime)

    Returns:
        DateRange covering the period, both ends inclusive

    Example:
        >>> r = resolve_range(Period.WEEK, dt.date(2025, 12, 31))
        >>> (r.start, r.end)
        (datetime.date(2025, 12, 29), datetime.date(2026, 1, 4))
    """
    today = calendar_date(now)
    period = Period(period)

    if period == Period.TODAY:
        return DateRange(start=today, end=today)

    if period == Period.WEEK:
        monday = week_start(today)
        return DateRange(start=monday, end=monday + dt.timedelta(days=6))

    return month_bounds(today)


def enumerate_dates(date_range: DateRange) -> List[dt.date]:
    """List every calendar date in a range, ascending, ends inclusive.

    Example:
        >>> enumerate_dates(DateRange(start=dt.date(2025, 2, 27), end=dt.date(2025, 3, 1)))
        [datetime.date(2025, 2, 27), datetime.date(2025, 2, 28), datetime.date(2025, 3, 1)]
    """
    return [
        date_range.start + dt.timedelta(days=offset)
        for offset in range(date_range.days)
    ]


def is_valid_period(value: Optional[str]) -> bool:
    """Check whether a raw request value names a period."""
    return value in {p.value for p in Period}


def period_from_param(value: Optional[str]) -> Period:
    """Parse a period from a request parameter, defaulting to today."""
    if value is not None and is_valid_period(value):
        return Period(value)
    return Period.TODAY


def format_period_label(period: Period) -> str:
    """Return the English display label for a period."""
    return PERIOD_LABELS[Period(period)]
