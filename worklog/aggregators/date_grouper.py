"""Date bucketing for the weekly and daily dashboard views.

This module groups time entries by calendar date with per-day subtotals.
For week and month periods it can pad the result with empty dates so the
view shows every day of the period; the monthly week view deliberately
never pads and lives in ``week_grouper``.
"""

import datetime as dt
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from worklog.calculators.period_resolver import Instant, enumerate_dates, resolve_range
from worklog.models.dashboard import EntryGroup
from worklog.models.period import Period
from worklog.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)


def build_entry_group(day: dt.date, entries: Iterable[TimeEntry]) -> EntryGroup:
    """Build a bucket for one date, newest-created entries first."""
    ordered = sorted(entries, key=lambda e: e.created_at, reverse=True)
    total_minutes = sum(e.duration_minutes for e in ordered)
    return EntryGroup(
        date=day,
        entries=ordered,
        total_minutes=total_minutes,
        total_hours=total_minutes / 60,
    )


def group_by_date(
    entries: Iterable[TimeEntry],
    period: Period,
    now: Instant,
    include_empty_days: bool = False,
) -> List[EntryGroup]:
    """Group entries by entry date with daily subtotals.

    Args:
        entries: Entries to group (already filtered)
        period: Period the entries were fetched for
        now: Reference instant used to resolve the period when padding
        include_empty_days: Add empty buckets for dates without entries.
            Ignored for ``Period.TODAY``, whose range is a single day.

    Returns:
        List of EntryGroup objects, most recent date first

    Example:
        >>> groups = group_by_date(entries, Period.WEEK, dt.date(2025, 1, 15), True)
        >>> [g.date.day for g in groups]
        [19, 18, 17, 16, 15, 14, 13]
    """
    period = Period(period)
    by_date: Dict[dt.date, List[TimeEntry]] = defaultdict(list)
    for entry in entries:
        by_date[entry.entry_date].append(entry)

    if include_empty_days and period != Period.TODAY:
        dates = enumerate_dates(resolve_range(period, now))
        outside = set(by_date) - set(dates)
        if outside:
            logger.debug(
                f"{len(outside)} entry date(s) fall outside the {period.value} range "
                f"and are kept as extra buckets"
            )
            dates.extend(outside)
    else:
        dates = list(by_date)

    dates.sort(reverse=True)

    groups = [build_entry_group(day, by_date.get(day, [])) for day in dates]
    logger.debug(f"Grouped entries into {len(groups)} date bucket(s)")
    return groups
