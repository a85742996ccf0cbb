"""Week bucketing for the monthly dashboard view.

This module partitions a month into Monday-aligned weeks and groups
entries into them with per-week subtotals.

Week layout:
1. Week 1 starts on the 1st of the month, whatever weekday that is
2. Every week ends on a Sunday, except the last, which ends on the
   month's final day
3. Weeks are numbered 1..N in calendar order (N is 4 to 6)

Unlike the date grouper, weeks without entries are left out of the
result: the monthly view only lists weeks where work happened.
"""

import calendar
import datetime as dt
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from worklog.calculators.period_resolver import Instant, calendar_date, month_bounds
from worklog.models.dashboard import WeekGroup, WeekSpan
from worklog.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)


def month_week_spans(month_reference: Instant) -> List[WeekSpan]:
    """Split the month containing ``month_reference`` into week spans.

    Args:
        month_reference: Any date (or datetime) inside the target month

    Returns:
        List of WeekSpan objects in calendar order, all inside the month

    Example:
        >>> spans = month_week_spans(dt.date(2025, 1, 15))
        >>> [(s.start_date.day, s.end_date.day) for s in spans]
        [(1, 5), (6, 12), (13, 19), (20, 26), (27, 31)]
    """
    bounds = month_bounds(calendar_date(month_reference))

    spans: List[WeekSpan] = []
    start = bounds.start
    while start <= bounds.end:
        sunday = start + dt.timedelta(days=6 - start.weekday())
        end = min(sunday, bounds.end)
        spans.append(
            WeekSpan(week_number=len(spans) + 1, start_date=start, end_date=end)
        )
        start = end + dt.timedelta(days=1)

    return spans


def format_week_label(week_number: int, start: dt.date, end: dt.date) -> str:
    """Build the display label for a week bucket.

    Example:
        >>> format_week_label(3, dt.date(2025, 1, 13), dt.date(2025, 1, 19))
        'Week 3 (13-19 Jan)'
        >>> format_week_label(1, dt.date(2021, 8, 1), dt.date(2021, 8, 1))
        'Week 1 (1 Aug)'
    """
    month = calendar.month_abbr[end.month]
    if start == end:
        return f"Week {week_number} ({start.day} {month})"
    return f"Week {week_number} ({start.day}-{end.day} {month})"


def find_week(spans: List[WeekSpan], day: dt.date) -> Optional[WeekSpan]:
    """Return the span containing ``day``, or None if it is outside the month."""
    for span in spans:
        if span.start_date <= day <= span.end_date:
            return span
    return None


def group_by_week(
    entries: Iterable[TimeEntry], month_reference: Instant
) -> List[WeekGroup]:
    """Group a month's entries into Monday-aligned week buckets.

    Args:
        entries: Entries to group (already filtered)
        month_reference: Any date inside the month being displayed

    Returns:
        List of WeekGroup objects for weeks with at least one entry,
        ascending by week number

    Example:
        >>> groups = group_by_week(entries, dt.date(2025, 1, 1))
        >>> [g.week_number for g in groups]
        [1, 2, 3, 5]
    """
    spans = month_week_spans(month_reference)

    by_week: Dict[int, List[TimeEntry]] = defaultdict(list)
    skipped = 0
    for entry in entries:
        span = find_week(spans, entry.entry_date)
        if span is None:
            skipped += 1
            continue
        by_week[span.week_number].append(entry)

    if skipped:
        logger.debug(f"Skipped {skipped} entries outside the target month")

    groups: List[WeekGroup] = []
    for span in spans:
        week_entries = by_week.get(span.week_number)
        if not week_entries:
            continue

        ordered = sorted(
            week_entries, key=lambda e: (e.entry_date, e.created_at), reverse=True
        )
        total_minutes = sum(e.duration_minutes for e in ordered)
        groups.append(
            WeekGroup(
                week_number=span.week_number,
                label=format_week_label(
                    span.week_number, span.start_date, span.end_date
                ),
                start_date=span.start_date,
                end_date=span.end_date,
                entries=ordered,
                total_minutes=total_minutes,
                total_hours=total_minutes / 60,
            )
        )

    logger.debug(f"Grouped entries into {len(groups)} of {len(spans)} week(s)")
    return groups
