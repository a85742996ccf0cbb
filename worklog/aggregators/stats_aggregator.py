"""Period statistics for the dashboard summary card.

This module computes totals, the top client and per-day / per-week
averages from the same entry collection the groupers receive, so the
numbers always agree with the listed entries.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from worklog.aggregators.week_grouper import month_week_spans
from worklog.calculators.period_resolver import Instant
from worklog.models.dashboard import DashboardStats, TopClient
from worklog.models.period import Period
from worklog.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)


def top_clients(entries: Iterable[TimeEntry], limit: Optional[int] = None) -> List[TopClient]:
    """Rank clients by hours logged against them.

    Entries without a client reference are ignored. Ties are broken by
    client name, then client id, so the ranking never depends on input
    order.

    Args:
        entries: Entries to rank
        limit: Maximum number of clients to return (all when None)

    Returns:
        List of TopClient objects, most hours first
    """
    minutes: Dict[str, int] = defaultdict(int)
    names: Dict[str, str] = {}

    for entry in entries:
        client = entry.client
        if client is None:
            continue
        minutes[client.id] += entry.duration_minutes
        names.setdefault(client.id, client.name)

    def rank(client_id: str) -> Tuple[int, str, str]:
        return (-minutes[client_id], names[client_id].casefold(), client_id)

    ranked = [
        TopClient(id=client_id, name=names[client_id], hours=minutes[client_id] / 60)
        for client_id in sorted(minutes, key=rank)
    ]
    return ranked if limit is None else ranked[:limit]


def compute_stats(
    entries: Iterable[TimeEntry],
    period: Period,
    month_reference: Optional[Instant] = None,
) -> DashboardStats:
    """Compute summary statistics for a period.

    Args:
        entries: Entries for the period (after search filtering)
        period: Period the entries belong to
        month_reference: Any date in the month, used to count the month's
            weeks. Defaults to the latest entry date.

    Returns:
        DashboardStats with day figures for week/month and week figures
        for month; averages stay unset when their denominator is zero

    Example:
        >>> stats = compute_stats(entries, Period.MONTH, dt.date(2025, 1, 1))
        >>> stats.weeks_in_month
        5
    """
    period = Period(period)
    entries = list(entries)

    total_minutes = sum(e.duration_minutes for e in entries)
    total_hours = total_minutes / 60
    ranked = top_clients(entries, limit=1)

    fields = {
        "total_hours": total_hours,
        "entry_count": len(entries),
        "top_client": ranked[0] if ranked else None,
    }

    if period in (Period.WEEK, Period.MONTH):
        days_with_entries = len({e.entry_date for e in entries})
        fields["days_with_entries"] = days_with_entries
        if days_with_entries > 0:
            fields["average_per_day"] = total_hours / days_with_entries

    if period == Period.MONTH:
        reference: Optional[Instant] = month_reference
        if reference is None and entries:
            reference = max(e.entry_date for e in entries)
        if reference is not None:
            weeks_in_month = len(month_week_spans(reference))
            fields["weeks_in_month"] = weeks_in_month
            if weeks_in_month > 0:
                fields["average_per_week"] = total_hours / weeks_in_month
        else:
            logger.debug("No month reference and no entries; skipping week stats")

    return DashboardStats(**fields)
