"""Dashboard aggregator that runs the full period pipeline for one request.

This module wires search filtering, bucketing, statistics and empty-state
classification together so every part of a dashboard is computed from the
same filtered entry collection.
"""

import logging
from typing import Callable, Iterable, Optional

from worklog.aggregators.date_grouper import group_by_date
from worklog.aggregators.stats_aggregator import compute_stats
from worklog.aggregators.week_grouper import group_by_week
from worklog.calculators.period_resolver import Instant, calendar_date, resolve_range
from worklog.filters.empty_state import classify_empty_state, filter_is_displayable
from worklog.filters.search import apply_search, has_active_search
from worklog.models.dashboard import DashboardView
from worklog.models.period import FilterState, Period
from worklog.models.time_entry import TimeEntry
from worklog.utils.logging_utils import LogContext, log_function_call

logger = logging.getLogger(__name__)


class DashboardAggregator:
    """Builds a complete dashboard view from one period's entries.

    The aggregator:
    1. Applies the free-text search to the scoped entries
    2. Groups them by week for the month view, by date otherwise
    3. Computes period statistics from the same filtered entries
    4. Classifies the empty state when nothing is left

    Client filtering and soft-delete exclusion happen before entries reach
    the aggregator (see ``EntryReader.scope``).

    Attributes:
        include_empty_days: Pad the date buckets of week views with
            empty dates

    Example:
        >>> aggregator = DashboardAggregator(include_empty_days=True)
        >>> view = aggregator.build(entries, Period.WEEK, dt.date(2025, 1, 15))
        >>> len(view.date_groups)
        7
    """

    def __init__(self, include_empty_days: bool = False):
        """Initialize the dashboard aggregator.

        Args:
            include_empty_days: Pad week and month date groupings with
                empty dates
        """
        self.include_empty_days = include_empty_days

    @staticmethod
    def _is_first_time_user(has_any_entries: Optional[Callable[[], bool]]) -> bool:
        if has_any_entries is None:
            return False
        return not has_any_entries()

    @log_function_call
    def build(
        self,
        entries: Iterable[TimeEntry],
        period: Period,
        now: Instant,
        filter_state: Optional[FilterState] = None,
        client_name: Optional[str] = None,
        has_any_entries: Optional[Callable[[], bool]] = None,
    ) -> DashboardView:
        """Build the dashboard view for a period.

        Args:
            entries: Entries already scoped to user, period and client
            period: Reporting period
            now: Reference instant for the period
            filter_state: Active client filter and search query
            client_name: Display name of the filtered client, if resolvable
            has_any_entries: Called only when the result is empty and no
                filter explains it; returns True when the user has logged
                anything in any period. When missing, the user is treated
                as having history and gets the period empty state.

        Returns:
            DashboardView with groups, statistics and empty-state kind
        """
        period = Period(period)
        filter_state = filter_state or FilterState()
        date_range = resolve_range(period, now)

        with LogContext(period=period.value, range_start=str(date_range.start)):
            filtered = apply_search(entries, filter_state.search_query)

            if period == Period.MONTH:
                week_groups = group_by_week(filtered, calendar_date(now))
                date_groups = []
            else:
                week_groups = []
                date_groups = group_by_date(
                    filtered, period, now, self.include_empty_days
                )

            stats = compute_stats(filtered, period, month_reference=calendar_date(now))

            empty_state = classify_empty_state(
                result_count=len(filtered),
                has_search=has_active_search(filter_state),
                has_filter=filter_is_displayable(filter_state.client_id, client_name),
                is_first_time_user=lambda: self._is_first_time_user(has_any_entries),
            )

            logger.info(
                f"Built {period.value} dashboard: {stats.entry_count} entries, "
                f"{stats.total_hours:.2f} hours, empty state '{empty_state.value}'"
            )

        return DashboardView(
            period=period,
            date_range=date_range,
            entries=filtered,
            date_groups=date_groups,
            week_groups=week_groups,
            stats=stats,
            empty_state=empty_state,
        )
