"""Empty-state classification.

When a dashboard query returns nothing, exactly one explanation is shown.
Priority, highest first:

1. Combined - search and client filter both active
2. Search - only a search is active
3. Filter - only a client filter is active
4. FirstTime - the user has never logged anything
5. Period - nothing logged in the selected period
"""

from typing import Callable, Optional

from worklog.models.period import EmptyStateKind


def filter_is_displayable(client_id: Optional[str], client_name: Optional[str]) -> bool:
    """A client filter only counts when its client name can be shown."""
    return bool(client_id) and bool((client_name or "").strip())


def classify_empty_state(
    result_count: int,
    has_search: bool,
    has_filter: bool,
    is_first_time_user: Callable[[], bool],
) -> EmptyStateKind:
    """Pick the empty state for a (filtered) result set.

    Args:
        result_count: Number of entries left after filtering
        has_search: Whether a search query is active
        has_filter: Whether a displayable client filter is active
        is_first_time_user: Called only when no filter or search explains
            the empty result; returns True when the user has no entries at
            all, in any period

    Returns:
        EmptyStateKind.NONE for non-empty results, otherwise the highest
        priority applicable kind

    Example:
        >>> classify_empty_state(0, True, True, lambda: True)
        <EmptyStateKind.COMBINED: 'combined'>
    """
    if result_count > 0:
        return EmptyStateKind.NONE

    if has_search and has_filter:
        return EmptyStateKind.COMBINED
    if has_search:
        return EmptyStateKind.SEARCH
    if has_filter:
        return EmptyStateKind.FILTER

    if is_first_time_user():
        return EmptyStateKind.FIRST_TIME
    return EmptyStateKind.PERIOD
