"""Search, filter and empty-state evaluation."""

from worklog.filters.empty_state import classify_empty_state, filter_is_displayable
from worklog.filters.search import (
    MIN_SEARCH_LENGTH,
    apply_client_filter,
    apply_search,
    filter_from_params,
    has_active_filter,
    has_active_search,
    matches_query,
)

__all__ = [
    "MIN_SEARCH_LENGTH",
    "apply_client_filter",
    "apply_search",
    "classify_empty_state",
    "filter_from_params",
    "filter_is_displayable",
    "has_active_filter",
    "has_active_search",
    "matches_query",
]
