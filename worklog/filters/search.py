"""Search and filter evaluation for dashboard entries.

Client filtering is an equality filter applied while scoping entries at
the data-access boundary. Free-text search is applied here, after the
entries are loaded, across every denormalized name on the entry.
"""

import logging
from typing import Iterable, List, Optional

from worklog.models.period import FilterState
from worklog.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)

# Shorter queries would match almost everything
MIN_SEARCH_LENGTH = 2


def _searchable_fields(entry: TimeEntry) -> List[Optional[str]]:
    """Collect the text fields a search query is matched against."""
    job = entry.job
    project = entry.project
    client = entry.client
    return [
        client.name if client else None,
        project.name if project else None,
        job.name if job else None,
        job.job_no if job else None,
        entry.service.name if entry.service else None,
        entry.task.name if entry.task else None,
        entry.notes,
    ]


def matches_query(entry: TimeEntry, query: str) -> bool:
    """Check whether any searchable field contains ``query``, ignoring case."""
    needle = query.casefold()
    return any(
        value is not None and needle in value.casefold()
        for value in _searchable_fields(entry)
    )


def apply_search(entries: Iterable[TimeEntry], query: Optional[str]) -> List[TimeEntry]:
    """Keep entries whose client, project, job, job number, service, task
    or notes contain the query.

    Args:
        entries: Entries to filter
        query: Free-text query; below MIN_SEARCH_LENGTH characters (after
            trimming) the entries are returned unchanged

    Returns:
        Matching entries in their original order

    Example:
        >>> [e.id for e in apply_search(entries, "acme")]
        ['e1', 'e4']
    """
    entries = list(entries)
    needle = (query or "").strip()
    if len(needle) < MIN_SEARCH_LENGTH:
        return entries

    matched = [entry for entry in entries if matches_query(entry, needle)]
    logger.debug(f"Search '{needle}' matched {len(matched)} of {len(entries)} entries")
    return matched


def apply_client_filter(
    entries: Iterable[TimeEntry], client_id: Optional[str]
) -> List[TimeEntry]:
    """Keep entries logged against ``client_id``; no-op when it is empty."""
    entries = list(entries)
    if not client_id:
        return entries
    return [e for e in entries if e.client is not None and e.client.id == client_id]


def filter_from_params(
    client: Optional[str] = None, q: Optional[str] = None
) -> FilterState:
    """Build a FilterState from raw request parameters.

    Values are trimmed; blank client ids and queries shorter than
    MIN_SEARCH_LENGTH are dropped.
    """
    client_id = (client or "").strip() or None
    search_query = (q or "").strip()
    if len(search_query) < MIN_SEARCH_LENGTH:
        search_query = ""
    return FilterState(client_id=client_id, search_query=search_query or None)


def has_active_filter(filter_state: FilterState) -> bool:
    """Check whether a client filter is set (search does not count)."""
    return bool(filter_state.client_id)


def has_active_search(filter_state: FilterState) -> bool:
    """Check whether a search query long enough to apply is set."""
    query = (filter_state.search_query or "").strip()
    return len(query) >= MIN_SEARCH_LENGTH
