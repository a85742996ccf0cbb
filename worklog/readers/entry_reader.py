"""Entry reader: the data-access boundary of the engine.

This module turns raw time-entry records (as exported from the data store
with their job > project > client, service and task joins nested inline)
into validated TimeEntry objects, and scopes them the way the dashboard
query does: by owner, date range, client and soft-delete marker.

Records are validated once, here. Everything downstream can rely on a
single nested shape instead of inspecting join results ad hoc.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from worklog.filters.search import apply_client_filter
from worklog.models.period import DateRange
from worklog.models.team import TeamMember
from worklog.models.time_entry import TimeEntry
from worklog.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class EntryReader:
    """Reader for loading and scoping time entries.

    The expected record format is one JSON object per entry::

        {
            "id": "...", "user_id": "...",
            "entry_date": "2025-01-15", "duration_minutes": 90,
            "created_at": "2025-01-15T09:00:00+07:00",
            "notes": "...", "deleted_at": null,
            "job": {"id": "...", "name": "...", "job_no": "...",
                    "project": {"id": "...", "name": "...",
                                "client": {"id": "...", "name": "..."}}},
            "service": {"id": "...", "name": "..."},
            "task": {"id": "...", "name": "..."} | null
        }

    Example:
        >>> reader = EntryReader()
        >>> entries = reader.read_file("entries.json")
        >>> week = reader.scope(entries, resolve_range(Period.WEEK, now), user_id="u1")
    """

    def parse_records(self, records: Iterable[Dict[str, Any]]) -> List[TimeEntry]:
        """Validate raw records into TimeEntry objects.

        Soft-deleted records are dropped. Records that fail validation are
        skipped with a warning rather than failing the whole batch.

        Args:
            records: Raw entry dictionaries

        Returns:
            List of validated, non-deleted TimeEntry objects
        """
        entries: List[TimeEntry] = []
        deleted = 0
        invalid = 0

        for index, record in enumerate(records):
            entry = self._parse_record(index, record)
            if entry is None:
                invalid += 1
            elif entry.is_deleted:
                deleted += 1
            else:
                entries.append(entry)

        logger.info(
            f"Parsed {len(entries)} entries "
            f"({deleted} soft-deleted, {invalid} invalid skipped)"
        )
        return entries

    def _parse_record(self, index: int, record: Any) -> Optional[TimeEntry]:
        """Parse a single record, returning None if it is invalid."""
        if not isinstance(record, dict):
            logger.warning(f"Skipping record {index}: expected an object")
            return None

        try:
            return TimeEntry.model_validate(record)
        except ValidationError as e:
            record_id = record.get("id", f"#{index}")
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            logger.warning(f"Skipping invalid entry {record_id}: {fields}")
            return None

    @log_function_call(level="INFO")
    def read_file(self, path: PathLike) -> List[TimeEntry]:
        """Read a JSON array of entry records from disk.

        Args:
            path: Path to the JSON export

        Returns:
            List of validated, non-deleted TimeEntry objects

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or not a JSON array
        """
        records = self._load_json_array(path)
        return self.parse_records(records)

    @log_function_call(level="INFO")
    def read_members(self, path: PathLike) -> List[TeamMember]:
        """Read a JSON array of team member records from disk.

        Unlike entries, an invalid member is an error: the member list
        defines who compliance is measured against.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON array
            pydantic.ValidationError: If a member record is invalid
        """
        records = self._load_json_array(path)
        members = [TeamMember.model_validate(record) for record in records]
        logger.info(f"Loaded {len(members)} team members")
        return members

    @staticmethod
    def _load_json_array(path: PathLike) -> List[Any]:
        file_path = Path(path)
        try:
            with file_path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"{file_path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise ValueError(
                f"{file_path} must contain a JSON array, got {type(data).__name__}"
            )
        return data

    def scope(
        self,
        entries: Iterable[TimeEntry],
        date_range: DateRange,
        client_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> List[TimeEntry]:
        """Restrict entries the way the dashboard query does.

        Args:
            entries: Entries to scope
            date_range: Inclusive entry-date range
            client_id: Keep only this client's entries (optional)
            user_id: Keep only this user's entries (optional)

        Returns:
            Scoped entries, newest entry date first, then newest created
        """
        scoped = [
            e
            for e in entries
            if e.entry_date in date_range
            and not e.is_deleted
            and (user_id is None or e.user_id == user_id)
        ]
        scoped = apply_client_filter(scoped, client_id)
        scoped.sort(key=lambda e: (e.entry_date, e.created_at), reverse=True)

        logger.debug(
            f"Scoped to {len(scoped)} entries in {date_range.start}..{date_range.end}"
        )
        return scoped

    def has_any_entries(
        self, entries: Iterable[TimeEntry], user_id: Optional[str] = None
    ) -> bool:
        """Check whether a user has any non-deleted entry, in any period."""
        return any(
            not e.is_deleted and (user_id is None or e.user_id == user_id)
            for e in entries
        )

    @staticmethod
    def client_name(entries: Iterable[TimeEntry], client_id: Optional[str]) -> Optional[str]:
        """Resolve a client's display name from the entries that reference it."""
        if not client_id:
            return None
        for entry in entries:
            client = entry.client
            if client is not None and client.id == client_id:
                return client.name
        return None
