"""Time entry data model for the worklog engine.

This module defines the TimeEntry model which represents a single logged
block of work, together with the denormalized master-data references
(job > project > client, service, task) that travel with every entry.
"""

import datetime as dt
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from worklog.models.base import BaseDataModel


class ClientRef(BaseDataModel):
    """Denormalized client reference."""

    id: str = Field(..., min_length=1)
    name: str


class ProjectRef(BaseDataModel):
    """Denormalized project reference with its owning client."""

    id: str = Field(..., min_length=1)
    name: str
    client: Optional[ClientRef] = None


class JobRef(BaseDataModel):
    """Denormalized job reference with job number and owning project."""

    id: str = Field(..., min_length=1)
    name: str
    job_no: Optional[str] = None
    project: Optional[ProjectRef] = None


class ServiceRef(BaseDataModel):
    """Denormalized service reference."""

    id: str = Field(..., min_length=1)
    name: str


class TaskRef(BaseDataModel):
    """Denormalized task reference."""

    id: str = Field(..., min_length=1)
    name: str


class TimeEntry(BaseDataModel):
    """Represents a single time entry.

    Entries arrive already scoped to their owner and period and already
    stripped of soft-deleted rows. Nested references may be missing; the
    engine degrades gracefully instead of failing.

    Attributes:
        id: Entry identifier
        user_id: Owning user identifier
        job: Job reference (with project and client)
        service: Service reference
        task: Optional task reference
        duration_minutes: Duration in whole minutes
        entry_date: Calendar date of the work (no time of day)
        notes: Optional free-text notes
        created_at: Creation timestamp, used for intra-day ordering
        deleted_at: Soft-delete marker

    Example:
        >>> entry = TimeEntry(
        ...     id="e1",
        ...     user_id="u1",
        ...     duration_minutes=90,
        ...     entry_date="2025-01-15",
        ...     created_at="2025-01-15T09:00:00",
        ... )
        >>> entry.entry_date
        datetime.date(2025, 1, 15)
        >>> entry.hours
        1.5
    """

    # Data-store rows carry foreign-key columns we do not model
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Entry identifier")
    user_id: str = Field(..., min_length=1, description="Owning user")
    job: Optional[JobRef] = Field(None, description="Job reference")
    service: Optional[ServiceRef] = Field(None, description="Service reference")
    task: Optional[TaskRef] = Field(None, description="Task reference")
    duration_minutes: int = Field(..., ge=0, description="Duration in minutes")
    entry_date: dt.date = Field(..., description="Calendar date of work")
    notes: Optional[str] = Field(None, description="Optional notes")
    created_at: dt.datetime = Field(..., description="Creation timestamp")
    deleted_at: Optional[dt.datetime] = Field(None, description="Soft-delete marker")

    @field_validator("entry_date", mode="before")
    @classmethod
    def validate_entry_date(cls, v):
        """Accept only calendar dates, never timestamps.

        A timestamp would silently pick up a timezone-dependent day, so
        ``2025-01-15T23:00:00`` is rejected rather than truncated.

        Raises:
            ValueError: If the value carries a time of day
        """
        if isinstance(v, dt.datetime):
            raise ValueError("entry_date must be a date, not a datetime")
        if isinstance(v, str) and len(v.strip()) != 10:
            raise ValueError(f"entry_date must be YYYY-MM-DD, got '{v}'")
        return v

    @field_validator("created_at", "deleted_at")
    @classmethod
    def assume_utc(cls, v):
        """Read timestamps without an offset as UTC so all entries compare."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=dt.timezone.utc)
        return v

    @property
    def project(self) -> Optional[ProjectRef]:
        """Project the entry was logged against, if known."""
        return self.job.project if self.job else None

    @property
    def client(self) -> Optional[ClientRef]:
        """Client the entry was logged against, if known."""
        project = self.project
        return project.client if project else None

    @property
    def hours(self) -> float:
        """Duration as unrounded decimal hours."""
        return self.duration_minutes / 60

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
