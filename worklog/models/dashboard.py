"""Result models produced by the aggregation engine.

Numbers are raw: hours are unrounded floats and formatting is left to
whatever renders them.
"""

import datetime as dt
from typing import List, Optional

from pydantic import Field

from worklog.models.base import BaseDataModel
from worklog.models.period import DateRange, EmptyStateKind, Period
from worklog.models.time_entry import TimeEntry


class EntryGroup(BaseDataModel):
    """Entries logged on one calendar date.

    Attributes:
        date: Bucket date
        entries: Entries for the date, most recently created first
        total_minutes: Sum of entry durations
        total_hours: ``total_minutes / 60``
    """

    date: dt.date
    entries: List[TimeEntry] = Field(default_factory=list)
    total_minutes: int = Field(0, ge=0)
    total_hours: float = Field(0.0, ge=0)


class WeekSpan(BaseDataModel):
    """One Monday-aligned week of a month, clipped to the month."""

    week_number: int = Field(..., ge=1)
    start_date: dt.date
    end_date: dt.date


class WeekGroup(BaseDataModel):
    """Entries logged during one week of a month.

    Attributes:
        week_number: 1-based position of the week within the month
        label: Human label, e.g. ``"Week 3 (13-19 Jan)"``
        start_date: First day of the week inside the month
        end_date: Last day of the week inside the month
        entries: Entries sorted by date then creation time, newest first
        total_minutes: Sum of entry durations
        total_hours: ``total_minutes / 60``
    """

    week_number: int = Field(..., ge=1)
    label: str
    start_date: dt.date
    end_date: dt.date
    entries: List[TimeEntry] = Field(default_factory=list)
    total_minutes: int = Field(0, ge=0)
    total_hours: float = Field(0.0, ge=0)


class TopClient(BaseDataModel):
    """Client with the most hours in a period."""

    id: str
    name: str
    hours: float


class DashboardStats(BaseDataModel):
    """Summary numbers for a period.

    The optional fields are only populated for periods where they mean
    something: day figures for week and month, week figures for month.
    """

    total_hours: float = 0.0
    entry_count: int = 0
    top_client: Optional[TopClient] = None
    days_with_entries: Optional[int] = None
    average_per_day: Optional[float] = None
    weeks_in_month: Optional[int] = None
    average_per_week: Optional[float] = None


class DashboardView(BaseDataModel):
    """Everything a dashboard needs for one period, computed in one pass."""

    period: Period
    date_range: DateRange
    entries: List[TimeEntry] = Field(default_factory=list)
    date_groups: List[EntryGroup] = Field(default_factory=list)
    week_groups: List[WeekGroup] = Field(default_factory=list)
    stats: DashboardStats
    empty_state: EmptyStateKind = EmptyStateKind.NONE
