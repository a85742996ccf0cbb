"""Data models for the worklog engine.

This package contains Pydantic models for all entities:
- BaseDataModel: Base class with common configuration
- TimeEntry and its denormalized references
- Period, DateRange, FilterState, EmptyStateKind: request values
- EntryGroup, WeekGroup, DashboardStats, DashboardView: engine results
- TeamMember and team statistics
"""

from worklog.models.base import BaseDataModel
from worklog.models.dashboard import (
    DashboardStats,
    DashboardView,
    EntryGroup,
    TopClient,
    WeekGroup,
    WeekSpan,
)
from worklog.models.period import DateRange, EmptyStateKind, FilterState, Period
from worklog.models.team import (
    DailyBreakdown,
    TeamMember,
    TeamMembersGrouped,
    TeamMemberWithStats,
    TeamStats,
)
from worklog.models.time_entry import (
    ClientRef,
    JobRef,
    ProjectRef,
    ServiceRef,
    TaskRef,
    TimeEntry,
)

__all__ = [
    "BaseDataModel",
    "ClientRef",
    "ProjectRef",
    "JobRef",
    "ServiceRef",
    "TaskRef",
    "TimeEntry",
    "Period",
    "DateRange",
    "FilterState",
    "EmptyStateKind",
    "EntryGroup",
    "WeekSpan",
    "WeekGroup",
    "TopClient",
    "DashboardStats",
    "DashboardView",
    "TeamMember",
    "TeamMemberWithStats",
    "TeamMembersGrouped",
    "TeamStats",
    "DailyBreakdown",
]
