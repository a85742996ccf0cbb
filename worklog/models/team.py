"""Team compliance models used by the manager view."""

import datetime as dt
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from worklog.models.base import BaseDataModel

Role = Literal["staff", "manager", "admin", "super_admin"]


class TeamMember(BaseDataModel):
    """A member of one of the manager's departments.

    Example:
        >>> member = TeamMember(id="u1", email="somchai@example.com", display_name="")
        >>> member.display_name
        'somchai'
    """

    id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    display_name: str = ""
    department_id: Optional[str] = None
    department_name: str = ""
    role: Role = "staff"

    @model_validator(mode="before")
    @classmethod
    def default_display_name(cls, data):
        """Fall back to the e-mail local part when no display name is set."""
        if isinstance(data, dict):
            name = (data.get("display_name") or "").strip()
            if not name:
                email = data.get("email") or ""
                name = email.split("@")[0]
            data = {**data, "display_name": name}
        return data


class TeamMemberWithStats(TeamMember):
    """Team member plus the hours they logged in the period."""

    total_hours: float = 0.0
    entry_count: int = 0
    has_logged: bool = False
    is_complete: bool = False


class TeamMembersGrouped(BaseDataModel):
    """Members split by whether they logged any time."""

    logged: List[TeamMemberWithStats] = Field(default_factory=list)
    not_logged: List[TeamMemberWithStats] = Field(default_factory=list)


class TeamStats(BaseDataModel):
    """Team-level summary for a period.

    ``average_hours`` is per member who logged time and ``compliance_rate``
    is the share of members who logged any time; both are unset when their
    denominator is zero.
    """

    total_members: int = 0
    logged_count: int = 0
    total_hours: float = 0.0
    average_hours: Optional[float] = None
    compliance_rate: Optional[float] = None


class DailyBreakdown(BaseDataModel):
    """Team hours for one day of the current week."""

    date: dt.date
    day_of_week: str
    total_hours: float = 0.0
    is_today: bool = False
