"""Period, date range and request filter models.

These are request-scoped value objects: they are created per aggregation
call and never persisted.
"""

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from worklog.models.base import BaseDataModel


class Period(str, Enum):
    """Reporting window selector."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


class EmptyStateKind(str, Enum):
    """Which "nothing to show" presentation applies to a result set."""

    NONE = "none"
    SEARCH = "search"
    COMBINED = "combined"
    FILTER = "filter"
    FIRST_TIME = "first_time"
    PERIOD = "period"


class DateRange(BaseDataModel):
    """Closed calendar-date range.

    Attributes:
        start: First date in the range (inclusive)
        end: Last date in the range (inclusive)

    Example:
        >>> r = DateRange(start=dt.date(2025, 1, 13), end=dt.date(2025, 1, 19))
        >>> r.days
        7
        >>> dt.date(2025, 1, 15) in r
        True
    """

    start: dt.date = Field(..., description="First date (inclusive)")
    end: dt.date = Field(..., description="Last date (inclusive)")

    @model_validator(mode="after")
    def validate_order(self) -> "DateRange":
        """Validate that start does not come after end.

        Raises:
            ValueError: If start > end
        """
        if self.start > self.end:
            raise ValueError(
                f"start ({self.start}) must not be after end ({self.end})"
            )
        return self

    @property
    def days(self) -> int:
        """Number of calendar days covered by the range."""
        return (self.end - self.start).days + 1

    def __contains__(self, day: dt.date) -> bool:
        return self.start <= day <= self.end


class FilterState(BaseDataModel):
    """Filters requested by the user for one dashboard view.

    Attributes:
        client_id: Restrict entries to one client (applied at data access)
        search_query: Free-text query (applied by the search evaluator)
    """

    client_id: Optional[str] = None
    search_query: Optional[str] = None
