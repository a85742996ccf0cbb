"""Tests for period, date range and filter models."""

import datetime as dt

import pytest
from pydantic import ValidationError

from worklog.models import DateRange, EmptyStateKind, FilterState, Period


class TestPeriod:
    def test_values(self):
        assert [p.value for p in Period] == ["today", "week", "month"]

    def test_from_string(self):
        assert Period("week") is Period.WEEK

    def test_is_str(self):
        assert Period.MONTH == "month"


class TestEmptyStateKind:
    def test_all_kinds_present(self):
        assert {k.value for k in EmptyStateKind} == {
            "none",
            "search",
            "combined",
            "filter",
            "first_time",
            "period",
        }


class TestDateRange:
    """Test suite for DateRange."""

    def test_single_day(self):
        day = dt.date(2025, 1, 15)
        r = DateRange(start=day, end=day)
        assert r.days == 1
        assert day in r

    def test_contains_is_inclusive(self):
        r = DateRange(start=dt.date(2025, 1, 13), end=dt.date(2025, 1, 19))
        assert dt.date(2025, 1, 13) in r
        assert dt.date(2025, 1, 19) in r
        assert dt.date(2025, 1, 12) not in r
        assert dt.date(2025, 1, 20) not in r

    def test_rejects_inverted_range(self):
        with pytest.raises(ValidationError) as exc_info:
            DateRange(start=dt.date(2025, 1, 20), end=dt.date(2025, 1, 19))
        assert "must not be after" in str(exc_info.value)


class TestFilterState:
    def test_defaults_are_empty(self):
        state = FilterState()
        assert state.client_id is None
        assert state.search_query is None

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            FilterState(client="c1")
