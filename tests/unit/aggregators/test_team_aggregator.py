"""Tests for team compliance aggregation."""

import datetime as dt

import pytest

from worklog.aggregators.team_aggregator import (
    compute_team_stats,
    group_team_members,
    member_stats,
    weekly_breakdown,
)
from worklog.models import TeamMember


@pytest.fixture
def members():
    return [
        TeamMember(id="u1", email="somchai@example.com", display_name="Somchai"),
        TeamMember(id="u2", email="anong@example.com", display_name="anong"),
        TeamMember(id="u3", email="mali@example.com", display_name="Mali"),
        TeamMember(id="u4", email="boon@example.com", display_name="Boon"),
    ]


class TestMemberStats:
    def test_attaches_hours_and_counts(self, members, make_entry):
        entries = [
            make_entry(user_id="u1", duration_minutes=300),
            make_entry(user_id="u1", duration_minutes=180),
        ]
        stats = member_stats(members, entries)
        assert [m.id for m in stats] == ["u1", "u2", "u3", "u4"]
        assert stats[0].total_hours == 8.0
        assert stats[0].entry_count == 2
        assert stats[0].is_complete is True
        assert stats[1].has_logged is False

    def test_custom_target(self, members, make_entry):
        entries = [make_entry(user_id="u1", duration_minutes=240)]
        assert member_stats(members, entries, work_hours_target=4)[0].is_complete


class TestGroupTeamMembers:
    """Test suite for group_team_members."""

    def test_split_and_ordering(self, members, make_entry):
        entries = [
            make_entry(user_id="u3", duration_minutes=60),
            make_entry(user_id="u1", duration_minutes=240),
        ]
        grouped = group_team_members(members, entries)
        assert [m.id for m in grouped.logged] == ["u1", "u3"]
        assert [m.display_name for m in grouped.not_logged] == ["anong", "Boon"]

    def test_nobody_logged(self, members):
        grouped = group_team_members(members, [])
        assert grouped.logged == []
        assert len(grouped.not_logged) == 4


class TestComputeTeamStats:
    """Test suite for compute_team_stats."""

    def test_compliance_and_average(self, members, make_entry):
        entries = [
            make_entry(user_id="u1", duration_minutes=480),
            make_entry(user_id="u2", duration_minutes=240),
        ]
        stats = compute_team_stats(members, entries)
        assert stats.total_members == 4
        assert stats.logged_count == 2
        assert stats.total_hours == 12.0
        assert stats.average_hours == 6.0
        assert stats.compliance_rate == 0.5

    def test_non_members_ignored(self, members, make_entry):
        entries = [make_entry(user_id="outsider", duration_minutes=600)]
        stats = compute_team_stats(members, entries)
        assert stats.total_hours == 0
        assert stats.logged_count == 0
        assert stats.average_hours is None
        assert stats.compliance_rate == 0.0

    def test_empty_team(self):
        stats = compute_team_stats([], [])
        assert stats.total_members == 0
        assert stats.compliance_rate is None
        assert stats.average_hours is None


class TestWeeklyBreakdown:
    def test_monday_to_sunday(self, make_entry):
        entries = [
            make_entry(entry_date=dt.date(2026, 1, 5), duration_minutes=90),
            make_entry(entry_date=dt.date(2026, 1, 5), user_id="u2", duration_minutes=30),
            make_entry(entry_date=dt.date(2026, 1, 7), duration_minutes=60),
        ]
        days = weekly_breakdown(entries, dt.date(2026, 1, 7))
        assert [d.day_of_week for d in days] == [
            "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"
        ]
        assert days[0].date == dt.date(2026, 1, 5)
        assert days[0].total_hours == 2.0
        assert days[2].is_today is True
        assert sum(d.is_today for d in days) == 1
        assert days[6].total_hours == 0.0
