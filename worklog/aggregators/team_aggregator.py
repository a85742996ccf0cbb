"""Team compliance aggregation for the manager dashboard.

This module rolls a team's entries up per member, splits the team into
members who logged time and members who did not, and computes team-level
totals, averages and compliance for a period.
"""

import datetime as dt
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from worklog.calculators.period_resolver import (
    Instant,
    calendar_date,
    enumerate_dates,
    resolve_range,
)
from worklog.models.period import Period
from worklog.models.team import (
    DailyBreakdown,
    TeamMember,
    TeamMembersGrouped,
    TeamMemberWithStats,
    TeamStats,
)
from worklog.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)

DEFAULT_WORK_HOURS_TARGET = 8.0

# Fixed English abbreviations, independent of the process locale
DAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _minutes_by_user(entries: Iterable[TimeEntry]) -> Dict[str, Tuple[int, int]]:
    """Map user id to (total minutes, entry count)."""
    totals: Dict[str, List[int]] = defaultdict(lambda: [0, 0])
    for entry in entries:
        totals[entry.user_id][0] += entry.duration_minutes
        totals[entry.user_id][1] += 1
    return {user_id: (m, c) for user_id, (m, c) in totals.items()}


def member_stats(
    members: Iterable[TeamMember],
    entries: Iterable[TimeEntry],
    work_hours_target: float = DEFAULT_WORK_HOURS_TARGET,
) -> List[TeamMemberWithStats]:
    """Attach period hours and entry counts to each team member.

    Args:
        members: Team members in scope
        entries: Entries for the period, from any of those members
        work_hours_target: Hours a member must reach to count as complete

    Returns:
        One TeamMemberWithStats per member, in input order
    """
    totals = _minutes_by_user(entries)

    result: List[TeamMemberWithStats] = []
    for member in members:
        minutes, count = totals.get(member.id, (0, 0))
        hours = minutes / 60
        result.append(
            TeamMemberWithStats(
                **member.model_dump(),
                total_hours=hours,
                entry_count=count,
                has_logged=count > 0,
                is_complete=hours >= work_hours_target,
            )
        )
    return result


def group_team_members(
    members: Iterable[TeamMember],
    entries: Iterable[TimeEntry],
    work_hours_target: float = DEFAULT_WORK_HOURS_TARGET,
) -> TeamMembersGrouped:
    """Split team members by whether they logged any time.

    Logged members are sorted by hours, most first; members who have not
    logged are sorted by display name.

    Example:
        >>> grouped = group_team_members(members, todays_entries)
        >>> [m.display_name for m in grouped.not_logged]
        ['Anong', 'Somchai']
    """
    with_stats = member_stats(members, entries, work_hours_target)

    logged = [m for m in with_stats if m.has_logged]
    not_logged = [m for m in with_stats if not m.has_logged]

    logged.sort(key=lambda m: m.total_hours, reverse=True)
    not_logged.sort(key=lambda m: m.display_name.casefold())

    logger.info(f"Team: {len(logged)} logged, {len(not_logged)} not logged")
    return TeamMembersGrouped(logged=logged, not_logged=not_logged)


def compute_team_stats(
    members: Iterable[TeamMember], entries: Iterable[TimeEntry]
) -> TeamStats:
    """Compute team totals, average hours and compliance for a period.

    Entries from users who are not in ``members`` are ignored so the
    totals match the member list being shown.

    Returns:
        TeamStats; ``average_hours`` is per logged member and
        ``compliance_rate`` is logged members over all members
    """
    member_ids = {m.id for m in members}
    totals = _minutes_by_user(e for e in entries if e.user_id in member_ids)

    total_members = len(member_ids)
    logged_count = sum(1 for _, count in totals.values() if count > 0)
    total_hours = sum(minutes for minutes, _ in totals.values()) / 60

    return TeamStats(
        total_members=total_members,
        logged_count=logged_count,
        total_hours=total_hours,
        average_hours=total_hours / logged_count if logged_count > 0 else None,
        compliance_rate=logged_count / total_members if total_members > 0 else None,
    )


def weekly_breakdown(entries: Iterable[TimeEntry], now: Instant) -> List[DailyBreakdown]:
    """Team hours for each day, Monday to Sunday, of the week containing ``now``.

    Example:
        >>> [d.day_of_week for d in weekly_breakdown(entries, dt.date(2026, 1, 7))]
        ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']
    """
    today = calendar_date(now)
    days = enumerate_dates(resolve_range(Period.WEEK, today))

    minutes: Dict[dt.date, int] = defaultdict(int)
    for entry in entries:
        minutes[entry.entry_date] += entry.duration_minutes

    return [
        DailyBreakdown(
            date=day,
            day_of_week=DAY_ABBREVIATIONS[day.weekday()],
            total_hours=minutes[day] / 60,
            is_today=day == today,
        )
        for day in days
    ]
