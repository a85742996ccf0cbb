"""Aggregators module for bucketing and summarizing time entries.

This module provides the period aggregation engine: date and week
bucketing, period statistics, team compliance and the dashboard pipeline
that ties them together.
"""

from worklog.aggregators.dashboard_aggregator import DashboardAggregator
from worklog.aggregators.date_grouper import group_by_date
from worklog.aggregators.stats_aggregator import compute_stats, top_clients
from worklog.aggregators.team_aggregator import (
    compute_team_stats,
    group_team_members,
    member_stats,
    weekly_breakdown,
)
from worklog.aggregators.week_grouper import (
    format_week_label,
    group_by_week,
    month_week_spans,
)

__all__ = [
    "DashboardAggregator",
    "group_by_date",
    "group_by_week",
    "month_week_spans",
    "format_week_label",
    "compute_stats",
    "top_clients",
    "group_team_members",
    "member_stats",
    "compute_team_stats",
    "weekly_breakdown",
]
