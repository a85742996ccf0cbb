"""Worklog: period aggregation engine for time-tracking dashboards."""
