"""Output formatting utilities for CLI."""

from typing import List, Optional

import click

from worklog.calculators.duration import format_hours
from worklog.models.dashboard import DashboardStats
from worklog.models.period import EmptyStateKind


def format_success(message: str) -> str:
    """Format a success message with green color.

    Args:
        message: The success message to format

    Returns:
        Formatted success message with color
    """
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 60) -> str:
    """Format data as a plain-text table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column, longer cells are truncated

    Returns:
        Formatted table as a string, or an empty string without headers
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(col_widths)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))
    col_widths = [min(w, max_width) for w in col_widths]

    def render(cells: List[str]) -> str:
        padded = [
            f" {str(cell)[:width]:<{width}} " for cell, width in zip(cells, col_widths)
        ]
        return "|" + "|".join(padded) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)
    return "\n".join(lines)


EMPTY_STATE_MESSAGES = {
    EmptyStateKind.SEARCH: "No entries match your search.",
    EmptyStateKind.COMBINED: "No entries match your search for this client.",
    EmptyStateKind.FILTER: "No entries for the selected client in this period.",
    EmptyStateKind.FIRST_TIME: "No time logged yet. Log your first entry to get started.",
    EmptyStateKind.PERIOD: "No entries in this period.",
}


def format_empty_state(kind: EmptyStateKind) -> Optional[str]:
    """Return the user-facing message for an empty state, or None if not empty."""
    message = EMPTY_STATE_MESSAGES.get(EmptyStateKind(kind))
    return format_info(message) if message else None


def format_stats(stats: DashboardStats) -> List[str]:
    """Render dashboard statistics as ``label: value`` lines.

    Optional statistics that the period does not define are omitted.
    """
    lines = [
        f"  Total:            {format_hours(stats.total_hours)}",
        f"  Entries:          {stats.entry_count}",
    ]
    if stats.top_client is not None:
        lines.append(
            f"  Top client:       {stats.top_client.name} "
            f"({format_hours(stats.top_client.hours)})"
        )
    if stats.days_with_entries is not None:
        lines.append(f"  Days with entries: {stats.days_with_entries}")
    if stats.average_per_day is not None:
        lines.append(f"  Average per day:  {format_hours(stats.average_per_day)}")
    if stats.weeks_in_month is not None:
        lines.append(f"  Weeks in month:   {stats.weeks_in_month}")
    if stats.average_per_week is not None:
        lines.append(f"  Average per week: {format_hours(stats.average_per_week)}")
    return lines
