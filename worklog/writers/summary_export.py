"""Tabular export of dashboard results.

This module turns engine results into pandas DataFrames with
human-readable column names, ready to be written as CSV for spreadsheet
users.
"""

import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

import pandas as pd

from worklog.models.dashboard import EntryGroup, WeekGroup
from worklog.models.team import TeamMember
from worklog.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)

ENTRY_COLUMNS = [
    "Date",
    "Client",
    "Project",
    "Job No",
    "Job",
    "Service",
    "Task",
    "Minutes",
    "Hours",
    "Notes",
]

DATE_GROUP_COLUMNS = ["Date", "Entries", "Minutes", "Hours"]

WEEK_GROUP_COLUMNS = ["Week", "Label", "Start Date", "End Date", "Entries", "Minutes", "Hours"]


def _entry_row(entry: TimeEntry) -> Dict[str, object]:
    job = entry.job
    project = entry.project
    client = entry.client
    return {
        "Date": entry.entry_date.isoformat(),
        "Client": client.name if client else "",
        "Project": project.name if project else "",
        "Job No": (job.job_no or "") if job else "",
        "Job": job.name if job else "",
        "Service": entry.service.name if entry.service else "",
        "Task": entry.task.name if entry.task else "",
        "Minutes": entry.duration_minutes,
        "Hours": entry.hours,
        "Notes": entry.notes or "",
    }


def entries_to_frame(entries: Iterable[TimeEntry]) -> pd.DataFrame:
    """One row per entry, in input order."""
    rows = [_entry_row(entry) for entry in entries]
    return pd.DataFrame(rows, columns=ENTRY_COLUMNS)


def date_groups_to_frame(groups: Sequence[EntryGroup]) -> pd.DataFrame:
    """One row per date bucket, in bucket order (newest first)."""
    rows = [
        {
            "Date": group.date.isoformat(),
            "Entries": len(group.entries),
            "Minutes": group.total_minutes,
            "Hours": group.total_hours,
        }
        for group in groups
    ]
    return pd.DataFrame(rows, columns=DATE_GROUP_COLUMNS)


def week_groups_to_frame(groups: Sequence[WeekGroup]) -> pd.DataFrame:
    """One row per week bucket, in week order."""
    rows = [
        {
            "Week": group.week_number,
            "Label": group.label,
            "Start Date": group.start_date.isoformat(),
            "End Date": group.end_date.isoformat(),
            "Entries": len(group.entries),
            "Minutes": group.total_minutes,
            "Hours": group.total_hours,
        }
        for group in groups
    ]
    return pd.DataFrame(rows, columns=WEEK_GROUP_COLUMNS)


def generate_member_daily_matrix(
    members: Sequence[TeamMember], entries: Iterable[TimeEntry]
) -> pd.DataFrame:
    """Generate a member-by-date matrix of logged hours.

    Rows are member display names (all members, including those who
    logged nothing), columns are ISO dates that have at least one entry,
    cells are hours. Totals are kept per member id, so members sharing a
    display name stay on separate rows. Entries from users outside
    ``members`` are ignored.

    Example:
        >>> matrix = generate_member_daily_matrix(members, entries)
        >>> matrix.loc["Anong", "2026-01-05"]
        7.5
    """
    member_ids = {m.id for m in members}
    minutes: Dict[str, Dict[str, int]] = defaultdict(lambda: defaultdict(int))

    for entry in entries:
        if entry.user_id not in member_ids:
            continue
        minutes[entry.user_id][entry.entry_date.isoformat()] += entry.duration_minutes

    dates: List[str] = sorted({day for per_day in minutes.values() for day in per_day})

    df = pd.DataFrame(0.0, index=[m.id for m in members], columns=dates)
    for user_id, per_day in minutes.items():
        for day, total in per_day.items():
            df.loc[user_id, day] = total / 60
    df.index = [m.display_name for m in members]

    logger.info(f"Generated matrix with {len(df)} members and {len(df.columns)} dates")
    return df


def write_csv(frame: pd.DataFrame, path: Union[str, Path], index: bool = False) -> Path:
    """Write a DataFrame as UTF-8 CSV, creating parent directories.

    Returns:
        The path written to
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output, index=index, encoding="utf-8")
    logger.info(f"Wrote {len(frame)} rows to {output}")
    return output
