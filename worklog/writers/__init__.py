"""Writers module for exporting engine results."""

from worklog.writers.summary_export import (
    date_groups_to_frame,
    entries_to_frame,
    generate_member_daily_matrix,
    week_groups_to_frame,
    write_csv,
)

__all__ = [
    "date_groups_to_frame",
    "entries_to_frame",
    "generate_member_daily_matrix",
    "week_groups_to_frame",
    "write_csv",
]
