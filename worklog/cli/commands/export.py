"""Export command."""

from pathlib import Path
from typing import Optional

import click

from worklog.aggregators.date_grouper import group_by_date
from worklog.aggregators.week_grouper import group_by_week
from worklog.calculators.period_resolver import calendar_date, resolve_range
from worklog.cli.error_handlers import (
    DataValidationError,
    ProcessingError,
    with_error_handling,
)
from worklog.cli.utils.formatters import format_info, format_success
from worklog.cli.utils.inputs import (
    PERIOD_CHOICES,
    load_entries,
    load_members,
    load_settings,
    parse_now_input,
)
from worklog.models.period import Period
from worklog.readers.entry_reader import EntryReader
from worklog.utils.logging_utils import LogContext, generate_correlation_id
from worklog.writers.summary_export import (
    date_groups_to_frame,
    entries_to_frame,
    generate_member_daily_matrix,
    week_groups_to_frame,
    write_csv,
)

VIEW_CHOICES = ["entries", "dates", "weeks", "matrix"]


@click.command(name="export")
@click.argument(
    "entries_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--view",
    type=click.Choice(VIEW_CHOICES),
    default="entries",
    show_default=True,
    help="What to export: raw entries, date buckets, week buckets or a member matrix",
)
@click.option(
    "--period",
    type=click.Choice(PERIOD_CHOICES),
    default=Period.MONTH.value,
    show_default=True,
    help="Reporting period",
)
@click.option(
    "--now",
    "now_value",
    type=str,
    default=None,
    help="Reference date (YYYY-MM-DD) or ISO datetime (default: current time)",
)
@click.option("--user", type=str, default=None, help="Only entries of this user id")
@click.option(
    "--members",
    "members_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Team members JSON file (required for --view matrix)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def export(
    entries_file: Path,
    output: Path,
    view: str,
    period: str,
    now_value: Optional[str],
    user: Optional[str],
    members_file: Optional[Path],
    debug: bool,
):
    """Export a period's entries or buckets to CSV.

    The ``weeks`` view always covers the month containing ``--now``.

    Example:
        worklog export entries.json out/january.csv --view weeks --now 2025-01-15
        worklog export entries.json out/team.csv --view matrix --members members.json
    """
    with with_error_handling(debug):
        if view == "matrix" and members_file is None:
            raise DataValidationError(
                "--view matrix needs a members file",
                recovery_hint="Pass --members members.json",
            )

        settings = load_settings()
        now = parse_now_input(now_value, settings)
        selected = Period.MONTH if view == "weeks" else Period(period)

        with LogContext(correlation_id=generate_correlation_id(), command="export"):
            reader = EntryReader()
            date_range = resolve_range(selected, now)
            entries = reader.scope(
                load_entries(reader, entries_file), date_range, user_id=user
            )

            if view == "entries":
                frame = entries_to_frame(entries)
            elif view == "dates":
                frame = date_groups_to_frame(
                    group_by_date(entries, selected, now, settings.include_empty_days)
                )
            elif view == "weeks":
                frame = week_groups_to_frame(group_by_week(entries, calendar_date(now)))
            else:
                members = load_members(reader, members_file)
                frame = generate_member_daily_matrix(members, entries)

            try:
                path = write_csv(frame, output, index=view == "matrix")
            except OSError as e:
                raise ProcessingError(
                    f"Could not write {output}: {e}",
                    recovery_hint="Check that the output directory is writable",
                ) from e

        click.echo(format_info(f"Period: {date_range.start} to {date_range.end}"))
        click.echo(format_success(f"Exported {len(frame)} row(s) to {path}"))
