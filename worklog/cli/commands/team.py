"""Team compliance command."""

from pathlib import Path
from typing import Optional

import click

from worklog.aggregators.team_aggregator import (
    compute_team_stats,
    group_team_members,
    weekly_breakdown,
)
from worklog.calculators.duration import format_hours
from worklog.calculators.period_resolver import format_period_label, resolve_range
from worklog.cli.error_handlers import with_error_handling
from worklog.cli.utils.formatters import (
    format_info,
    format_success,
    format_table,
    format_warning,
)
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


@click.command(name="team")
@click.argument(
    "entries_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument(
    "members_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--period",
    type=click.Choice(PERIOD_CHOICES),
    default=Period.TODAY.value,
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
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def team(
    entries_file: Path,
    members_file: Path,
    period: str,
    now_value: Optional[str],
    debug: bool,
):
    """Show which team members logged time in a period.

    Lists members who logged (most hours first) and members who did not,
    followed by team totals and compliance. The week period adds a
    Monday to Sunday breakdown of team hours.

    Example:
        worklog team entries.json members.json --now 2026-01-07
        worklog team entries.json members.json --period week
    """
    with with_error_handling(debug):
        settings = load_settings()
        now = parse_now_input(now_value, settings)
        selected = Period(period)

        with LogContext(correlation_id=generate_correlation_id(), command="team"):
            reader = EntryReader()
            members = load_members(reader, members_file)
            date_range = resolve_range(selected, now)
            entries = reader.scope(load_entries(reader, entries_file), date_range)

            grouped = group_team_members(members, entries, settings.work_hours_target)
            stats = compute_team_stats(members, entries)
            breakdown = (
                weekly_breakdown(entries, now) if selected == Period.WEEK else []
            )

        click.echo(
            format_info(
                f"{format_period_label(selected)}: "
                f"{date_range.start} to {date_range.end}"
            )
        )
        click.echo()

        if grouped.logged:
            click.echo(format_success(f"Logged ({len(grouped.logged)})"))
            rows = [
                [
                    m.display_name,
                    m.department_name or "-",
                    str(m.entry_count),
                    format_hours(m.total_hours),
                    "yes" if m.is_complete else "no",
                ]
                for m in grouped.logged
            ]
            click.echo(
                format_table(["Member", "Department", "Entries", "Hours", "Complete"], rows)
            )
            click.echo()

        if grouped.not_logged:
            click.echo(format_warning(f"Not logged ({len(grouped.not_logged)})"))
            for member in grouped.not_logged:
                click.echo(f"  {member.display_name} <{member.email}>")
            click.echo()

        click.echo("Team:")
        click.echo(f"  Members:     {stats.total_members}")
        click.echo(f"  Logged:      {stats.logged_count}")
        click.echo(f"  Total hours: {format_hours(stats.total_hours)}")
        if stats.average_hours is not None:
            click.echo(f"  Average:     {format_hours(stats.average_hours)}")
        if stats.compliance_rate is not None:
            click.echo(f"  Compliance:  {stats.compliance_rate:.0%}")

        if breakdown:
            click.echo()
            rows = [
                [
                    f"{d.day_of_week}{' *' if d.is_today else ''}",
                    d.date.isoformat(),
                    format_hours(d.total_hours),
                ]
                for d in breakdown
            ]
            click.echo(format_table(["Day", "Date", "Hours"], rows))
