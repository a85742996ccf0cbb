"""Dashboard command."""

from pathlib import Path
from typing import Optional

import click

from worklog.aggregators.dashboard_aggregator import DashboardAggregator
from worklog.aggregators.stats_aggregator import top_clients
from worklog.calculators.duration import format_duration, format_hours
from worklog.calculators.period_resolver import format_period_label, resolve_range
from worklog.cli.error_handlers import with_error_handling
from worklog.cli.utils.formatters import (
    format_empty_state,
    format_info,
    format_stats,
    format_table,
)
from worklog.cli.utils.inputs import (
    PERIOD_CHOICES,
    load_entries,
    load_settings,
    parse_now_input,
)
from worklog.filters.search import filter_from_params
from worklog.models.dashboard import DashboardView
from worklog.models.period import EmptyStateKind, Period
from worklog.readers.entry_reader import EntryReader
from worklog.utils.logging_utils import LogContext, generate_correlation_id


@click.command(name="dashboard")
@click.argument(
    "entries_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
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
@click.option("--client", type=str, default=None, help="Filter by client id")
@click.option(
    "--query", type=str, default=None, help="Free-text search (2+ characters)"
)
@click.option("--user", type=str, default=None, help="Only entries of this user id")
@click.option(
    "--pad-empty-days/--no-pad-empty-days",
    default=None,
    help="Show every day of a week view (default: INCLUDE_EMPTY_DAYS)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def dashboard(
    entries_file: Path,
    period: str,
    now_value: Optional[str],
    client: Optional[str],
    query: Optional[str],
    user: Optional[str],
    pad_empty_days: Optional[bool],
    debug: bool,
):
    """Show the time-tracking dashboard for a period.

    Prints date buckets (today and week) or week buckets (month), the
    period statistics and, when nothing matches, why the view is empty.

    Example:
        worklog dashboard entries.json --period week --now 2025-01-15
        worklog dashboard entries.json --period month --client c1 --query audit
    """
    with with_error_handling(debug):
        settings = load_settings()
        now = parse_now_input(now_value, settings)
        selected = Period(period)
        pad = settings.include_empty_days if pad_empty_days is None else pad_empty_days

        with LogContext(correlation_id=generate_correlation_id(), command="dashboard"):
            reader = EntryReader()
            all_entries = load_entries(reader, entries_file)

            date_range = resolve_range(selected, now)
            filter_state = filter_from_params(client, query)
            scoped = reader.scope(
                all_entries,
                date_range,
                client_id=filter_state.client_id,
                user_id=user,
            )

            view = DashboardAggregator(include_empty_days=pad).build(
                scoped,
                selected,
                now,
                filter_state=filter_state,
                client_name=reader.client_name(all_entries, filter_state.client_id),
                has_any_entries=lambda: reader.has_any_entries(all_entries, user),
            )

        _echo_view(view)


def _echo_view(view: DashboardView) -> None:
    click.echo(
        format_info(
            f"{format_period_label(view.period)}: "
            f"{view.date_range.start} to {view.date_range.end}"
        )
    )
    click.echo()

    if view.empty_state != EmptyStateKind.NONE:
        click.echo(format_empty_state(view.empty_state))
        return

    if view.period == Period.MONTH:
        rows = [
            [g.label, str(len(g.entries)), format_hours(g.total_hours)]
            for g in view.week_groups
        ]
        click.echo(format_table(["Week", "Entries", "Hours"], rows))
    else:
        rows = [
            [
                g.date.isoformat(),
                str(len(g.entries)),
                format_duration(g.total_minutes, style="long") if g.entries else "-",
            ]
            for g in view.date_groups
        ]
        click.echo(format_table(["Date", "Entries", "Logged"], rows))

    click.echo()
    click.echo("Summary:")
    for line in format_stats(view.stats):
        click.echo(line)

    ranking = top_clients(view.entries, limit=3)
    if len(ranking) > 1:
        click.echo()
        click.echo("Top clients:")
        for position, client in enumerate(ranking, start=1):
            click.echo(f"  {position}. {client.name} ({format_hours(client.hours)})")
