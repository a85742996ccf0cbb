"""Worklog CLI.

This module provides a command-line interface for the worklog engine.
It includes commands for viewing the dashboard, checking team compliance
and exporting period summaries.
"""

import click

from worklog.cli.commands.dashboard import dashboard
from worklog.cli.commands.export import export
from worklog.cli.commands.team import team

__version__ = "1.0.0"


@click.group(help="Worklog CLI - Period dashboards and team compliance for time entries")
@click.version_option(version=__version__)
def cli():
    """Worklog CLI main entry point."""
    pass


# Register commands
cli.add_command(dashboard)
cli.add_command(team)
cli.add_command(export)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
