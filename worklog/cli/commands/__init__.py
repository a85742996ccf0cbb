"""CLI commands."""

from worklog.cli.commands.dashboard import dashboard
from worklog.cli.commands.export import export
from worklog.cli.commands.team import team

__all__ = ["dashboard", "export", "team"]
