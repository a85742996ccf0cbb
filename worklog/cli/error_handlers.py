"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from worklog.cli.utils.formatters import format_error, format_warning


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class DataValidationError(CLIError):
    """Error related to input data validation."""

    pass


class ProcessingError(CLIError):
    """Error related to data processing."""

    pass


def _echo_cli_error(title: str, error: CLIError) -> None:
    click.echo(format_error(f"{title}: {error.message}"))
    if error.recovery_hint:
        click.echo(format_warning(f"Hint: {error.recovery_hint}"))


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Report an error to the user and choose an exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code: 1 configuration, 2 data validation, 3 processing,
        130 cancelled, 255 unexpected
    """
    if isinstance(error, ConfigurationError):
        _echo_cli_error("Configuration Error", error)
        return 1

    elif isinstance(error, DataValidationError):
        _echo_cli_error("Data Validation Error", error)
        return 2

    elif isinstance(error, ProcessingError):
        _echo_cli_error("Processing Error", error)
        return 3

    elif isinstance(error, ValidationError):
        click.echo(format_error(f"Data Validation Error: {error.error_count()} invalid field(s)"))
        for err in error.errors():
            location = ".".join(str(part) for part in err["loc"])
            click.echo(f"  {location}: {err['msg']}")
        return 2

    elif isinstance(error, (click.Abort, KeyboardInterrupt)):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
        click.echo(str(error))

        if debug:
            click.echo("\nFull stack trace:")
            click.echo(
                "".join(
                    traceback.format_exception(type(error), error, error.__traceback__)
                )
            )
        else:
            click.echo(format_warning("\nRun with --debug flag for full stack trace"))

        return 255


class ErrorHandler:
    """Context manager that reports errors and exits with a matching code."""

    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is not None and not isinstance(exc_val, SystemExit):
            exit_code = handle_cli_error(exc_val, self.show_debug)
            sys.exit(exit_code)
        return False


def with_error_handling(debug: bool = False) -> ErrorHandler:
    """
    Wrap a command body in standardized error handling.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """
    return ErrorHandler(debug)
