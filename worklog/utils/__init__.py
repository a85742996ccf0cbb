"""Shared utilities."""

from worklog.utils.logging_utils import (
    LogContext,
    current_context,
    generate_correlation_id,
    log_function_call,
)

__all__ = [
    "LogContext",
    "current_context",
    "generate_correlation_id",
    "log_function_call",
]
