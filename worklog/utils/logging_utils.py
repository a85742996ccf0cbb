"""Structured logging utilities with context support."""

import functools
import logging
import threading
import time
import uuid
from typing import Any, Callable, Dict, Optional

_local = threading.local()


def generate_correlation_id() -> str:
    """Generate a unique correlation ID for one CLI run."""
    return str(uuid.uuid4())


def current_context() -> Dict[str, Any]:
    """Return a copy of the structured fields active on this thread."""
    return dict(getattr(_local, "fields", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields live in thread-local storage and are attached to every record
    emitted inside the block. Nested blocks add to the outer fields and
    restore them on exit.

    Example:
        with LogContext(period="week", user_id="u1"):
            logger.info("Building dashboard")
    """

    def __init__(self, **fields):
        self.fields = fields
        self._saved: Optional[Dict[str, Any]] = None

    def __enter__(self):
        self._saved = current_context()
        _local.fields = {**self._saved, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _local.fields = self._saved or {}
        self._saved = None


class _ContextFilter(logging.Filter):
    """Copy the active LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in current_context().items():
            setattr(record, key, value)
        return True


def _describe(value: Any) -> str:
    # Entry collections can hold thousands of models; log their size only
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return f"<{type(value).__name__} of {len(value)}>"
    return repr(value)


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator logging entry, exit and elapsed time of a function.

    Exit records carry a ``duration_ms`` field. Exceptions are logged at
    ERROR with the traceback and re-raised.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Include the call arguments in the entry message.
            Collections are summarized by their length.
        level: Log level name for the entry and exit records

    Example:
        @log_function_call
        def build(entries, period):
            ...

        @log_function_call(include_args=True, level="INFO")
        def read_file(path):
            ...
    """
    log_level = logging.getLevelName(level.upper())

    def decorator(f: Callable) -> Callable:
        logger = logging.getLogger(f.__module__)

        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            if include_args:
                parts = [_describe(a) for a in args]
                parts += [f"{k}={_describe(v)}" for k, v in kwargs.items()]
                logger.log(log_level, f"Entering {f.__name__} with args: {', '.join(parts)}")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            started = time.perf_counter()
            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            elapsed = round((time.perf_counter() - started) * 1000, 3)
            logger.log(log_level, f"Exiting {f.__name__}", extra={"duration_ms": elapsed})
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
