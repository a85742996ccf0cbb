"""
Configuration module for the worklog engine.
"""
from .logging_config import LoggingConfig, configure_logging, reset_logging
from .settings import WorklogConfig, get_config, load_config, reload_config

__all__ = [
    'WorklogConfig',
    'LoggingConfig',
    'configure_logging',
    'get_config',
    'load_config',
    'reload_config',
    'reset_logging',
]
