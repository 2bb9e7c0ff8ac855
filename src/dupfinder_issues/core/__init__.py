"""Shared infrastructure: structured logging and the exception hierarchy."""

from .exceptions import ConfigurationError, DupFinderIssuesError, LogParseError
from .log_events import LogEvents
from .logger import LogConfig, LogFormat, UnifiedLogger, configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "DupFinderIssuesError",
    "LogParseError",
    "LogEvents",
    "LogConfig",
    "LogFormat",
    "UnifiedLogger",
    "configure_logging",
    "get_logger",
]
