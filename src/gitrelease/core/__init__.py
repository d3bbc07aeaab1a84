"""Core module exports."""

from gitrelease.core.console import get_console, report_error, status
from gitrelease.core.errors import ConfigError, ErrorCode, GitReleaseError
from gitrelease.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ErrorCode",
    "GitReleaseError",
    "ConfigError",
    # Logging
    "configure_logging",
    "get_logger",
    # Console
    "get_console",
    "report_error",
    "status",
]
