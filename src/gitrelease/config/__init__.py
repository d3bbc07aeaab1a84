"""Config module exports."""

from gitrelease.config.loader import GitReleaseSettings, load_config
from gitrelease.config.models import (
    GitConfig,
    GitReleaseConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "GitReleaseConfig",
    "GitReleaseSettings",
    "GitConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
