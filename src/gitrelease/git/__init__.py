"""Git operations module."""

from gitrelease.git.errors import (
    GitError,
    GitNotFoundError,
    NotARepositoryError,
    ParseError,
)
from gitrelease.git.models import Branch, LogEntry
from gitrelease.git.ops import ErrorSink, GitClient

__all__ = [
    # Main class
    "GitClient",
    "ErrorSink",
    # Models
    "Branch",
    "LogEntry",
    # Errors
    "GitError",
    "GitNotFoundError",
    "NotARepositoryError",
    "ParseError",
]
