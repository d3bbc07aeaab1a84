"""gitrelease - git inspection and release workflow over the git executable."""

from gitrelease.git import Branch, GitClient, LogEntry

__all__ = ["Branch", "GitClient", "LogEntry"]
