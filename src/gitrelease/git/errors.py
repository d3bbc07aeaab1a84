"""Git module error types."""


class GitError(Exception):
    """Base error for git operations."""

    pass


class NotARepositoryError(GitError):
    """Path does not exist or is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class GitNotFoundError(GitError):
    """The git executable could not be started."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"git executable not found: {executable}")
        self.executable = executable


class ParseError(GitError):
    """A line of git output is not well-formed."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Cannot parse git output {line!r}: {reason}")
        self.line = line
        self.reason = reason
