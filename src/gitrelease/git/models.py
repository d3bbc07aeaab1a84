"""Value objects parsed from git output."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from gitrelease.git._internal.parsing import LOG_KEYS, split_branch_line
from gitrelease.git.errors import ParseError

@dataclass(frozen=True, slots=True)
class Branch:
    """One local branch as listed by ``git branch -vv``."""

    name: str
    hash: str
    message: str
    remote: str = ""
    tracking: str = ""  # e.g. "ahead 1, behind 2"
    is_current: bool = False

    @classmethod
    def parse(cls, raw: str) -> Branch:
        fields = split_branch_line(raw)
        return cls(
            name=fields.name,
            hash=fields.hash,
            message=fields.message,
            remote=fields.remote,
            tracking=fields.tracking,
            is_current=fields.is_current,
        )

    def matches(self, query: str | None) -> bool:
        """Case-sensitive substring search over hash, message, name and remote."""
        if not query:
            return True
        return (
            query in self.hash
            or query in self.message
            or query in self.name
            or query in self.remote
        )


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One commit from a first-parent ``git log`` listing."""

    hash: str
    committer: str
    email: str
    subject: str
    branch: str = ""  # ref decoration, e.g. "HEAD -> main, tag: v1.0"

    @classmethod
    def parse(cls, raw: str) -> LogEntry:
        """Decode one JSON log line.

        Raises:
            ParseError: If the line is not a JSON object carrying every field.
        """
        try:
            data: Any = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(raw, e.msg) from e
        if not isinstance(data, dict):
            raise ParseError(raw, "expected a JSON object")
        missing = [key for key in LOG_KEYS if key not in data]
        if missing:
            raise ParseError(raw, f"missing keys: {', '.join(missing)}")
        return cls(**{key: str(data[key]) for key in LOG_KEYS})

    def matches(self, query: str | None) -> bool:
        """Substring search; the hash compares case-sensitively, the rest do not."""
        if not query:
            return True
        needle = query.lower()
        return (
            query in self.hash
            or needle in self.committer.lower()
            or needle in self.email.lower()
            or needle in self.subject.lower()
            or needle in self.branch.lower()
        )
