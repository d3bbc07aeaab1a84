"""String parsing helpers for git's textual output."""

from __future__ import annotations

import json
from typing import NamedTuple

from gitrelease.git.errors import ParseError

# Unit-separated fields, one commit per line. %D is the ref decoration without parentheses.
LOG_KEYS = ("hash", "committer", "email", "subject", "branch")
LOG_FIELD_SEPARATOR = "\x1f"
LOG_FORMAT = "%x1f".join(("%h", "%cn", "%ce", "%s", "%D"))

_CURRENT_MARKER = "*"
_WORKTREE_MARKER = "+"


class BranchFields(NamedTuple):
    is_current: bool
    name: str
    hash: str
    remote: str
    tracking: str
    message: str


def split_lines(output: str) -> list[str]:
    """Split command output into its non-empty lines."""
    return [line for line in output.splitlines() if line.strip()]


def _take_token(text: str) -> tuple[str, str]:
    head, _, tail = text.partition(" ")
    return head, tail.strip()


def _take_enclosed(text: str, close: str) -> tuple[str, str] | None:
    """Take text up to and including ``close``; None if it never closes."""
    end = text.find(close)
    if end == -1:
        return None
    return text[: end + 1], text[end + 1 :].strip()


def split_branch_line(raw: str) -> BranchFields:
    """Split one ``git branch -vv`` line into its fields.

    Shape: ``[*|+] <name> <hash> [(<worktree>)] [[<remote>[: <tracking>]]] <message>``.
    The worktree path only follows branches checked out elsewhere (``+``).
    The bracketed upstream is optional; when absent the message starts right
    after the hash.

    ``-vv`` output does not delimit the upstream from the message, so on a
    branch with no upstream a subject that itself starts with a closed
    bracket (``[WIP] start``) is read as the upstream.
    """
    is_current = in_worktree = False
    if raw.startswith(_CURRENT_MARKER):
        is_current = True
        raw = raw[1:]
    elif raw.startswith(_WORKTREE_MARKER):
        in_worktree = True
        raw = raw[1:]
    rest = raw.strip()

    # Detached HEAD shows as "(HEAD detached at abc123)"
    enclosed = _take_enclosed(rest, ")") if rest.startswith("(") else None
    if enclosed is not None:
        name, rest = enclosed
    else:
        name, rest = _take_token(rest)

    commit, rest = _take_token(rest)

    if in_worktree and rest.startswith("("):
        enclosed = _take_enclosed(rest, ")")
        if enclosed is not None:
            rest = enclosed[1]

    remote = tracking = ""
    enclosed = _take_enclosed(rest, "]") if rest.startswith("[") else None
    if enclosed is not None:
        annotation, rest = enclosed
        upstream, _, status = annotation[1:-1].partition(":")
        remote, tracking = upstream.strip(), status.strip()

    return BranchFields(is_current, name, commit, remote, tracking, rest)


def log_record(line: str) -> str:
    """Re-encode one ``LOG_FORMAT`` line as a JSON object.

    Subjects and names are free text and may hold quotes, so they are
    serialised here rather than templated by git.

    Raises:
        ParseError: If the line does not hold exactly one value per key.
    """
    fields = line.split(LOG_FIELD_SEPARATOR)
    if len(fields) != len(LOG_KEYS):
        raise ParseError(line, f"expected {len(LOG_KEYS)} fields, got {len(fields)}")
    return json.dumps(dict(zip(LOG_KEYS, fields)))


def limit_arg(limit: int | None) -> list[str]:
    """``git log`` count option, or nothing for an unbounded listing."""
    if not limit:
        return []
    if limit < 0:
        raise ValueError(f"limit must be positive, got {limit}")
    return [f"-{limit}"]
