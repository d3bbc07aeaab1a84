"""Internal components for git operations - not part of public API."""

from gitrelease.git._internal.parsing import (
    LOG_FORMAT,
    LOG_KEYS,
    BranchFields,
    limit_arg,
    log_record,
    split_branch_line,
    split_lines,
)
from gitrelease.git._internal.runner import CommandResult, GitRunner, Runner

__all__ = [
    "LOG_FORMAT",
    "LOG_KEYS",
    "BranchFields",
    "CommandResult",
    "GitRunner",
    "Runner",
    "limit_arg",
    "log_record",
    "split_branch_line",
    "split_lines",
]
