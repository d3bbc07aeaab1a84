"""Centralized error mapping for subprocess launch failures."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

from gitrelease.git.errors import GitError, GitNotFoundError


class ErrorMapper:
    """Maps OS-level launch errors to domain errors."""

    @staticmethod
    @contextmanager
    def guard(operation: str, *, executable: str) -> Iterator[None]:
        """Context manager for consistent exception translation."""
        try:
            yield
        except FileNotFoundError as e:
            raise GitNotFoundError(executable) from e
        except OSError as e:
            raise GitError(f"{operation} failed: {e}") from e


def git_operation(operation: str, *, executable: str) -> AbstractContextManager[None]:
    return ErrorMapper.guard(operation, executable=executable)
