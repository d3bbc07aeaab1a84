"""Runs git as a subprocess and captures its output."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import structlog

from gitrelease.git._internal.errors import git_operation
from gitrelease.git.errors import NotARepositoryError

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one git invocation."""

    args: tuple[str, ...]
    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class Runner(Protocol):
    """Anything that can execute a git command line."""

    def run(self, *args: str) -> CommandResult: ...


class GitRunner:
    """Executes git in a fixed working directory.

    Only launch failures raise. A nonzero exit, or a timeout, comes back as a
    CommandResult so callers decide what failure means for them.
    """

    def __init__(
        self,
        repo_path: Path | str,
        *,
        executable: str = "git",
        timeout: float | None = None,
    ) -> None:
        self._path = Path(repo_path)
        if not self._path.is_dir():
            raise NotARepositoryError(str(self._path))
        self._executable = executable
        self._timeout = timeout

    @property
    def path(self) -> Path:
        return self._path

    def run(self, *args: str) -> CommandResult:
        argv = (self._executable, *args)
        with git_operation(args[0] if args else "git", executable=self._executable):
            try:
                proc = subprocess.run(
                    argv,
                    cwd=self._path,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    timeout=self._timeout,
                )
            except subprocess.TimeoutExpired:
                log.warning("git_timeout", argv=argv, timeout=self._timeout)
                return CommandResult(
                    args=args,
                    exit_code=-1,
                    stdout="",
                    stderr=f"git {' '.join(args)} timed out after {self._timeout}s",
                )

        log.debug("git_command", argv=argv, exit_code=proc.returncode)
        return CommandResult(
            args=args,
            exit_code=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
