"""Git queries and release actions via the git executable."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import structlog

from gitrelease.config.models import GitConfig
from gitrelease.core.console import report_error as console_report_error
from gitrelease.git._internal import (
    LOG_FORMAT,
    CommandResult,
    GitRunner,
    Runner,
    limit_arg,
    log_record,
    split_lines,
)
from gitrelease.git.models import Branch, LogEntry

ErrorSink = Callable[[str], None]

log = structlog.get_logger(__name__)


class GitClient:
    """Stateless façade over the git executable.

    Queries return parsed records. Actions (checkout, merge, tag, push) never
    raise on a failed command: they hand a message to ``report_error`` and
    return False.
    """

    def __init__(
        self,
        repo_path: Path | str | None = None,
        *,
        config: GitConfig | None = None,
        runner: Runner | None = None,
        report_error: ErrorSink | None = None,
    ) -> None:
        self._config = config or GitConfig()
        self._runner = runner or GitRunner(
            repo_path or Path.cwd(),
            executable=self._config.executable,
            timeout=self._config.command_timeout_sec,
        )
        self._report_error = report_error or console_report_error

    @property
    def config(self) -> GitConfig:
        return self._config

    def _run(self, *args: str) -> CommandResult:
        return self._runner.run(*args)

    def _fail(self, result: CommandResult, message: str) -> bool:
        log.warning(
            "git_action_failed",
            args=result.args,
            exit_code=result.exit_code,
            stderr=result.stderr.strip(),
        )
        self._report_error(message)
        return False

    # =========================================================================
    # Queries
    # =========================================================================

    def current_branch(self) -> str:
        """Name of the checked-out branch ("HEAD" when detached)."""
        return self._run("rev-parse", "--abbrev-ref", "HEAD").stdout.strip()

    def branches(self) -> list[Branch]:
        """Local branches with their tip commit and upstream."""
        output = self._run("branch", "-vv").stdout
        return [Branch.parse(line) for line in split_lines(output)]

    def get_hash(self, branch_name: str) -> str | None:
        """Short tip hash of a local branch, or None if there is no such branch."""
        for branch in self.branches():
            if branch.name == branch_name:
                return branch.hash
        return None

    def current_branch_matches(self, branch_name: str) -> bool:
        """True if the current branch points at the same commit as ``branch_name``."""
        return self.get_hash(self.current_branch()) == self.get_hash(branch_name)

    def logs(self, limit: int | None = None) -> list[LogEntry]:
        """First-parent history of HEAD, newest first.

        Raises:
            ParseError: If a line does not carry every log field.
        """
        result = self._run(
            "log", "--first-parent", f"--pretty=format:{LOG_FORMAT}", *limit_arg(limit)
        )
        if not result.ok:
            # An unborn branch has no history to list
            log.debug("git_log_empty", exit_code=result.exit_code, stderr=result.stderr.strip())
        return [LogEntry.parse(log_record(line)) for line in split_lines(result.stdout)]

    def get_log(self, commit_hash: str, limit: int | None = None) -> LogEntry | None:
        """Find a commit among the newest ``limit`` entries of ``logs``."""
        return next((entry for entry in self.logs(limit) if entry.hash == commit_hash), None)

    def has_uncommitted_changes(self) -> bool:
        """True if tracked files differ from HEAD."""
        # diff-index trusts cached stat data, so refresh it first
        self._run("update-index", "-q", "--refresh")
        return not self._run("diff-index", "--quiet", "HEAD").ok

    def get_file(self, path: str, commit: str | None = None) -> str:
        """Contents of ``path`` (relative to the repo root) at ``commit``."""
        return self._run("show", f"{commit or 'HEAD'}:./{path}").stdout.strip()

    # =========================================================================
    # Release Actions
    # =========================================================================

    def checkout(self, branch: str) -> bool:
        result = self._run("checkout", branch)
        if not result.ok:
            return self._fail(result, f"unable to checkout {branch}")
        return True

    def merge(self, commit: LogEntry, version: str) -> bool:
        """Merge ``commit`` into the current branch with a merge commit."""
        release = f"{self._config.tag_prefix}{version}"
        result = self._run("merge", commit.hash, "--no-ff", "-m", f"merge {release}")
        if not result.ok:
            return self._fail(
                result, f"unable to merge {commit.hash} to {self.current_branch()}"
            )
        return True

    def tag(self, commit: LogEntry, version: str) -> bool:
        """Create an annotated release tag on ``commit``."""
        release = f"{self._config.tag_prefix}{version}"
        result = self._run("tag", "-a", release, commit.hash, "-m", release)
        if not result.ok:
            return self._fail(result, f"unable to tag {commit.hash} with {release}")
        return True

    def push_to_origin(self) -> bool:
        """Push the current branch and all tags to the release remote."""
        remote = self._config.remote
        branch = self.current_branch()
        result = self._run("push", remote, branch, "--tags")
        if not result.ok:
            return self._fail(result, f"unable to push {branch} to {remote} with tags")
        return True
