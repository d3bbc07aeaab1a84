"""Test fixtures for git module."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest

from gitrelease.git import GitClient
from gitrelease.git._internal import CommandResult

if TYPE_CHECKING:
    from collections.abc import Generator


class FakeRunner:
    """Runner that returns canned output keyed by git subcommand."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self._responses: dict[str, list[CommandResult]] = {}

    def on(
        self, subcommand: str, stdout: str = "", *, exit_code: int = 0, stderr: str = ""
    ) -> None:
        """Queue a response. The last one queued for a subcommand repeats."""
        self._responses.setdefault(subcommand, []).append(
            CommandResult((subcommand,), exit_code, stdout, stderr)
        )

    def run(self, *args: str) -> CommandResult:
        self.calls.append(args)
        queue = self._responses.get(args[0])
        if not queue:
            return CommandResult(args, 0, "", "")
        result = queue.pop(0) if len(queue) > 1 else queue[0]
        return CommandResult(args, result.exit_code, result.stdout, result.stderr)

    def subcommands(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def reported() -> list[str]:
    """Collects messages sent to the error sink."""
    return []


@pytest.fixture
def fake_client(fake_runner: FakeRunner, reported: list[str]) -> GitClient:
    return GitClient(runner=fake_runner, report_error=reported.append)


# --- Real repositories, built with pygit2 and driven through the git executable ---


def _commit_file(repo: pygit2.Repository, name: str, content: str, message: str) -> str:
    workdir = Path(repo.workdir)
    (workdir / name).write_text(content)
    repo.index.add(name)
    repo.index.write()
    tree = repo.index.write_tree()
    sig = repo.default_signature
    parents = [] if repo.head_is_unborn else [repo.head.target]
    return str(repo.create_commit("HEAD", sig, sig, message, tree, parents))


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a temporary git repository with initial commit on main."""
    if shutil.which("git") is None:
        pytest.skip("git executable not installed")

    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"
    repo.config["commit.gpgsign"] = "false"
    repo.config["tag.gpgsign"] = "false"

    _commit_file(repo, "README.md", "# Test Repo\n", "Initial commit")

    yield repo


@pytest.fixture
def repo_with_history(temp_repo: pygit2.Repository) -> pygit2.Repository:
    """Repository with five commits after the initial one."""
    for i in range(5):
        _commit_file(temp_repo, f"file{i}.txt", f"content {i}\n", f"Commit {i}")
    return temp_repo


@pytest.fixture
def repo_with_branches(temp_repo: pygit2.Repository) -> pygit2.Repository:
    """Repository with a feature branch diverged from main."""
    head_commit = temp_repo.head.peel(pygit2.Commit)
    temp_repo.branches.local.create("feature", head_commit)

    _commit_file(temp_repo, "main.txt", "main branch\n", "Commit on main")

    temp_repo.checkout(temp_repo.branches.local["feature"])
    _commit_file(temp_repo, "feature.txt", "feature branch\n", "Commit on feature")

    temp_repo.checkout(temp_repo.branches.local["main"])
    return temp_repo


@pytest.fixture
def bare_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a bare repository for remote testing."""
    yield pygit2.init_repository(str(tmp_path / "bare.git"), bare=True)


@pytest.fixture
def repo_with_remote(
    temp_repo: pygit2.Repository,
    bare_repo: pygit2.Repository,
) -> pygit2.Repository:
    """Repository whose main branch tracks origin/main."""
    temp_repo.remotes.create("origin", str(Path(bare_repo.path).resolve()))
    temp_repo.remotes["origin"].push(["refs/heads/main:refs/heads/main"])
    temp_repo.config["branch.main.remote"] = "origin"
    temp_repo.config["branch.main.merge"] = "refs/heads/main"
    return temp_repo
