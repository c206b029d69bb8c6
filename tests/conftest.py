"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
import structlog
from factories import GitRepositoryFactory

from magic_opener.config.settings import Settings, get_settings
from magic_opener.core.exceptions import CommandFailedError
from magic_opener.core.models.repository import GitRepository

ORIGIN_URL = "git@github.com:acme/widgets.git"


def git(repo_path: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo_path, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


class FakeGitRunner:
    """Stands in for GitCommandRunner with canned responses.

    Commands without a response fail with exit status 128, like git does
    for most errors.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], str | Exception] = {}
        self.calls: list[tuple[str, ...]] = []

    def respond(self, args: tuple[str, ...], response: str | Exception) -> None:
        self.responses[args] = response

    def run(self, cwd, *args: str, stage: str | None = None) -> str:
        self.calls.append(args)
        response = self.responses.get(args)
        if response is None:
            raise CommandFailedError(128, args=args, stage=stage)
        if isinstance(response, Exception):
            raise response
        return response

    def as_repository(self, remote_url: str = ORIGIN_URL, branch: str | None = "main") -> None:
        """Make the fake look like a checkout with an origin remote."""
        self.respond(("rev-parse", "--git-dir"), ".git")
        self.respond(("remote", "get-url", "--", "origin"), remote_url)
        if branch is not None:
            self.respond(("symbolic-ref", "--short", "-q", "HEAD"), branch)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep the caller's SSH session and settings out of the tests."""
    monkeypatch.delenv("SSH_TTY", raising=False)
    monkeypatch.delenv("SSH_CLIENT_HOME", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(open_command="/usr/bin/open")


@pytest.fixture
def fake_runner() -> FakeGitRunner:
    return FakeGitRunner()


@pytest.fixture
def repository() -> GitRepository:
    return GitRepositoryFactory()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository on branch main with one commit."""
    repo_path = tmp_path / "widgets"
    repo_path.mkdir()

    git(repo_path, "init")
    git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo_path, "config", "user.email", "test@test.com")
    git(repo_path, "config", "user.name", "Test")
    git(repo_path, "config", "commit.gpgsign", "false")

    (repo_path / "README.md").write_text("# Widgets\n")
    git(repo_path, "add", ".")
    git(repo_path, "commit", "-m", "Initial commit")

    return repo_path


@pytest.fixture
def git_repo_with_origin(git_repo: Path) -> Path:
    git(git_repo, "remote", "add", "origin", ORIGIN_URL)
    return git_repo
