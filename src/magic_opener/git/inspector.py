"""Read-only queries against a local Git checkout."""

import re
from pathlib import Path

import structlog

from magic_opener.core.exceptions import (
    CommandFailedError,
    GitCommandError,
    NoRemoteConfiguredError,
)
from magic_opener.git.command import GitCommandRunner

logger = structlog.get_logger(__name__)

# `git remote get-url` exits with 2 when the remote doesn't exist
NO_SUCH_REMOTE_STATUS = 2

PULL_REQUEST_REFERENCE = re.compile(r"#([0-9]+)")


class GitRepoInspector:
    """Queries repository metadata for a directory through the git CLI."""

    def __init__(
        self,
        path: str | Path,
        runner: GitCommandRunner | None = None,
        fallback_branch: str = "main",
    ) -> None:
        self._path = Path(path)
        self._runner = runner or GitCommandRunner()
        self._fallback_branch = fallback_branch

    @property
    def path(self) -> Path:
        return self._path

    def _run_git(self, *args: str, stage: str) -> str:
        return self._runner.run(self._path, *args, stage=stage)

    def is_git_repo(self) -> bool:
        """Check if the path is inside a git repository."""
        try:
            self._run_git("rev-parse", "--git-dir", stage="repository probe")
            return True
        except GitCommandError:
            return False

    def get_remote_url(self, remote: str = "origin") -> str:
        """Get the URL configured for `remote`.

        Raises NoRemoteConfiguredError when the repository has no such remote.
        """
        try:
            return self._run_git("remote", "get-url", "--", remote, stage="remote lookup")
        except CommandFailedError as e:
            if e.returncode == NO_SUCH_REMOTE_STATUS:
                raise NoRemoteConfiguredError(remote) from e
            raise

    def get_current_branch(self) -> str:
        """Get the short name of the checked-out branch.

        Detached HEADs, unborn repositories and git failures all fall back
        to the configured default branch name.
        """
        try:
            branch = self._run_git("symbolic-ref", "--short", "-q", "HEAD", stage="branch lookup")
        except GitCommandError as e:
            logger.debug("No current branch, using fallback", error=str(e))
            return self._fallback_branch
        return branch or self._fallback_branch

    def get_commit_message(self, commit: str) -> str:
        """Get the full message of `commit`."""
        return self._run_git("log", "-1", "--pretty=%B", commit, stage="commit lookup")

    def find_pull_request(self, commit: str) -> str | None:
        """Find the pull request number referenced by a commit message.

        The first `#<digits>` anywhere in the message wins; it is not
        checked against the hosting service.
        """
        message = self.get_commit_message(commit)
        return find_pull_request_reference(message)


def find_pull_request_reference(message: str) -> str | None:
    match = PULL_REQUEST_REFERENCE.search(message)
    return match.group(1) if match else None
