"""Resolution of a working directory and CLI arguments into a destination."""

import string
from collections.abc import Sequence
from pathlib import Path

import structlog

from magic_opener.config.settings import Settings, get_settings
from magic_opener.core.exceptions import CommandFailedError
from magic_opener.core.models.resolution import ArgumentKind
from magic_opener.git.command import GitCommandRunner
from magic_opener.git.inspector import GitRepoInspector
from magic_opener.git.repository import open_repository
from magic_opener.git.url_builder import URLBuilder

logger = structlog.get_logger(__name__)

MIN_COMMIT_LENGTH = 7
MAX_COMMIT_LENGTH = 40

_HEX_DIGITS = frozenset(string.hexdigits)
_DIGITS = frozenset(string.digits)


def is_commit_hash(argument: str) -> bool:
    """7 to 40 ASCII hex digits, abbreviated or full."""
    return (
        MIN_COMMIT_LENGTH <= len(argument) <= MAX_COMMIT_LENGTH
        and all(c in _HEX_DIGITS for c in argument)
    )


def is_pull_request_number(argument: str) -> bool:
    return bool(argument) and all(c in _DIGITS for c in argument)


def classify_argument(argument: str) -> ArgumentKind:
    """Decide what a single argument refers to.

    The commit check runs first, so all-digit strings of seven or more
    characters (e.g. "1234567") are commits, not pull requests.
    """
    if is_commit_hash(argument):
        return ArgumentKind.COMMIT
    if is_pull_request_number(argument):
        return ArgumentKind.PULL_REQUEST
    return ArgumentKind.PATH


def join_arguments(current_directory: str | Path, arguments: Sequence[str]) -> str:
    """Join arguments with spaces; "." or nothing means the working directory."""
    joined = " ".join(arguments)
    if joined in ("", "."):
        return str(current_directory)
    return joined


class ResolutionService:
    """Turns (working directory, arguments) into a URL or a path."""

    def __init__(
        self,
        runner: GitCommandRunner | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._runner = runner or GitCommandRunner(self._settings.git_binary)

    def inspector_for(self, current_directory: str | Path) -> GitRepoInspector:
        return GitRepoInspector(
            current_directory,
            runner=self._runner,
            fallback_branch=self._settings.fallback_branch,
        )

    def resolve(self, current_directory: str | Path, arguments: Sequence[str]) -> str:
        """Resolve the destination for `arguments` run from `current_directory`.

        Outside a repository the arguments are taken literally. Inside one,
        no argument opens the current branch, a commit hash opens the commit
        (or the pull request its message references) and a number opens
        that pull request.
        """
        arguments = list(arguments)
        inspector = self.inspector_for(current_directory)

        if not inspector.is_git_repo():
            return join_arguments(current_directory, arguments)

        repository = open_repository(
            current_directory, inspector, remote=self._settings.remote_name
        )
        urls = URLBuilder(repository, self._settings.default_branches)

        if not arguments:
            return urls.branch_url(inspector.get_current_branch())

        if len(arguments) == 1:
            argument = arguments[0]
            kind = classify_argument(argument)
            logger.debug("Classified argument", argument=argument, kind=kind.value)

            if kind is ArgumentKind.COMMIT:
                return self._resolve_commit(inspector, urls, argument)
            if kind is ArgumentKind.PULL_REQUEST:
                return urls.pull_request_url(argument)

        return join_arguments(current_directory, arguments)

    def _resolve_commit(
        self, inspector: GitRepoInspector, urls: URLBuilder, commit: str
    ) -> str:
        try:
            number = inspector.find_pull_request(commit)
        except CommandFailedError as e:
            logger.debug("Commit message unavailable", commit=commit, error=str(e))
            number = None

        if number is None:
            return urls.commit_url(commit)
        return urls.pull_request_url(number)


def resolve_destination(
    current_directory: str | Path,
    arguments: Sequence[str],
    service: ResolutionService | None = None,
) -> str:
    """Entry point: resolve a destination with default collaborators."""
    return (service or ResolutionService()).resolve(current_directory, arguments)
