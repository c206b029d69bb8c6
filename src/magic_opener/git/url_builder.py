"""Canonical URLs for a GitRepository."""

from collections.abc import Iterable

from magic_opener.core.models.repository import GitRepository

DEFAULT_BRANCHES = ("develop", "main", "master")


class URLBuilder:
    """Formats web, API and clone URLs for a repository.

    Pure string formatting: nothing here touches git or the network.
    """

    def __init__(
        self,
        repository: GitRepository,
        default_branches: Iterable[str] = DEFAULT_BRANCHES,
    ) -> None:
        self._repo = repository
        self._default_branches = frozenset(default_branches)

    @property
    def _slug(self) -> str:
        return f"{self._repo.org}/{self._repo.name}"

    def web_url(self) -> str:
        """https://{host}/{org}/{name}"""
        return f"https://{self._repo.host}/{self._slug}"

    def api_url(self) -> str:
        """Base URL of the repository in the hosting service's REST API."""
        return f"https://api.{self._repo.host}/repos/{self._slug}"

    def git_url(self) -> str:
        """Clone URL for the native Git protocol."""
        return f"git://{self._repo.host}/{self._slug}.git"

    def ssh_url(self) -> str:
        return f"git@{self._repo.host}:{self._slug}.git"

    def commit_url(self, commit: str) -> str:
        return f"{self.web_url()}/commit/{commit}"

    def pull_request_url(self, number: str | int) -> str:
        return f"{self.web_url()}/pull/{number}"

    def branch_url(self, branch: str) -> str:
        """Web URL for `branch`; default branches map to the plain web URL."""
        url = self.web_url()
        if branch in self._default_branches:
            return url
        return f"{url}/tree/{branch}"
