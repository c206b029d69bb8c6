"""Builders for GitRepository."""

from pathlib import Path

import structlog

from magic_opener.core.exceptions import InvalidSpecError
from magic_opener.core.models.repository import GitRepository
from magic_opener.git.inspector import GitRepoInspector
from magic_opener.parsing.remote_url import parse_git_url

logger = structlog.get_logger(__name__)


def repository_from_url(url: str) -> GitRepository:
    """Build a repository from a literal remote URL."""
    descriptor = parse_git_url(url)
    if descriptor is None:
        raise InvalidSpecError(url)
    return GitRepository.from_descriptor(descriptor)


def open_repository(
    path: str | Path,
    inspector: GitRepoInspector | None = None,
    remote: str = "origin",
) -> GitRepository:
    """Build a repository from the remote configured in a local checkout."""
    inspector = inspector or GitRepoInspector(path)
    url = inspector.get_remote_url(remote)

    descriptor = parse_git_url(url)
    if descriptor is None:
        raise InvalidSpecError(url)

    logger.debug(
        "Opened repository",
        path=str(path),
        remote=remote,
        host=descriptor.host,
        org=descriptor.org,
        name=descriptor.name,
    )
    return GitRepository.from_descriptor(descriptor, local_path=str(path))
