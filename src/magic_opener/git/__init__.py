"""Git integration module for magic-opener."""

from magic_opener.git.command import GitCommandRunner
from magic_opener.git.inspector import GitRepoInspector
from magic_opener.git.repository import open_repository, repository_from_url
from magic_opener.git.url_builder import URLBuilder

__all__ = [
    "GitCommandRunner",
    "GitRepoInspector",
    "URLBuilder",
    "open_repository",
    "repository_from_url",
]
