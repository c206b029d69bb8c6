"""Core domain models and exceptions for magic-opener."""

from magic_opener.core.exceptions import (
    CommandFailedError,
    ConfigurationError,
    EncodingError,
    ExecutionError,
    GitCommandError,
    InvalidSpecError,
    LaunchError,
    MagicOpenerError,
    NoRemoteConfiguredError,
    RepositoryError,
)
from magic_opener.core.models import ArgumentKind, GitRepository, RemoteDescriptor

__all__ = [
    # Models
    "ArgumentKind",
    "GitRepository",
    "RemoteDescriptor",
    # Exceptions
    "MagicOpenerError",
    "ConfigurationError",
    "RepositoryError",
    "InvalidSpecError",
    "NoRemoteConfiguredError",
    "GitCommandError",
    "CommandFailedError",
    "EncodingError",
    "ExecutionError",
    "LaunchError",
]
