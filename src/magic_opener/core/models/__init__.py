"""Domain models for magic-opener."""

from magic_opener.core.models.repository import GitRepository, RemoteDescriptor
from magic_opener.core.models.resolution import ArgumentKind

__all__ = [
    "ArgumentKind",
    "GitRepository",
    "RemoteDescriptor",
]
