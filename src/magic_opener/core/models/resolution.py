"""Resolution-related models."""

from enum import Enum


class ArgumentKind(str, Enum):
    """How a single command-line argument is interpreted."""

    COMMIT = "commit"
    PULL_REQUEST = "pull_request"
    PATH = "path"
