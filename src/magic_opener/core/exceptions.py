"""Exception hierarchy for magic-opener."""

from typing import Any


class MagicOpenerError(Exception):
    """Base class for all magic-opener errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MagicOpenerError):
    """Raised when required settings are missing or invalid."""


class RepositoryError(MagicOpenerError):
    """Raised when a Git repository cannot be resolved."""


class InvalidSpecError(RepositoryError):
    """A string expected to be a Git remote URL matched no known dialect."""

    def __init__(self, spec: str) -> None:
        super().__init__(f"Invalid Git repository spec: {spec}", details={"spec": spec})
        self.spec = spec


class NoRemoteConfiguredError(RepositoryError):
    """The directory is a Git repository without the requested remote."""

    def __init__(self, remote: str) -> None:
        super().__init__(
            f"Found a Git repository, but no remote URL is set for '{remote}'",
            details={"remote": remote},
        )
        self.remote = remote


class GitCommandError(RepositoryError):
    """Base class for failures of the git executable.

    `stage` names what the command was run for (remote lookup, branch
    lookup, ...) and prefixes the message when set.
    """

    def __init__(
        self,
        message: str,
        args: tuple[str, ...] = (),
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if stage:
            message = f"{stage} failed: {message}"
        super().__init__(
            message,
            details={"args": list(args), "stage": stage, **(details or {})},
        )
        self.command_args = args
        self.stage = stage


class CommandFailedError(GitCommandError):
    """git ran but exited with a non-zero status."""

    def __init__(
        self, returncode: int, args: tuple[str, ...] = (), stage: str | None = None
    ) -> None:
        super().__init__(
            f"Git command exited unsuccessfully: {returncode}",
            args=args,
            stage=stage,
            details={"returncode": returncode},
        )
        self.returncode = returncode


class EncodingError(GitCommandError):
    """git output was not valid UTF-8 text."""


class ExecutionError(GitCommandError):
    """git could not be launched at all."""


class LaunchError(MagicOpenerError):
    """The opener could not be started or the forwarding socket failed."""
