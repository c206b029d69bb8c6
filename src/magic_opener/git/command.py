"""Runs git subcommands and returns their trimmed output."""

import subprocess
from pathlib import Path

import structlog

from magic_opener.core.exceptions import CommandFailedError, EncodingError, ExecutionError

logger = structlog.get_logger(__name__)


class GitCommandRunner:
    """Thin wrapper around the git CLI.

    Uses subprocess directly; every call blocks until git exits.
    """

    def __init__(self, git_binary: str = "git") -> None:
        self._git_binary = git_binary

    def run(self, cwd: str | Path, *args: str, stage: str | None = None) -> str:
        """Run `git *args` inside `cwd` and return stdout stripped of whitespace.

        Raises ExecutionError if git can't be started, CommandFailedError on
        a non-zero exit and EncodingError if stdout isn't valid UTF-8.
        """
        logger.debug("Running git command", args=args, cwd=str(cwd))
        try:
            result = subprocess.run(
                [self._git_binary, *args],
                cwd=cwd,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise ExecutionError(
                f"Could not execute {self._git_binary}: {e}", args=args, stage=stage
            ) from e

        if result.returncode != 0:
            logger.debug(
                "git command failed",
                args=args,
                returncode=result.returncode,
                stderr=result.stderr.decode("utf-8", errors="replace").strip(),
            )
            raise CommandFailedError(result.returncode, args=args, stage=stage)

        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(
                f"Failed to decode output from Git command: {e}", args=args, stage=stage
            ) from e
        return output.strip()
