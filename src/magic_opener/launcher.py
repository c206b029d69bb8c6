"""Hands a resolved destination to the opener, locally or over an SSH tunnel."""

import os
import socket
import subprocess
from collections.abc import Sequence

import structlog

from magic_opener.config.settings import Settings
from magic_opener.core.exceptions import ConfigurationError, LaunchError

logger = structlog.get_logger(__name__)


def is_url(destination: str) -> bool:
    return "://" in destination


def expand_tilde(path: str) -> str:
    """Expand a leading `~` or `~/` to the home directory."""
    if path == "~" or path.startswith("~/"):
        return os.path.expanduser(path)
    return path


def localize_destination(destination: str, settings: Settings) -> str:
    """Map a local path to what the SSH client machine sees.

    URLs and destinations outside SSH sessions pass through unchanged.
    Paths under the mounts prefix live under `$SSH_CLIENT_HOME/Mounts`
    on the client.
    """
    if is_url(destination) or not settings.in_ssh_session:
        return destination

    client_home = settings.ssh_client_home
    if not client_home:
        raise ConfigurationError(
            "No $SSH_CLIENT_HOME set! It must be set in the SSH client config."
        )

    expanded = expand_tilde(destination)
    if expanded.startswith(settings.mounts_prefix):
        return f"{client_home}/Mounts{expanded}"
    return expanded


def passthrough(arguments: Sequence[str], settings: Settings) -> str:
    """Run the opener with raw arguments and return what it wrote to stderr."""
    command = [settings.open_command, *arguments]
    try:
        result = subprocess.run(command, capture_output=True, check=False)
    except OSError as e:
        raise LaunchError(f"Failed to run {settings.open_command}: {e}") from e
    return result.stderr.decode("utf-8", errors="replace")


def forward_destination(destination: str, settings: Settings) -> None:
    """Write the destination to the port the SSH tunnel forwards to the client."""
    address = (settings.forward_host, settings.forward_port)
    logger.debug("Forwarding destination", destination=destination, address=address)
    try:
        with socket.create_connection(address) as conn:
            conn.sendall(destination.encode("utf-8"))
    except OSError as e:
        raise LaunchError(
            f"Unable to create a socket for {settings.forward_host}:{settings.forward_port}",
            details={"error": str(e)},
        ) from e


def open_destination(destination: str, settings: Settings) -> int:
    """Open the destination with the platform opener and return its exit status."""
    args = [destination]
    if is_url(destination) and settings.opener_is_macos_open:
        args.insert(0, "--background")

    logger.debug("Opening destination", command=settings.open_command, args=args)
    try:
        result = subprocess.run([settings.open_command, *args], check=False)
    except OSError as e:
        raise LaunchError(f"Failed to run {settings.open_command}: {e}") from e
    return result.returncode
