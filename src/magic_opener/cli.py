"""CLI for magic-opener: an `open` that knows about Git repositories."""

import sys
from pathlib import Path

import click
import structlog

from magic_opener import __version__
from magic_opener.config.logging import configure_logging
from magic_opener.config.settings import Settings, get_settings
from magic_opener.core.exceptions import MagicOpenerError, NoRemoteConfiguredError
from magic_opener.launcher import (
    forward_destination,
    localize_destination,
    open_destination,
    passthrough,
)
from magic_opener.services.resolution import ResolutionService, join_arguments

logger = structlog.get_logger(__name__)

program = "open"


def resolve(current_dir: str, paths: list[str], settings: Settings) -> str:
    """Resolve the destination, treating a repository without remote as a plain directory."""
    service = ResolutionService(settings=settings)
    try:
        return service.resolve(current_dir, paths)
    except NoRemoteConfiguredError as e:
        logger.debug("No remote configured, opening as path", remote=e.remote)
        return join_arguments(current_dir, paths)


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
@click.version_option(__version__, "--version", "-V", prog_name=program)
@click.option("--print", "-p", "print_only", is_flag=True, help="Print the URL to stdout instead of opening it")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.argument("paths", nargs=-1, type=click.UNPROCESSED)
def cli(print_only: bool, verbose: bool, paths: tuple[str, ...]) -> None:
    """Open a path, URL, or the web page of the current Git repository.

    With no PATH inside a Git repository, opens the current branch on the
    hosting service. A commit hash opens that commit (or the pull request
    it came from), a number opens that pull request.
    """
    settings = get_settings()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.json_logs,
    )

    current_dir = str(Path.cwd())
    arguments = list(paths)

    try:
        destination = resolve(current_dir, arguments, settings)

        # Options meant for the opener itself
        if destination.startswith("-"):
            click.echo(passthrough(arguments, settings), nl=False)
            sys.exit(0)

        destination = localize_destination(destination, settings)

        if print_only:
            click.echo(destination)
            return

        if settings.in_ssh_session:
            forward_destination(destination, settings)
            return

        sys.exit(open_destination(destination, settings))
    except MagicOpenerError as e:
        click.echo(f"{program} error: {e.message}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
