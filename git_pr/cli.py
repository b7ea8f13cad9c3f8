"""Typer CLI entrypoint for git-pr."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from . import __version__, config, render
from .app import run
from .exceptions import PrError

app = typer.Typer(
    help="Open a pull request for the current branch",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-pr {__version__}")
        raise typer.Exit()


@app.command()
def main(
    remote: str = typer.Argument(
        config.Config.default_remote,
        help="Remote whose URL identifies the repository on the forge.",
    ),
    target: Optional[str] = typer.Argument(
        None,
        help="Branch to merge into. Defaults to $GIT_PR_BASE or master.",
        show_default=False,
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Use this text instead of opening an editor. The first line is the title.",
    ),
    repo: Optional[Path] = typer.Option(
        None,
        "--repo",
        "-r",
        help="Path inside the repository to operate on (defaults to current working directory).",
        file_okay=False,
        dir_okay=True,
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the request without submitting it."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-pr version and exit.",
    ),
) -> None:
    """Create a pull request from the checked-out branch into TARGET.

    Examples:

        git-pr

        git-pr upstream main

        git-pr origin develop -m "Fix login redirect"
    """
    _ = version  # handled via callback
    configure_logging(verbose)
    try:
        run(
            remote=remote,
            target=target or config.get_default_base(),
            message=message,
            repo=repo,
            dry_run=dry_run,
            verbose=verbose,
        )
    except PrError as exc:
        render.error(exc.kind, exc.message)
        raise typer.Exit(exc.exit_code) from exc
    except KeyboardInterrupt:
        render.info("\nAborted by user")
        raise typer.Exit(130)


if __name__ == "__main__":
    app()
