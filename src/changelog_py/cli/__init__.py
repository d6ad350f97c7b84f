"""CLI entry point for changelog-py.

Commands:
- render: render harvested releases into a markdown changelog
- config: show the resolved configuration
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from changelog_py import __version__
from changelog_py.cli.commands.config import run_show_config
from changelog_py.cli.commands.render import run_render

app = typer.Typer(
    name="changelog-py",
    help="Generate a markdown changelog from GitHub-annotated releases.",
    add_completion=False,
    no_args_is_help=True,
)


def _configure_logging(verbose: bool, err_console: Console) -> None:
    logger = logging.getLogger("changelog_py")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"changelog-py {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Generate a markdown changelog from GitHub-annotated releases."""


@app.command("render")
def render(
    releases_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="JSON file with the harvested releases.",
    ),
    path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Project directory (default: current directory)."
    ),
    repo: Optional[str] = typer.Option(
        None, "--repo", help="GitHub repository as owner/name."
    ),
    next_version_from_metadata: bool = typer.Option(
        False,
        "--next-version-from-metadata",
        help="Name the unreleased release after the manifest version.",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the changelog to this file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Render releases into a markdown changelog."""
    console = Console()
    err_console = Console(stderr=True)
    _configure_logging(verbose, err_console)

    run_render(
        releases_file=releases_file,
        path=path,
        repo=repo,
        next_version_from_metadata=next_version_from_metadata,
        output=output,
        console=console,
        err_console=err_console,
    )


@app.command("config")
def show_config(
    path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Project directory (default: current directory)."
    ),
    repo: Optional[str] = typer.Option(
        None, "--repo", help="GitHub repository as owner/name."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Show the resolved configuration."""
    console = Console()
    err_console = Console(stderr=True)
    _configure_logging(verbose, err_console)

    run_show_config(path=path, repo=repo, console=console, err_console=err_console)


__all__ = ["app"]
