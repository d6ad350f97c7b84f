"""Implementation of the 'render' command.

The render command turns harvested release data into a markdown
changelog and writes it to a file or to standard output.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.syntax import Syntax

from changelog_py.config import load_config
from changelog_py.core.changelog import generate_changelog
from changelog_py.core.releases import load_releases
from changelog_py.exceptions import ChangelogPyError

if TYPE_CHECKING:
    from rich.console import Console


def run_render(
    releases_file: Path,
    path: str | None,
    repo: str | None,
    next_version_from_metadata: bool,
    output: Path | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the render command.

    Args:
        releases_file: JSON file with the harvested releases
        path: Optional path to project directory
        repo: Override for the GitHub repository ("owner/name")
        next_version_from_metadata: Name the unreleased release after the
            manifest version
        output: File to write to instead of standard output
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        config = load_config(
            project_path,
            repo=repo,
            next_version_from_metadata=next_version_from_metadata,
        )
    except ChangelogPyError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    # Load releases
    try:
        releases = load_releases(releases_file)
    except ChangelogPyError as e:
        err_console.print(f"[red]Error loading releases:[/] {e}")
        raise SystemExit(1) from e

    markdown = generate_changelog(releases, config)

    if output is not None:
        try:
            output.write_text(markdown, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]Error writing {output}:[/] {e}")
            raise SystemExit(1) from e
        err_console.print(f"  [green]✓[/] Wrote changelog to {output}")
        return

    if console.file.isatty():
        console.print(Syntax(markdown, "markdown", word_wrap=True))
    else:
        # Pipes get the document byte for byte
        console.file.write(markdown)
