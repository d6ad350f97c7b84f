"""Implementation of the 'config' command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from changelog_py.config import load_config
from changelog_py.exceptions import ChangelogPyError

if TYPE_CHECKING:
    from rich.console import Console


def run_show_config(
    path: str | None,
    repo: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Print the resolved configuration as JSON."""
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path, repo=repo)
    except ChangelogPyError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    console.print(config.model_dump_json(indent=2), markup=False, highlight=False, soft_wrap=True)
