"""Configuration loading.

Configuration is read from the [tool.changelog-py] table of
pyproject.toml, or from the "changelog" key of lerna.json when the
table is absent. Missing fields are filled with defaults; the
repository and, on request, the next version are inferred from the
manifests when not configured.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from changelog_py.config.models import ChangelogConfig
from changelog_py.exceptions import (
    ConfigNotFoundError,
    ConfigurationError,
    ConfigValidationError,
)
from changelog_py.project.manifest import find_next_version, find_repo

logger = logging.getLogger(__name__)

TOOL_KEY = "changelog-py"
MANIFEST_NAMES = ("pyproject.toml", "lerna.json")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def find_config_root(start: Path | None = None) -> Path:
    """Find the closest directory holding pyproject.toml or lerna.json.

    Args:
        start: Directory to start searching from (default: cwd)

    Raises:
        ConfigNotFoundError: If no manifest is found up to the filesystem root
    """
    current = (start or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        if any((directory / name).is_file() for name in MANIFEST_NAMES):
            return directory

    raise ConfigNotFoundError(
        f"No pyproject.toml or lerna.json found in {current} or any parent directory"
    )


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def load_lerna_json(path: Path) -> dict[str, Any]:
    """Parse a lerna.json file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not a valid JSON object
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigValidationError(f"Expected a JSON object in {path}")
    return data


def extract_changelog_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Extract the [tool.changelog-py] table, or {} when missing."""
    return dict(pyproject.get("tool", {}).get(TOOL_KEY, {}))


def _snake_case_keys(data: dict[str, Any]) -> dict[str, Any]:
    # lerna.json uses camelCase: ignoreCommitters, nextVersionFromMetadata, ...
    return {_CAMEL_RE.sub("_", key).lower(): value for key, value in data.items()}


def load_lerna_config(lerna: dict[str, Any]) -> dict[str, Any] | None:
    """Extract the "changelog" key of lerna.json, or None when missing."""
    changelog = lerna.get("changelog")
    if not isinstance(changelog, dict):
        return None
    return _snake_case_keys(changelog)


def _read_manifests(root: Path) -> tuple[dict[str, Any], dict[str, Any]]:
    pyproject_path = root / "pyproject.toml"
    lerna_path = root / "lerna.json"
    pyproject = load_pyproject_toml(pyproject_path) if pyproject_path.is_file() else {}
    lerna = load_lerna_json(lerna_path) if lerna_path.is_file() else {}
    return pyproject, lerna


def load_config(
    path: Path | None = None,
    *,
    repo: str | None = None,
    next_version_from_metadata: bool = False,
) -> ChangelogConfig:
    """Load the changelog configuration for a project.

    Args:
        path: Project directory or any directory below it (default: cwd)
        repo: Override for the configured repository
        next_version_from_metadata: Infer next_version from the manifest
            version even when the configuration does not ask for it

    Returns:
        Fully defaulted configuration

    Raises:
        ConfigNotFoundError: If no manifest is found
        ConfigValidationError: If the configuration is invalid
        ConfigurationError: If the repository or next version cannot be inferred
    """
    root = find_config_root(path)
    pyproject, lerna = _read_manifests(root)

    # Step 1: partial config from pyproject.toml, then lerna.json
    raw = extract_changelog_config(pyproject)
    if raw:
        logger.info("Using [tool.%s] from %s", TOOL_KEY, root / "pyproject.toml")
    else:
        raw = load_lerna_config(lerna) or {}
        if raw:
            logger.info("Using changelog config from %s", root / "lerna.json")

    if repo:
        raw["repo"] = repo

    # Step 2: infer what is missing
    if not raw.get("repo"):
        raw["repo"] = find_repo(pyproject, lerna)
        if not raw["repo"]:
            raise ConfigurationError(
                'Could not infer "repo" from the project manifest. '
                f'Set it in [tool.{TOOL_KEY}] or pass --repo.'
            )

    if next_version_from_metadata or raw.get("next_version_from_metadata"):
        raw["next_version"] = find_next_version(pyproject, lerna)
        if not raw["next_version"]:
            raise ConfigurationError('Could not infer "next_version" from the project manifest.')

    raw["root_path"] = root

    # Empty values fall back to defaults
    raw = {key: value for key, value in raw.items() if value is not None and value != ""}

    try:
        return ChangelogConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid changelog configuration: {e}") from e
