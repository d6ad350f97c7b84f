"""Loading of harvested release data.

The commit harvester hands releases over as a JSON array. Each element is
validated into a frozen Release model before rendering.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from changelog_py.core.models import Release
from changelog_py.exceptions import ReleaseDataError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def parse_releases(data: Any) -> list[Release]:
    """Validate already-decoded release data.

    Args:
        data: A list of release mappings

    Returns:
        Releases in the given order

    Raises:
        ReleaseDataError: If data is not a list or a release is malformed
    """
    if not isinstance(data, list):
        raise ReleaseDataError(
            f"Expected a list of releases, got {type(data).__name__}"
        )

    releases = []
    for index, item in enumerate(data):
        try:
            releases.append(Release.model_validate(item))
        except ValidationError as e:
            raise ReleaseDataError(f"Invalid release at index {index}: {e}") from e
    return releases


def load_releases(path: Path) -> list[Release]:
    """Load releases from a JSON file.

    Raises:
        ReleaseDataError: If the file cannot be read or holds invalid data
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ReleaseDataError(f"Cannot read release data from {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ReleaseDataError(f"Invalid JSON in {path}: {e}") from e

    try:
        releases = parse_releases(data)
    except ReleaseDataError as e:
        raise ReleaseDataError(f"{path}: {e}") from e

    logger.debug("Loaded %d releases from %s", len(releases), path)
    return releases


def filter_contributors(release: Release, ignore_committers: Iterable[str]) -> Release:
    """Return a copy of the release without ignored committers."""
    if release.contributors is None:
        return release

    ignored = set(ignore_committers)
    contributors = [user for user in release.contributors if user.login not in ignored]
    return release.model_copy(update={"contributors": contributors})
