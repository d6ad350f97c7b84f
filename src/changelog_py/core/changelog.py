"""Changelog generation from harvested releases.

This module ties configuration and release data to the markdown
renderer. It performs no I/O: releases are loaded by the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from changelog_py.core.releases import filter_contributors
from changelog_py.core.renderer import MarkdownRenderer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from changelog_py.config.models import ChangelogConfig
    from changelog_py.core.models import Release

logger = logging.getLogger(__name__)


def generate_changelog(
    releases: Sequence[Release],
    config: ChangelogConfig,
    *,
    drop_ignored_committers: bool = True,
) -> str:
    """Render releases into a markdown changelog.

    Args:
        releases: Releases in display order (newest first)
        config: Changelog configuration
        drop_ignored_committers: Remove config.ignore_committers from
            each release's contributors before rendering

    Returns:
        Markdown document
    """
    if drop_ignored_committers:
        releases = [filter_contributors(r, config.ignore_committers) for r in releases]

    logger.debug("Rendering %d releases for %s", len(releases), config.repo)
    renderer = MarkdownRenderer(config.to_renderer_options())
    return renderer.render_markdown(releases)
