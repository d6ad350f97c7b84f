"""Core business logic for changelog-py.

This module contains the rendering pipeline:
- Release and commit models handed over by the commit harvester
- Grouping of commits by category, section and package
- Markdown formatting of entries and contributors
- Release and document rendering
"""

from __future__ import annotations

from changelog_py.core.changelog import generate_changelog
from changelog_py.core.formatting import (
    render_contribution,
    render_contribution_list,
    render_contributor,
    render_contributor_list,
    rewrite_closing_reference,
)
from changelog_py.core.grouping import (
    OrderedMultiMap,
    bucket_by_package,
    classify_by_category,
    classify_by_section,
    render_package_names,
)
from changelog_py.core.models import (
    UNRELEASED_TAG,
    CategoryInfo,
    CommitInfo,
    GitHubIssue,
    GitHubUser,
    Release,
    SectionInfo,
)
from changelog_py.core.releases import filter_contributors, load_releases, parse_releases
from changelog_py.core.renderer import (
    FlatStrategy,
    MarkdownRenderer,
    RendererOptions,
    SectionedStrategy,
    select_strategy,
)

__all__ = [
    # Models
    "UNRELEASED_TAG",
    "CategoryInfo",
    "CommitInfo",
    # Rendering
    "FlatStrategy",
    "GitHubIssue",
    "GitHubUser",
    "MarkdownRenderer",
    # Grouping
    "OrderedMultiMap",
    "Release",
    "RendererOptions",
    "SectionInfo",
    "SectionedStrategy",
    "bucket_by_package",
    "classify_by_category",
    "classify_by_section",
    "filter_contributors",
    # Changelog
    "generate_changelog",
    "load_releases",
    "parse_releases",
    # Formatting
    "render_contribution",
    "render_contribution_list",
    "render_contributor",
    "render_contributor_list",
    "render_package_names",
    "rewrite_closing_reference",
    "select_strategy",
]
