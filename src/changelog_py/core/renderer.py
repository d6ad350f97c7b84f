"""Markdown rendering of releases into a changelog document.

Every release is rendered with one of two strategies:

- FlatStrategy: categories only, with per-package sub-lists in monorepos
- SectionedStrategy: sections, each holding its own categories

The document renderer always asks for the sectioned rendering; a release
without any section falls back to the flat one.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from changelog_py.core.formatting import render_contribution_list, render_contributor_list
from changelog_py.core.grouping import (
    bucket_by_package,
    classify_by_category,
    classify_by_section,
    has_packages,
)
from changelog_py.core.models import CommitInfo, Release, SectionInfo

logger = logging.getLogger(__name__)

MARKDOWN_INDENTATION = "&nbsp;"


@dataclass(frozen=True)
class RendererOptions:
    """Everything the renderer needs from the configuration."""

    categories: Sequence[str]
    base_issue_url: str
    sections: Mapping[str, str] = field(default_factory=dict)
    unreleased_name: str = "Unreleased"
    title: str = "Changelog"
    description: str = "All notable changes to this project will be documented in this file."


def _is_renderable(commit: CommitInfo) -> bool:
    return commit.github_issue is not None


def _release_header(release: Release, options: RendererOptions) -> str:
    name = options.unreleased_name if release.is_unreleased else release.name
    return f"## {name} ({release.date})"


def _contributors_block(release: Release) -> str:
    if not release.contributors:
        return ""
    return f"\n\n{render_contributor_list(release.contributors)}"


def render_contributions_by_package(commits: Sequence[CommitInfo], base_issue_url: str) -> str:
    """Render commits as one top-level bullet per package bucket."""
    return "\n".join(
        f"* {label}\n{render_contribution_list(pkg_commits, base_issue_url, '  ')}"
        for label, pkg_commits in bucket_by_package(commits).items()
    )


@dataclass(frozen=True)
class FlatStrategy:
    """Render a release as categories only."""

    def render(self, release: Release, options: RendererOptions) -> str:
        commits = [commit for commit in release.commits if _is_renderable(commit)]
        categories = [
            category
            for category in classify_by_category(commits, options.categories)
            if category.commits
        ]

        if not categories:
            logger.debug("Release %s has no categorized commits, skipping", release.name)
            return ""

        markdown = _release_header(release, options)

        for category in categories:
            markdown += f"\n\n#### {category.name}\n"

            if has_packages(category.commits):
                markdown += render_contributions_by_package(category.commits, options.base_issue_url)
            else:
                markdown += render_contribution_list(category.commits, options.base_issue_url)

        return markdown + _contributors_block(release)


@dataclass(frozen=True)
class SectionedStrategy:
    """Render a release as sections, each split into categories."""

    sections: tuple[SectionInfo, ...]

    def render(self, release: Release, options: RendererOptions) -> str:
        markdown = _release_header(release, options)

        for section in self.sections:
            markdown += f"\n\n### {section.name}"

            for category in section.categories:
                category_commits = render_contribution_list(category.commits, options.base_issue_url)
                if category_commits:
                    markdown += (
                        f"\n\n#### {MARKDOWN_INDENTATION} {category.name}\n{category_commits}"
                    )

        return markdown + _contributors_block(release)


ReleaseStrategy = FlatStrategy | SectionedStrategy


def select_strategy(release: Release, options: RendererOptions) -> ReleaseStrategy:
    """Pick the rendering strategy for a release.

    Only merge-derived commits (those with an issue number) are considered
    for sections. Sections without a single renderable entry are dropped;
    when none remain the release is rendered flat.
    """
    merged = [commit for commit in release.commits if commit.issue_number is not None]
    sections = tuple(
        section
        for section in classify_by_section(merged, options.sections, options.categories)
        if any(_is_renderable(c) for category in section.categories for c in category.commits)
    )

    if not sections:
        return FlatStrategy()
    return SectionedStrategy(sections=sections)


class MarkdownRenderer:
    """Render releases into a markdown changelog."""

    def __init__(self, options: RendererOptions) -> None:
        self.options = options

    def render_markdown(self, releases: Sequence[Release]) -> str:
        """Render the full document: title, description and every release.

        Releases that render to nothing are left out.
        """
        output = f"# {self.options.title}\n\n{self.options.description}\n\n"
        output += "\n\n\n".join(
            rendered
            for rendered in (self.render_release_by_section_and_category(r) for r in releases)
            if rendered
        )
        return f"\n{output}" if output else ""

    def render_release(self, release: Release) -> str:
        """Render a release grouped by category only."""
        return FlatStrategy().render(release, self.options)

    def render_release_by_section_and_category(self, release: Release) -> str:
        """Render a release grouped by section, falling back to categories."""
        strategy = select_strategy(release, self.options)
        if isinstance(strategy, FlatStrategy):
            logger.debug("Release %s has no sections, rendering flat", release.name)
        return strategy.render(release, self.options)
