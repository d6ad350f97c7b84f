"""Configuration models for changelog-py."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from changelog_py.core.renderer import RendererOptions

DEFAULT_LABELS = {
    "breaking": ":boom: Breaking Change",
    "enhancement": ":rocket: Enhancement",
    "bug": ":bug: Bug Fix",
    "documentation": ":memo: Documentation",
    "internal": ":house: Internal",
}

DEFAULT_IGNORE_COMMITTERS = [
    "dependabot-bot",
    "dependabot[bot]",
    "dependabot-preview[bot]",
    "greenkeeperio-bot",
    "greenkeeper[bot]",
    "renovate-bot",
    "renovate[bot]",
]


class ChangelogConfig(BaseModel):
    """Root configuration, read from [tool.changelog-py] or lerna.json.

    Attributes:
        repo: GitHub repository as "owner/name"
        root_path: Project root the configuration was loaded from
        labels: GitHub label to category display name, in display order
        sections: Raw section key to section display name
        ignore_committers: Logins left out of the committer roll-call
        cache_dir: Directory for the harvester's GitHub response cache
        next_version: Display name of the unreleased release
        next_version_from_metadata: Infer next_version from the manifest
        title: Document title
        description: Paragraph under the title
    """

    repo: str = ""
    root_path: Path = Field(default_factory=Path.cwd)
    labels: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_LABELS))
    sections: dict[str, str] = Field(default_factory=dict)
    ignore_committers: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_COMMITTERS))
    cache_dir: Path | None = None
    next_version: str = "Unreleased"
    next_version_from_metadata: bool = False
    title: str = "Changelog"
    description: str = "All notable changes to this project will be documented in this file."

    @property
    def categories(self) -> list[str]:
        """Category display names in label order."""
        return list(self.labels.values())

    @property
    def base_issue_url(self) -> str:
        return f"https://github.com/{self.repo}/issues/"

    def to_renderer_options(self) -> RendererOptions:
        return RendererOptions(
            categories=self.categories,
            base_issue_url=self.base_issue_url,
            sections=dict(self.sections),
            unreleased_name=self.next_version,
            title=self.title,
            description=self.description,
        )
