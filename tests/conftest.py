"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from changelog_py.core.models import CommitInfo, GitHubIssue, GitHubUser, PullRequestRef
from changelog_py.core.renderer import RendererOptions

if TYPE_CHECKING:
    from pathlib import Path

BASE_ISSUE_URL = "https://github.com/owner/repo/issues/"


def make_issue(
    number: int,
    title: str,
    login: str = "alice",
    *,
    pr: bool = True,
    name: str | None = None,
) -> GitHubIssue:
    """Build a GitHub issue, as a pull request unless pr=False."""
    return GitHubIssue(
        number=number,
        title=title,
        user=GitHubUser(login=login, html_url=f"https://github.com/{login}", name=name),
        pull_request=(
            PullRequestRef(html_url=f"https://github.com/owner/repo/pull/{number}") if pr else None
        ),
    )


def make_commit(
    number: int | None,
    title: str | None = None,
    *,
    categories: list[str] | None = None,
    section: str | None = None,
    packages: list[str] | None = None,
    login: str = "alice",
) -> CommitInfo:
    """Build a merge commit; title=None leaves it without a GitHub issue."""
    return CommitInfo(
        sha=f"sha{number}",
        message=f"Merge pull request #{number}",
        issue_number=number,
        github_issue=make_issue(number, title, login) if title is not None else None,
        categories=categories or [],
        section=section,
        packages=packages or [],
    )


@pytest.fixture
def options() -> RendererOptions:
    return RendererOptions(
        categories=[":rocket: Enhancement", ":bug: Bug Fix"],
        base_issue_url=BASE_ISSUE_URL,
    )


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """A project with a pyproject.toml pointing at a GitHub repository."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.2.0"

[project.urls]
Homepage = "https://example.com"
Repository = "https://github.com/owner/repo.git"
"""
    )
    return tmp_path


@pytest.fixture(name="make_commit")
def make_commit_fixture():
    return make_commit


@pytest.fixture(name="make_issue")
def make_issue_fixture():
    return make_issue
