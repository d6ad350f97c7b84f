"""Data models handed to the rendering core.

Releases and their commits are produced by the commit harvester, which
enriches every merge commit with the matching GitHub issue or pull
request. The models are frozen: the renderer reads them and never
writes back.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Release name used by the harvester for commits newer than the last tag
UNRELEASED_TAG = "___unreleased___"

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

class GitHubUser(_Frozen):
    """A GitHub account as returned by the users API.

    Attributes:
        login: Account handle (e.g., "octocat")
        html_url: Profile URL
        name: Display name, when the user has set one
    """

    login: str
    html_url: str
    name: str | None = None

class PullRequestRef(_Frozen):
    html_url: str | None = None

class GitHubIssue(_Frozen):
    """An issue or pull request as returned by the issues API."""

    number: int
    title: str
    user: GitHubUser
    pull_request: PullRequestRef | None = None

    @property
    def pull_request_url(self) -> str | None:
        """URL of the pull request, or None for plain issues."""
        if self.pull_request is None:
            return None
        return self.pull_request.html_url

class CommitInfo(_Frozen):
    """A commit annotated with issue metadata and changelog placement.

    Attributes:
        sha: Commit hash
        message: Full commit message
        issue_number: PR/issue number parsed from a merge commit, if any
        github_issue: Issue or PR fetched from GitHub, if any
        categories: Display names of the categories the commit belongs to
        section: Raw section key, resolved through the sections mapping
        packages: Monorepo packages touched by the commit
    """

    sha: str
    message: str = ""
    issue_number: int | None = Field(default=None, alias="issueNumber")
    github_issue: GitHubIssue | None = Field(default=None, alias="githubIssue")
    categories: list[str] = []
    section: str | None = None
    packages: list[str] = []

    @field_validator("categories", "packages", mode="before")
    @classmethod
    def ensure_list(cls, v):
        """Treat a missing list as empty."""
        if v is None:
            return []
        return v

class Release(_Frozen):
    """A named, dated set of commits.

    The unreleased release carries ``UNRELEASED_TAG`` as its name and is
    displayed under the configured unreleased label.
    """

    name: str
    date: str
    commits: list[CommitInfo] = []
    contributors: list[GitHubUser] | None = None

    @property
    def is_unreleased(self) -> bool:
        return self.name == UNRELEASED_TAG

class CategoryInfo(_Frozen):
    name: str
    commits: list[CommitInfo]

class SectionInfo(_Frozen):
    name: str
    categories: list[CategoryInfo]
