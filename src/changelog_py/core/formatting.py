"""Markdown formatting of single changelog entries and contributors."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from changelog_py.core.models import CommitInfo, GitHubUser

# "fix #12", "Closes T34", "resolved #5", ...
COMMIT_FIX_REGEX = re.compile(
    r"(fix|close|resolve)(e?s|e?d)? [T#](\d+)", re.IGNORECASE | re.ASCII
)


def rewrite_closing_reference(title: str, base_issue_url: str) -> str:
    """Turn the first closing keyword in a title into an issue link.

    Args:
        title: Issue or pull request title
        base_issue_url: URL prefix the issue number is appended to

    Returns:
        Title with the first match replaced by "Closes [#N](<url>N)"
    """
    return COMMIT_FIX_REGEX.sub(
        lambda m: f"Closes [#{m.group(3)}]({base_issue_url}{m.group(3)})",
        title,
        count=1,
    )


def render_contribution(commit: CommitInfo, base_issue_url: str) -> str | None:
    """Render a single changelog entry.

    Returns:
        The entry text, or None when the commit has no GitHub issue
    """
    issue = commit.github_issue
    if issue is None:
        return None

    markdown = ""
    if issue.number and issue.pull_request_url:
        markdown += f"[#{issue.number}]({issue.pull_request_url}) "

    title = rewrite_closing_reference(issue.title, base_issue_url)
    markdown += f"{title} ([@{issue.user.login}]({issue.user.html_url}))"
    return markdown


def render_contribution_list(
    commits: Iterable[CommitInfo],
    base_issue_url: str,
    prefix: str = "",
) -> str:
    """Render renderable commits as a bullet list, one "* " line each."""
    rendered = (render_contribution(commit, base_issue_url) for commit in commits)
    return "\n".join(f"{prefix}* {entry}" for entry in rendered if entry)


def render_contributor(contributor: GitHubUser) -> str:
    user_name_and_link = f"[@{contributor.login}]({contributor.html_url})"
    if contributor.name:
        return f"{contributor.name} ({user_name_and_link})"
    return user_name_and_link


def render_contributor_list(contributors: Sequence[GitHubUser]) -> str:
    """Render the committer roll-call.

    Lines are sorted by their rendered text, so named users sort by name
    and unnamed users by their "[@login]" link.
    """
    lines = sorted(f"- {render_contributor(contributor)}" for contributor in contributors)
    return f"#### Committers: {len(contributors)}\n" + "\n".join(lines)
