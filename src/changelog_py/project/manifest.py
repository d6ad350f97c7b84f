"""Project metadata inference from manifests.

This module infers the GitHub repository and the next version from an
already-parsed pyproject.toml and lerna.json, for projects that do not
spell them out in their changelog configuration.
"""

from __future__ import annotations

import re
from typing import Any

# https://github.com/o/r, git+https://..., ssh://git@github.com/o/r.git, git://...
_GITHUB_URL_RE = re.compile(
    r"^(?:git\+)?(?:https?|ssh|git)://(?:[^@/]+@)?(?:www\.)?github\.com[:/]"
    r"(?P<user>[\w-]+)/(?P<project>[^/#?]+?)(?:\.git)?(?:[/#?].*)?$"
)
# git@github.com:o/r.git
_GITHUB_SCP_RE = re.compile(
    r"^(?:[^@/]+@)?github\.com:(?P<user>[\w-]+)/(?P<project>[^/#?]+?)(?:\.git)?/?$"
)
# github:o/r and the bare o/r shortcut
_GITHUB_SHORTCUT_RE = re.compile(
    r"^(?:github:)?(?P<user>[\w-]+)/(?P<project>[\w.-]+?)(?:\.git)?$"
)

# Checked in this order, case-insensitively
REPOSITORY_URL_KEYS = ("repository", "source", "source code", "code", "homepage")


def find_repo_from_url(url: str) -> str | None:
    """Extract "owner/name" from a GitHub repository URL.

    Args:
        url: Repository URL in any common git form

    Returns:
        "owner/name", or None when the URL does not point at GitHub
    """
    url = url.strip()
    for pattern in (_GITHUB_URL_RE, _GITHUB_SCP_RE, _GITHUB_SHORTCUT_RE):
        match = pattern.match(url)
        if match:
            return f"{match.group('user')}/{match.group('project')}"
    return None


def _repository_urls(pyproject: dict[str, Any], lerna: dict[str, Any]) -> list[str]:
    urls: list[str] = []

    project_urls = pyproject.get("project", {}).get("urls", {})
    by_key = {str(key).lower(): value for key, value in project_urls.items()}
    urls.extend(str(by_key[key]) for key in REPOSITORY_URL_KEYS if key in by_key)

    repository = lerna.get("repository")
    if isinstance(repository, dict):
        repository = repository.get("url")
    if isinstance(repository, str):
        urls.append(repository)

    return urls


def find_repo(pyproject: dict[str, Any], lerna: dict[str, Any]) -> str | None:
    """Infer the GitHub repository from manifest metadata."""
    for url in _repository_urls(pyproject, lerna):
        repo = find_repo_from_url(url)
        if repo:
            return repo
    return None


def find_next_version(pyproject: dict[str, Any], lerna: dict[str, Any]) -> str | None:
    """Infer the next version as "v<version>" from manifest metadata."""
    version = pyproject.get("project", {}).get("version") or lerna.get("version")
    if not version:
        return None
    return f"v{version}"
