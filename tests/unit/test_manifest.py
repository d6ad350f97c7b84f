"""Tests for repository and version inference from manifests."""

from __future__ import annotations

import pytest

from changelog_py.project.manifest import find_next_version, find_repo, find_repo_from_url


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/owner/repo",
        "https://github.com/owner/repo.git",
        "https://www.github.com/owner/repo/",
        "https://github.com/owner/repo/tree/main",
        "git+https://github.com/owner/repo.git",
        "git://github.com/owner/repo.git",
        "ssh://git@github.com/owner/repo.git",
        "git@github.com:owner/repo.git",
        "github:owner/repo",
        "owner/repo",
    ],
)
def test_find_repo_from_github_url(url: str):
    """Common GitHub URL forms resolve to owner/name."""
    assert find_repo_from_url(url) == "owner/repo"


def test_dotted_repo_name():
    assert find_repo_from_url("https://github.com/owner/repo.py.git") == "owner/repo.py"


@pytest.mark.parametrize(
    "url",
    [
        "https://gitlab.com/owner/repo",
        "git@bitbucket.org:owner/repo.git",
        "https://example.com",
        "not a url",
    ],
)
def test_find_repo_from_other_urls(url: str):
    """Non-GitHub URLs are not inferred."""
    assert find_repo_from_url(url) is None


class TestFindRepo:
    """Tests for find_repo()."""

    def test_repository_preferred_over_homepage(self):
        pyproject = {
            "project": {
                "urls": {
                    "Homepage": "https://github.com/home/page",
                    "Repository": "https://github.com/owner/repo",
                }
            }
        }

        assert find_repo(pyproject, {}) == "owner/repo"

    def test_skips_non_github_urls(self):
        pyproject = {
            "project": {
                "urls": {
                    "Source": "https://gitlab.com/owner/repo",
                    "Homepage": "https://github.com/owner/repo",
                }
            }
        }

        assert find_repo(pyproject, {}) == "owner/repo"

    def test_lerna_repository(self):
        assert find_repo({}, {"repository": {"url": "git@github.com:a/b.git"}}) == "a/b"
        assert find_repo({}, {"repository": "a/b"}) == "a/b"

    def test_not_found(self):
        assert find_repo({"project": {"name": "x"}}, {}) is None


class TestFindNextVersion:
    """Tests for find_next_version()."""

    def test_pyproject_first(self):
        assert find_next_version({"project": {"version": "1.0.0"}}, {"version": "2.0.0"}) == "v1.0.0"

    def test_lerna(self):
        assert find_next_version({}, {"version": "2.0.0"}) == "v2.0.0"

    def test_missing(self):
        assert find_next_version({}, {}) is None
