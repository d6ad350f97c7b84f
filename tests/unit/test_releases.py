"""Tests for release data loading and changelog generation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from changelog_py.config.models import ChangelogConfig
from changelog_py.core.changelog import generate_changelog
from changelog_py.core.models import UNRELEASED_TAG, GitHubUser, Release
from changelog_py.core.releases import filter_contributors, load_releases, parse_releases
from changelog_py.exceptions import ReleaseDataError

if TYPE_CHECKING:
    from pathlib import Path

RELEASE_DATA = [
    {
        "name": UNRELEASED_TAG,
        "date": "2021-01-01",
        "commits": [
            {
                "sha": "abc123",
                "message": "Merge pull request #1 from x/fix",
                "issueNumber": 1,
                "githubIssue": {
                    "number": 1,
                    "title": "Fix #1 thing",
                    "user": {"login": "x", "html_url": "u"},
                    "pull_request": {"html_url": "https://github.com/o/r/pull/1"},
                    "labels": [{"name": "bug"}],
                },
                "categories": [":bug: Bug Fix"],
                "packages": None,
            }
        ],
        "contributors": [
            {"login": "x", "html_url": "u", "name": None},
            {"login": "renovate[bot]", "html_url": "r"},
        ],
    }
]


class TestParseReleases:
    """Tests for parse_releases()."""

    def test_parse_camel_case_payload(self):
        """The harvester's camelCase keys are accepted."""
        releases = parse_releases(RELEASE_DATA)

        commit = releases[0].commits[0]
        assert releases[0].is_unreleased
        assert commit.issue_number == 1
        assert commit.github_issue.pull_request_url == "https://github.com/o/r/pull/1"
        assert commit.packages == []
        assert commit.section is None

    def test_not_a_list(self):
        with pytest.raises(ReleaseDataError, match="Expected a list"):
            parse_releases({"name": "v1"})

    def test_invalid_release_names_index(self):
        """The offending release index is reported."""
        with pytest.raises(ReleaseDataError, match="index 1"):
            parse_releases([{"name": "v1", "date": "d"}, {"name": "v0"}])

    def test_releases_are_frozen(self):
        release = parse_releases(RELEASE_DATA)[0]

        with pytest.raises(ValidationError):
            release.name = "v2"


class TestLoadReleases:
    """Tests for load_releases()."""

    def test_load(self, tmp_path: Path):
        path = tmp_path / "releases.json"
        path.write_text(json.dumps(RELEASE_DATA))

        assert len(load_releases(path)) == 1

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ReleaseDataError, match="Cannot read"):
            load_releases(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "releases.json"
        path.write_text("[{")

        with pytest.raises(ReleaseDataError, match="Invalid JSON"):
            load_releases(path)


class TestFilterContributors:
    """Tests for filter_contributors()."""

    def test_ignored_dropped(self):
        release = Release(
            name="v1",
            date="d",
            contributors=[
                GitHubUser(login="a", html_url="1"),
                GitHubUser(login="dependabot[bot]", html_url="2"),
            ],
        )
        filtered = filter_contributors(release, ["dependabot[bot]"])

        assert [u.login for u in filtered.contributors] == ["a"]
        assert len(release.contributors) == 2

    def test_no_contributors(self):
        release = Release(name="v1", date="d")

        assert filter_contributors(release, ["a"]) is release


class TestGenerateChangelog:
    """Tests for generate_changelog()."""

    def test_end_to_end(self):
        config = ChangelogConfig(repo="o/r")
        output = generate_changelog(parse_releases(RELEASE_DATA), config)

        assert output.startswith("\n# Changelog\n\n")
        assert "## Unreleased (2021-01-01)" in output
        assert "#### :bug: Bug Fix" in output
        assert "Closes [#1](https://github.com/o/r/issues/1) thing" in output
        assert "#### Committers: 1\n- [@x](u)" in output
        assert "renovate" not in output

    def test_keep_ignored_committers(self):
        config = ChangelogConfig(repo="o/r")
        output = generate_changelog(
            parse_releases(RELEASE_DATA), config, drop_ignored_committers=False
        )

        assert "#### Committers: 2" in output

    def test_next_version_names_unreleased(self):
        config = ChangelogConfig(repo="o/r", next_version="v1.3.0")
        output = generate_changelog(parse_releases(RELEASE_DATA), config)

        assert "## v1.3.0 (2021-01-01)" in output
