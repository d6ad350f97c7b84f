"""Project manifest inspection."""

from __future__ import annotations

from changelog_py.project.manifest import find_next_version, find_repo, find_repo_from_url

__all__ = ["find_next_version", "find_repo", "find_repo_from_url"]
