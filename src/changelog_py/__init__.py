"""changelog-py: markdown changelogs from GitHub-annotated releases."""

from __future__ import annotations

__version__ = "0.1.0"
