"""Configuration management for changelog-py."""

from __future__ import annotations

from changelog_py.config.loader import load_config
from changelog_py.config.models import (
    DEFAULT_IGNORE_COMMITTERS,
    DEFAULT_LABELS,
    ChangelogConfig,
)

__all__ = [
    "DEFAULT_IGNORE_COMMITTERS",
    "DEFAULT_LABELS",
    "ChangelogConfig",
    "load_config",
]
