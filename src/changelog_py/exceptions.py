"""Exception hierarchy for changelog-py.

Only the outer layers raise: configuration loading and release data
loading. The rendering core degrades by omission instead.
"""

from __future__ import annotations


class ChangelogPyError(Exception):
    """Base class for all changelog-py errors."""


class ConfigError(ChangelogPyError):
    """Base class for configuration problems."""


class ConfigNotFoundError(ConfigError):
    """No project manifest could be located."""


class ConfigValidationError(ConfigError):
    """A manifest exists but holds invalid configuration."""


class ConfigurationError(ConfigError):
    """Required configuration could not be inferred from the project."""


class ReleaseDataError(ChangelogPyError):
    """Release data handed over by the commit harvester is unusable."""
