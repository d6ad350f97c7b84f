"""Grouping of commits into categories, sections and package buckets.

Ordering rules:
- Categories follow the configured order, never commit arrival order
- Sections follow the order in which their display name is first seen
- Package buckets follow the order in which their label is first seen
- Commits keep arrival order inside every bucket
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Generic, TypeVar

from changelog_py.core.models import CategoryInfo, CommitInfo, SectionInfo

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

OTHER_PACKAGES_LABEL = "Other"


class OrderedMultiMap(Generic[K, V]):
    """Mapping from key to an append-only list of values.

    Keys iterate in insertion order of their first value.
    """

    def __init__(self) -> None:
        self._data: dict[K, list[V]] = {}

    def add(self, key: K, value: V) -> None:
        self._data.setdefault(key, []).append(value)

    def keys(self) -> list[K]:
        return list(self._data)

    def items(self) -> Iterator[tuple[K, list[V]]]:
        for key, values in self._data.items():
            yield key, list(values)

    def __getitem__(self, key: K) -> list[V]:
        return list(self._data[key])

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"OrderedMultiMap({self._data!r})"


def classify_by_category(
    commits: Sequence[CommitInfo],
    category_names: Iterable[str],
) -> list[CategoryInfo]:
    """Partition commits into one bucket per configured category.

    A commit listing several categories lands in each of them; a commit
    listing none of the configured ones lands nowhere. Empty buckets are
    kept so callers can decide what to drop.

    Args:
        commits: Commits to classify
        category_names: Category display names in configuration order

    Returns:
        One CategoryInfo per name, in the given order
    """
    return [
        CategoryInfo(
            name=name,
            commits=[commit for commit in commits if name in commit.categories],
        )
        for name in category_names
    ]


def resolve_section_name(section: str | None, sections: Mapping[str, str]) -> str:
    """Resolve a commit's raw section key to its display name.

    Unmapped keys are shown verbatim; a commit without a section falls
    into the "" bucket.
    """
    if section is not None and section in sections:
        return sections[section]
    return section or ""


def classify_by_section(
    commits: Sequence[CommitInfo],
    sections: Mapping[str, str],
    category_names: Sequence[str],
) -> list[SectionInfo]:
    """Group commits by section display name, then by category.

    Commits are accumulated and read back under the same resolved display
    name, so two raw keys mapping to one display name share a section.

    Args:
        commits: Commits already filtered to those with an issue number
        sections: Raw section key to display name
        category_names: Category display names in configuration order

    Returns:
        Sections in first-seen order; empty when no sections are configured
    """
    if not sections:
        return []

    grouped: OrderedMultiMap[str, CommitInfo] = OrderedMultiMap()
    for commit in commits:
        grouped.add(resolve_section_name(commit.section, sections), commit)

    logger.debug("Grouped %d commits into sections %s", len(commits), grouped.keys())

    return [
        SectionInfo(name=name, categories=classify_by_category(section_commits, category_names))
        for name, section_commits in grouped.items()
    ]


def render_package_names(package_names: Sequence[str]) -> str:
    """Render a package set as a bucket label, e.g. "`a`, `b`"."""
    if not package_names:
        return OTHER_PACKAGES_LABEL
    return ", ".join(f"`{pkg}`" for pkg in package_names)


def bucket_by_package(commits: Sequence[CommitInfo]) -> OrderedMultiMap[str, CommitInfo]:
    """Group commits by the exact set of packages they touch."""
    buckets: OrderedMultiMap[str, CommitInfo] = OrderedMultiMap()
    for commit in commits:
        buckets.add(render_package_names(commit.packages), commit)
    return buckets


def has_packages(commits: Iterable[CommitInfo]) -> bool:
    return any(commit.packages for commit in commits)
