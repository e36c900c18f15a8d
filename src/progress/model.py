"""
Progress Model.

Pure computation of level, unlock and category completion metrics from a
catalog and a snapshot of the user's interactions.

Design:
- LevelInfo: level number and points into the current level
- CategoryStat: completed/total per category
- No function here mutates state or performs I/O
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from src.catalog.models import Catalog, Topic
from src.core.ranking import top_n

POINTS_PER_LEVEL = 100
UNLOCK_THRESHOLD = 2
POINTS_PER_COMPLETION = 10


@dataclass(frozen=True)
class LevelInfo:
    """Level derived from accumulated points."""

    level: int
    progress_in_level: int


@dataclass(frozen=True)
class CategoryStat:
    """Completion count for one category."""

    category: str
    completed: int
    total: int

    @property
    def percent(self) -> float:
        """Completion percentage (0 for an empty category)."""
        if self.total <= 0:
            return 0.0
        return self.completed / self.total * 100


def compute_level(points: int, points_per_level: int = POINTS_PER_LEVEL) -> LevelInfo:
    """
    Convert points into a level.

    Levels start at 1; every points_per_level points adds one.
    points is assumed non-negative (points only ever increase).
    """
    return LevelInfo(
        level=points // points_per_level + 1,
        progress_in_level=points % points_per_level,
    )


def level_progress_percent(points: int, points_per_level: int = POINTS_PER_LEVEL) -> float:
    """Progress toward the next level as a percentage."""
    return compute_level(points, points_per_level).progress_in_level / points_per_level * 100


def is_unlocked(completed_count: int, threshold: int = UNLOCK_THRESHOLD) -> bool:
    """Whether enough topics are completed to reveal the Explore feed."""
    return completed_count >= threshold


def unlock_progress_percent(completed_count: int, threshold: int = UNLOCK_THRESHOLD) -> float:
    """Progress toward unlocking, clamped to [0, 100]."""
    if threshold <= 0:
        return 100.0
    return min(completed_count / threshold * 100, 100.0)


def overall_progress_percent(completed_count: int, catalog_size: int) -> float:
    """Share of the whole catalog completed."""
    if catalog_size <= 0:
        return 0.0
    return completed_count / catalog_size * 100


def category_stats(catalog: Catalog | Sequence[Topic], completed: Collection[str]) -> list[CategoryStat]:
    """
    Completed/total counts per category, in first-seen catalog order.

    Totals across all entries add up to the catalog size.
    """
    completed = set(completed)
    counts: dict[str, list[int]] = {}

    for topic in catalog:
        entry = counts.setdefault(topic.category, [0, 0])
        entry[1] += 1
        if topic.id in completed:
            entry[0] += 1

    return [
        CategoryStat(category=category, completed=done, total=total)
        for category, (done, total) in counts.items()
    ]


def recently_completed(
    catalog: Catalog,
    completed_order: Sequence[str],
    limit: int = 3,
) -> list[Topic]:
    """
    Most recently completed topics, newest first.

    Args:
        catalog: Topic catalog
        completed_order: Completed ids in the order they were completed
        limit: Maximum number of topics returned

    Returns:
        Up to `limit` topics; ids not present in the catalog are skipped
    """
    recent = [catalog.get(tid) for tid in reversed(completed_order) if tid in catalog]
    return top_n(recent, limit)
