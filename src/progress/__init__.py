"""Progress Model: levels, unlock gating and completion stats."""

from .model import (
    POINTS_PER_COMPLETION,
    POINTS_PER_LEVEL,
    UNLOCK_THRESHOLD,
    CategoryStat,
    LevelInfo,
    category_stats,
    compute_level,
    is_unlocked,
    level_progress_percent,
    overall_progress_percent,
    recently_completed,
    unlock_progress_percent,
)

__all__ = [
    "POINTS_PER_COMPLETION",
    "POINTS_PER_LEVEL",
    "UNLOCK_THRESHOLD",
    "CategoryStat",
    "LevelInfo",
    "category_stats",
    "compute_level",
    "is_unlocked",
    "level_progress_percent",
    "overall_progress_percent",
    "recently_completed",
    "unlock_progress_percent",
]
