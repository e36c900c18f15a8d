"""
Unit tests for the progress model.

Tests:
- Level and in-level progress from points
- Unlock gate and clamped unlock percentage
- Category stats partitioning the catalog
- Recently completed ordering
"""

import pytest

from src.catalog.models import Catalog
from src.progress.model import (
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


class TestComputeLevel:
    @pytest.mark.parametrize(
        "points, level, progress",
        [
            (0, 1, 0),
            (10, 1, 10),
            (99, 1, 99),
            (100, 2, 0),
            (250, 3, 50),
        ],
    )
    def test_level_boundaries(self, points, level, progress):
        assert compute_level(points) == LevelInfo(level=level, progress_in_level=progress)

    def test_custom_points_per_level(self):
        assert compute_level(25, points_per_level=20) == LevelInfo(level=2, progress_in_level=5)

    def test_level_progress_percent(self):
        assert level_progress_percent(250) == pytest.approx(50.0)
        assert level_progress_percent(0) == 0.0


class TestUnlock:
    def test_below_threshold_locked(self):
        assert is_unlocked(1, 2) is False

    def test_at_threshold_unlocked(self):
        assert is_unlocked(2, 2) is True

    def test_percent(self):
        assert unlock_progress_percent(0, 2) == 0.0
        assert unlock_progress_percent(1, 2) == pytest.approx(50.0)

    def test_percent_clamped(self):
        assert unlock_progress_percent(3, 2) == 100

    def test_zero_threshold_fully_unlocked(self):
        assert unlock_progress_percent(0, 0) == 100.0


class TestCategoryStats:
    def test_first_seen_order_and_counts(self, catalog):
        stats = category_stats(catalog, {"sci-2", "hea-1", "hea-2"})

        assert stats == [
            CategoryStat("Science", completed=1, total=2),
            CategoryStat("Health", completed=2, total=2),
            CategoryStat("Environment", completed=0, total=1),
            CategoryStat("Technology", completed=0, total=1),
            CategoryStat("Society", completed=0, total=1),
        ]

    def test_partitions_catalog(self, catalog):
        stats = category_stats(catalog, [t.id for t in catalog])
        assert sum(s.total for s in stats) == len(catalog)
        assert all(s.completed <= s.total for s in stats)

    def test_unknown_completed_ids_ignored(self, catalog):
        stats = category_stats(catalog, {"not-in-catalog"})
        assert all(s.completed == 0 for s in stats)

    def test_empty_catalog(self):
        assert category_stats(Catalog([]), set()) == []

    def test_percent(self):
        assert CategoryStat("Science", 1, 4).percent == pytest.approx(25.0)
        assert CategoryStat("Science", 0, 0).percent == 0.0


class TestRecentlyCompleted:
    def test_newest_first_limited(self, catalog):
        order = ["sci-1", "env-1", "tec-1", "soc-1"]
        recent = recently_completed(catalog, order, limit=3)
        assert [t.id for t in recent] == ["soc-1", "tec-1", "env-1"]

    def test_skips_unknown_ids(self, catalog):
        recent = recently_completed(catalog, ["sci-1", "gone"], limit=3)
        assert [t.id for t in recent] == ["sci-1"]

    def test_nothing_completed(self, catalog):
        assert recently_completed(catalog, []) == []


class TestOverallProgress:
    def test_fraction_of_catalog(self):
        assert overall_progress_percent(3, 12) == pytest.approx(25.0)

    def test_empty_catalog(self):
        assert overall_progress_percent(0, 0) == 0.0
