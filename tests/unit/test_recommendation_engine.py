"""
Unit tests for the recommendation engine.

Sample catalog (see conftest):
    sci-1 Science 100 | hea-1 Health 300 | env-1 Environment 200 |
    sci-2 Science 300 | tec-1 Technology 50 | hea-2 Health 300 | soc-1 Society 10
"""

import pytest

from src.catalog.models import Catalog
from src.engagement.store import InteractionSnapshot
from src.recommendation.engine import (
    category_chips,
    compute_category_preferences,
    compute_category_scores,
    compute_discover_feed,
    compute_recommended,
    filter_by_category,
)


def ids(topics):
    return [t.id for t in topics]


# ============================================================================
# Category affinity
# ============================================================================


class TestCategoryPreferences:
    def test_liked_scores_two_completed_scores_one(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("sci-1",), completed_topics=("hea-1",))

        assert compute_category_scores(catalog, snapshot) == {"Science": 2, "Health": 1}
        assert compute_category_preferences(catalog, snapshot) == ["Science", "Health"]

    def test_liked_and_completed_are_additive(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("env-1",), completed_topics=("env-1",))
        assert compute_category_scores(catalog, snapshot) == {"Environment": 3}

    def test_no_interactions_empty(self, catalog):
        assert compute_category_preferences(catalog, InteractionSnapshot()) == []

    def test_ties_keep_first_interacted_catalog_order(self, catalog):
        # hea-1 precedes sci-2 in the catalog, so Health enters the scores first
        snapshot = InteractionSnapshot(liked_topics=("sci-2", "hea-1"))
        assert compute_category_preferences(catalog, snapshot) == ["Health", "Science"]

    def test_higher_score_wins_over_order(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("soc-1",), completed_topics=("sci-1",))
        assert compute_category_preferences(catalog, snapshot) == ["Society", "Science"]

    def test_two_completions_tie_with_one_like(self, catalog):
        snapshot = InteractionSnapshot(
            liked_topics=("tec-1",),
            completed_topics=("sci-1", "sci-2"),
        )
        # Science 1+1, Technology 2 -> tie, Science seen first
        assert compute_category_preferences(catalog, snapshot) == ["Science", "Technology"]

    def test_custom_weights(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("sci-1",), completed_topics=("hea-1",))
        ranking = compute_category_preferences(catalog, snapshot, liked_weight=1, completed_weight=5)
        assert ranking == ["Health", "Science"]


# ============================================================================
# Recommended feed
# ============================================================================


class TestRecommended:
    def test_popularity_fallback_with_catalog_tie_break(self, catalog):
        recommended = compute_recommended(catalog, InteractionSnapshot())
        # three topics tie at 300 views -> catalog order
        assert ids(recommended) == ["hea-1", "sci-2", "hea-2"]

    def test_affinity_then_views(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("sci-1",), completed_topics=("hea-1",))
        # Science=2 -> score 2, Health=1 -> score 1, others 0; hea-1 is completed
        assert ids(compute_recommended(catalog, snapshot)) == ["sci-2", "sci-1", "hea-2"]

    def test_unranked_categories_fall_back_to_views(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("tec-1",))
        assert ids(compute_recommended(catalog, snapshot)) == ["tec-1", "hea-1", "sci-2"]

    def test_never_recommends_completed(self, catalog):
        snapshot = InteractionSnapshot(completed_topics=("hea-1", "sci-2", "hea-2"))
        recommended = compute_recommended(catalog, snapshot)
        assert all(not snapshot.is_completed(t.id) for t in recommended)
        assert len(recommended) <= 3

    def test_count(self, catalog):
        assert len(compute_recommended(catalog, InteractionSnapshot(), count=5)) == 5
        assert compute_recommended(catalog, InteractionSnapshot(), count=0) == []

    def test_all_completed(self, catalog):
        snapshot = InteractionSnapshot(completed_topics=tuple(ids(catalog)))
        assert compute_recommended(catalog, snapshot) == []

    def test_empty_catalog(self):
        assert compute_recommended(Catalog([]), InteractionSnapshot()) == []

    def test_repeatable(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("soc-1",), completed_topics=("env-1",))
        assert compute_recommended(catalog, snapshot) == compute_recommended(catalog, snapshot)


# ============================================================================
# Discover feed
# ============================================================================

INTERACTION_STATES = [
    InteractionSnapshot(),
    InteractionSnapshot(liked_topics=("sci-1",), completed_topics=("hea-1",)),
    InteractionSnapshot(completed_topics=("soc-1", "sci-1", "env-1")),
    InteractionSnapshot(liked_topics=("tec-1", "hea-2"), completed_topics=("tec-1",)),
    InteractionSnapshot(
        completed_topics=("sci-1", "hea-1", "env-1", "sci-2", "tec-1", "hea-2", "soc-1")
    ),
]


class TestDiscoverFeed:
    def test_completed_sink_to_bottom_in_catalog_order(self, catalog):
        snapshot = InteractionSnapshot(completed_topics=("soc-1", "sci-1"))
        recommended = compute_recommended(catalog, snapshot)
        discover = compute_discover_feed(catalog, snapshot, recommended)

        assert ids(recommended) == ["sci-2", "hea-1", "hea-2"]
        assert ids(discover) == ["env-1", "tec-1", "sci-1", "soc-1"]

    def test_computes_recommended_when_omitted(self, catalog):
        snapshot = InteractionSnapshot(liked_topics=("env-1",))
        recommended = compute_recommended(catalog, snapshot)
        assert compute_discover_feed(catalog, snapshot) == compute_discover_feed(
            catalog, snapshot, recommended
        )

    @pytest.mark.parametrize("snapshot", INTERACTION_STATES)
    def test_feeds_partition_catalog(self, catalog, snapshot):
        recommended = compute_recommended(catalog, snapshot)
        discover = compute_discover_feed(catalog, snapshot, recommended)
        combined = ids(recommended) + ids(discover)

        assert len(combined) == len(set(combined))
        assert set(combined) == set(ids(catalog))

    @pytest.mark.parametrize("snapshot", INTERACTION_STATES)
    def test_completed_after_unfinished(self, catalog, snapshot):
        discover = compute_discover_feed(catalog, snapshot)
        flags = [snapshot.is_completed(t.id) for t in discover]
        assert flags == sorted(flags)

        order = ids(catalog)
        fresh = [t.id for t in discover if not snapshot.is_completed(t.id)]
        done = [t.id for t in discover if snapshot.is_completed(t.id)]
        assert fresh == sorted(fresh, key=order.index)
        assert done == sorted(done, key=order.index)

    def test_empty_catalog(self):
        assert compute_discover_feed(Catalog([]), InteractionSnapshot()) == []


# ============================================================================
# Category chips & filter
# ============================================================================


class TestCategoryChips:
    def test_distinct_first_seen(self, catalog):
        assert category_chips(catalog) == ["Science", "Health", "Environment", "Technology", "Society"]

    def test_limit(self, catalog):
        assert category_chips(catalog, limit=2) == ["Science", "Health"]

    def test_empty(self):
        assert category_chips([]) == []


class TestFilterByCategory:
    def test_keeps_order(self, catalog):
        assert ids(filter_by_category(catalog, "Health")) == ["hea-1", "hea-2"]

    def test_none_keeps_all(self, catalog):
        assert ids(filter_by_category(catalog, None)) == ids(catalog)

    def test_unknown_category(self, catalog):
        assert filter_by_category(catalog, "Sports") == []
