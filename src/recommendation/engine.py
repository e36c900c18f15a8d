"""
Recommendation Engine: category affinity and topic feeds.

Ranks topics for the Explore screen from the user's likes and completions:
- Category affinity: liked topic = +2, completed topic = +1 to its category
- Recommended feed: unfinished topics from the favourite categories first
- Discover feed: everything else, completed topics last

All functions are pure over (catalog, snapshot). An empty catalog yields
empty results at every stage.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from src.catalog.models import Catalog, Topic
from src.core.ranking import stable_sort_desc, top_n, unique_in_order
from src.engagement.store import InteractionSnapshot

LIKED_WEIGHT = 2
COMPLETED_WEIGHT = 1
RECOMMENDED_COUNT = 3


def compute_category_scores(
    catalog: Iterable[Topic],
    snapshot: InteractionSnapshot,
    liked_weight: int = LIKED_WEIGHT,
    completed_weight: int = COMPLETED_WEIGHT,
) -> dict[str, int]:
    """
    Affinity score per category.

    Weights are additive: a topic both liked and completed contributes
    liked_weight + completed_weight. Categories without any interaction
    get no entry at all. Keys are in first-interacted catalog order.
    """
    scores: dict[str, int] = {}

    for topic in catalog:
        if snapshot.is_liked(topic.id):
            scores[topic.category] = scores.get(topic.category, 0) + liked_weight
        if snapshot.is_completed(topic.id):
            scores[topic.category] = scores.get(topic.category, 0) + completed_weight

    return scores


def compute_category_preferences(
    catalog: Iterable[Topic],
    snapshot: InteractionSnapshot,
    liked_weight: int = LIKED_WEIGHT,
    completed_weight: int = COMPLETED_WEIGHT,
) -> list[str]:
    """
    Categories ranked by affinity, highest first.

    Sorting is by score only; equal scores keep first-seen catalog order.
    """
    scores = compute_category_scores(catalog, snapshot, liked_weight, completed_weight)
    ranking = stable_sort_desc(scores, lambda category: scores[category])
    logger.debug(f"Category preferences: {ranking}")
    return ranking


def compute_recommended(
    catalog: Catalog | Sequence[Topic],
    snapshot: InteractionSnapshot,
    count: int = RECOMMENDED_COUNT,
    liked_weight: int = LIKED_WEIGHT,
    completed_weight: int = COMPLETED_WEIGHT,
) -> list[Topic]:
    """
    Select up to `count` unfinished topics to recommend.

    Strategy:
    1. Drop completed topics
    2. No affinity yet: most viewed first (popularity fallback)
    3. Otherwise score = len(ranking) - rank of the topic's category
       (0 for categories never interacted with), then views

    Ties on every key keep catalog order.
    """
    candidates = [t for t in catalog if not snapshot.is_completed(t.id)]
    ranking = compute_category_preferences(catalog, snapshot, liked_weight, completed_weight)

    if not ranking:
        return top_n(stable_sort_desc(candidates, lambda t: t.view_count), count)

    position = {category: i for i, category in enumerate(ranking)}

    def category_score(topic: Topic) -> int:
        if topic.category not in position:
            return 0
        return len(ranking) - position[topic.category]

    ranked = stable_sort_desc(candidates, category_score, lambda t: t.view_count)
    return top_n(ranked, count)


def compute_discover_feed(
    catalog: Catalog | Sequence[Topic],
    snapshot: InteractionSnapshot,
    recommended: Sequence[Topic] | None = None,
) -> list[Topic]:
    """
    Every topic not in the recommended feed.

    Unfinished topics come first, then completed ones, each group in
    catalog order. Together with `recommended` this covers the catalog
    exactly once.
    """
    if recommended is None:
        recommended = compute_recommended(catalog, snapshot)
    recommended_ids = {t.id for t in recommended}

    fresh = [
        t for t in catalog
        if not snapshot.is_completed(t.id) and t.id not in recommended_ids
    ]
    done = [t for t in catalog if snapshot.is_completed(t.id)]
    return fresh + done


def category_chips(catalog: Iterable[Topic], limit: int | None = None) -> list[str]:
    """Distinct categories in first-seen order, optionally truncated."""
    chips = unique_in_order(t.category for t in catalog)
    if limit is not None:
        chips = top_n(chips, limit)
    return chips


def filter_by_category(topics: Iterable[Topic], category: str | None) -> list[Topic]:
    """Keep topics in one category (None keeps all), preserving order."""
    if category is None:
        return list(topics)
    return [t for t in topics if t.category == category]
