"""
Explore screen view model.

The Explore feed stays locked until the user has completed a few topics;
once unlocked it shows the recommended feed, the discover feed and the
category chip row.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from config import Settings, get_settings
from src.catalog.models import Catalog, Topic
from src.engagement.store import InteractionSnapshot
from src.progress.model import is_unlocked, unlock_progress_percent
from src.recommendation.engine import category_chips, compute_discover_feed, compute_recommended


@dataclass(frozen=True)
class ExploreView:
    """Snapshot rendered by the Explore screen."""

    unlocked: bool
    unlock_percent: float
    completed_count: int
    threshold: int
    recommended: list[Topic] = field(default_factory=list)
    discover: list[Topic] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)


def build_explore_view(
    catalog: Catalog,
    snapshot: InteractionSnapshot,
    settings: Settings | None = None,
) -> ExploreView:
    """Build the Explore snapshot. Feeds are empty while locked."""
    settings = settings or get_settings()
    tuning = settings.get_ranking_config()
    completed_count = len(snapshot.completed_topics)
    threshold = settings.get_progress_config()["unlock_threshold"]
    unlocked = is_unlocked(completed_count, threshold)
    percent = unlock_progress_percent(completed_count, threshold)

    if not unlocked:
        return ExploreView(
            unlocked=False,
            unlock_percent=percent,
            completed_count=completed_count,
            threshold=threshold,
        )

    recommended = compute_recommended(
        catalog,
        snapshot,
        count=tuning["recommended_count"],
        liked_weight=tuning["liked_weight"],
        completed_weight=tuning["completed_weight"],
    )
    return ExploreView(
        unlocked=True,
        unlock_percent=percent,
        completed_count=completed_count,
        threshold=threshold,
        recommended=recommended,
        discover=compute_discover_feed(catalog, snapshot, recommended),
        categories=category_chips(catalog, limit=tuning["explore_category_chips"]),
    )
