"""
Insights (profile) screen view model and the share summary text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from config import Settings, get_settings
from src.catalog.models import Catalog, Topic
from src.engagement.store import InteractionSnapshot
from src.progress.model import (
    CategoryStat,
    category_stats,
    compute_level,
    level_progress_percent,
    overall_progress_percent,
    recently_completed,
)

APP_NAME = "Critical Mind"


@dataclass(frozen=True)
class Totals:
    liked: int
    favorited: int
    completed: int
    catalog_size: int


@dataclass(frozen=True)
class InsightsView:
    """Snapshot rendered by the Insights screen."""

    level: int
    points: int
    progress_in_level: int
    points_per_level: int
    level_progress_percent: float
    overall_progress_percent: float
    totals: Totals
    category_stats: list[CategoryStat] = field(default_factory=list)
    recently_completed: list[Topic] = field(default_factory=list)


def build_insights_view(
    catalog: Catalog,
    snapshot: InteractionSnapshot,
    settings: Settings | None = None,
) -> InsightsView:
    """Build the Insights snapshot from the catalog and user state."""
    progress = (settings or get_settings()).get_progress_config()
    per_level = progress["points_per_level"]
    level = compute_level(snapshot.points, per_level)
    completed_count = len(snapshot.completed_topics)

    return InsightsView(
        level=level.level,
        points=snapshot.points,
        progress_in_level=level.progress_in_level,
        points_per_level=per_level,
        level_progress_percent=level_progress_percent(snapshot.points, per_level),
        overall_progress_percent=overall_progress_percent(completed_count, len(catalog)),
        totals=Totals(
            liked=len(snapshot.liked_topics),
            favorited=len(snapshot.favorited_topics),
            completed=completed_count,
            catalog_size=len(catalog),
        ),
        category_stats=category_stats(catalog, snapshot.completed_topics),
        recently_completed=recently_completed(
            catalog, snapshot.completed_topics, limit=progress["recently_completed_count"]
        ),
    )


def build_share_message(insights: InsightsView) -> str:
    """Progress summary handed to the platform share sheet."""
    completed = insights.totals.completed
    noun = "topic" if completed == 1 else "topics"
    return (
        f"I'm level {insights.level} on {APP_NAME} with {insights.points} clarity points.\n\n"
        f"I've explored {completed} controversial {noun} to sharpen my critical thinking."
    )
