"""Recommendation Engine: category affinity and Explore feeds."""

from .engine import (
    COMPLETED_WEIGHT,
    LIKED_WEIGHT,
    RECOMMENDED_COUNT,
    category_chips,
    compute_category_preferences,
    compute_category_scores,
    compute_discover_feed,
    compute_recommended,
    filter_by_category,
)

__all__ = [
    "COMPLETED_WEIGHT",
    "LIKED_WEIGHT",
    "RECOMMENDED_COUNT",
    "category_chips",
    "compute_category_preferences",
    "compute_category_scores",
    "compute_discover_feed",
    "compute_recommended",
    "filter_by_category",
]
