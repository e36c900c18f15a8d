"""
Core Module - Shared helpers used across the engine.

Components:
- ranking: stable multi-key sorting, order-preserving dedup, top-N

Design Principle:
The progress model and the recommendation engine import from src/core/
rather than reimplementing their own sorting.
"""

from src.core.ranking import stable_sort_desc, top_n, unique_in_order

__all__ = [
    "stable_sort_desc",
    "top_n",
    "unique_in_order",
]
