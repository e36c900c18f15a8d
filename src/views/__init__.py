"""
Views: per-screen snapshots consumed by the presentation layer.

Components:
- explore: unlock gate plus recommended/discover feeds
- insights: level, points, category stats, share text
- library: favorited topics
- reader: section-by-section reading cursor
"""

from .explore import ExploreView, build_explore_view
from .insights import InsightsView, Totals, build_insights_view, build_share_message
from .library import LibraryView, build_library_view
from .reader import AdvanceResult, ReaderSession

__all__ = [
    "AdvanceResult",
    "ExploreView",
    "InsightsView",
    "LibraryView",
    "ReaderSession",
    "Totals",
    "build_explore_view",
    "build_insights_view",
    "build_library_view",
    "build_share_message",
]
