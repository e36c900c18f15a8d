"""Library screen: the user's saved (favorited) topics."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.catalog.models import Catalog, Topic
from src.engagement.store import InteractionSnapshot


@dataclass(frozen=True)
class LibraryView:
    topics: list[Topic] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.topics)

    @property
    def is_empty(self) -> bool:
        return not self.topics


def build_library_view(catalog: Catalog, snapshot: InteractionSnapshot) -> LibraryView:
    """Favorited topics in catalog order."""
    return LibraryView(topics=[t for t in catalog if snapshot.is_favorited(t.id)])
