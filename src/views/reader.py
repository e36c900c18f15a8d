"""
Reader session: the topic/section cursor behind the Home screen.

Tapping advances through a topic's sections; finishing the last section
completes the topic, awards points the first time, and moves on to the
next topic. Swiping moves between topics.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from config import Settings, get_settings
from src.catalog.models import Catalog, Section, Topic
from src.engagement.store import InteractionStore


@dataclass(frozen=True)
class AdvanceResult:
    """Outcome of advancing one section."""

    completed_topic: str | None = None
    points_awarded: int = 0
    moved_to_topic: str | None = None


class ReaderSession:
    """
    Cursor over the catalog for section-by-section reading.

    The session itself keeps only the two indexes; all engagement state
    lives in the InteractionStore.
    """

    def __init__(
        self,
        catalog: Catalog,
        store: InteractionStore,
        settings: Settings | None = None,
        start_topic_id: str | None = None,
    ):
        if len(catalog) == 0:
            raise ValueError("Cannot read an empty catalog")
        self.catalog = catalog
        self.store = store
        self.settings = settings or get_settings()
        self.topic_index = catalog.index_of(start_topic_id) if start_topic_id else 0
        self.section_index = 0

    @property
    def current_topic(self) -> Topic:
        return self.catalog[self.topic_index]

    @property
    def current_section(self) -> Section:
        return self.current_topic.sections[self.section_index]

    @property
    def is_last_section(self) -> bool:
        return self.section_index >= len(self.current_topic.sections) - 1

    @property
    def is_last_topic(self) -> bool:
        return self.topic_index >= len(self.catalog) - 1

    def advance_section(self) -> AdvanceResult:
        """
        Move to the next section, completing the topic after its last one.

        Points are only awarded when the topic was not already completed.
        On the final topic of the catalog the cursor stays in place.
        """
        if not self.is_last_section:
            self.section_index += 1
            return AdvanceResult()

        topic = self.current_topic
        points = self.store.complete_topic(topic.id, self.settings.points_per_completion)
        if points:
            logger.info(f"Finished '{topic.title}' (+{points} points)")

        moved_to = None
        if not self.is_last_topic:
            self.topic_index += 1
            self.section_index = 0
            moved_to = self.current_topic.id

        return AdvanceResult(completed_topic=topic.id, points_awarded=points, moved_to_topic=moved_to)

    def next_topic(self) -> bool:
        """Swipe forward. Returns False at the end of the catalog."""
        if self.is_last_topic:
            return False
        self.topic_index += 1
        self.section_index = 0
        return True

    def previous_topic(self) -> bool:
        """Swipe back. Returns False at the start of the catalog."""
        if self.topic_index == 0:
            return False
        self.topic_index -= 1
        self.section_index = 0
        return True

    def toggle_like(self) -> bool:
        return self.store.toggle_like(self.current_topic.id)

    def toggle_favorite(self) -> bool:
        return self.store.toggle_favorite(self.current_topic.id)
