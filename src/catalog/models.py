"""
Catalog data models.

Topics are immutable for the session: the catalog is loaded once at
startup, validated, and then only read by the progress and ranking code.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Closed set of topic categories."""

    SCIENCE = "Science"
    HEALTH = "Health"
    ENVIRONMENT = "Environment"
    TECHNOLOGY = "Technology"
    SOCIETY = "Society"
    ECONOMY = "Economy"
    POLITICS = "Politics"

    @classmethod
    def labels(cls) -> list[str]:
        """All category labels in declaration order."""
        return [c.value for c in cls]

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            Category.SCIENCE: "medium_purple",
            Category.HEALTH: "spring_green3",
            Category.ENVIRONMENT: "green",
            Category.TECHNOLOGY: "dodger_blue2",
            Category.SOCIETY: "orange1",
            Category.ECONOMY: "hot_pink",
            Category.POLITICS: "red",
        }[self]


@dataclass(frozen=True)
class Section:
    """One card of a topic."""

    title: str
    text: str

    @classmethod
    def from_dict(cls, data: dict) -> Section:
        return cls(title=data["title"], text=data["text"])

    def to_dict(self) -> dict:
        return {"title": self.title, "text": self.text}


@dataclass(frozen=True)
class Topic:
    """A unit of content composed of ordered sections."""

    id: str
    title: str
    category: str
    sections: tuple[Section, ...] = field(default_factory=tuple)
    view_count: int = 0

    @property
    def summary(self) -> str:
        """Body of the first section, used as a teaser."""
        return self.sections[0].text if self.sections else ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Topic:
        """Create Topic from JSON dict (accepts camelCase viewCount)."""
        view_count = data.get("view_count", data.get("viewCount", 0))
        return cls(
            id=data["id"],
            title=data["title"],
            category=data["category"],
            sections=tuple(Section.from_dict(s) for s in data.get("sections", [])),
            view_count=view_count,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "sections": [s.to_dict() for s in self.sections],
            "view_count": self.view_count,
        }


class Catalog:
    """
    Ordered, read-only collection of topics.

    Iteration order is the catalog order; several ranking tie-breaks
    depend on it.
    """

    def __init__(self, topics: Iterable[Topic]):
        self._topics: tuple[Topic, ...] = tuple(topics)
        self._by_id: dict[str, Topic] = {t.id: t for t in self._topics}
        self._index: dict[str, int] = {t.id: i for i, t in enumerate(self._topics)}

    def __iter__(self) -> Iterator[Topic]:
        return iter(self._topics)

    def __len__(self) -> int:
        return len(self._topics)

    def __getitem__(self, index: int) -> Topic:
        return self._topics[index]

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog({len(self._topics)} topics)"

    @property
    def topics(self) -> tuple[Topic, ...]:
        return self._topics

    def get(self, topic_id: str) -> Topic:
        """Look up a topic by id. Raises KeyError if unknown."""
        try:
            return self._by_id[topic_id]
        except KeyError:
            raise KeyError(f"Topic not found: {topic_id}") from None

    def index_of(self, topic_id: str) -> int:
        """Position of a topic in catalog order. Raises KeyError if unknown."""
        try:
            return self._index[topic_id]
        except KeyError:
            raise KeyError(f"Topic not found: {topic_id}") from None

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(t.category for t in self._topics))
