"""
Interaction store: likes, favorites, completions and points.

The store owns all mutable per-user state. Engine code never reads it
directly; it takes a snapshot() and works on that, so one derivation
pass always sees a consistent view.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from src.engagement.backends import KeyValueBackend, MemoryBackend
from src.progress.model import POINTS_PER_COMPLETION

STORAGE_KEY = "user_data"


@dataclass(frozen=True)
class InteractionSnapshot:
    """Immutable view of the store at one point in time."""

    liked_topics: tuple[str, ...] = ()
    favorited_topics: tuple[str, ...] = ()
    completed_topics: tuple[str, ...] = ()
    points: int = 0

    # Membership sets, derived once for O(1) queries
    _liked: frozenset[str] = field(init=False, repr=False, compare=False)
    _favorited: frozenset[str] = field(init=False, repr=False, compare=False)
    _completed: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_liked", frozenset(self.liked_topics))
        object.__setattr__(self, "_favorited", frozenset(self.favorited_topics))
        object.__setattr__(self, "_completed", frozenset(self.completed_topics))

    def is_liked(self, topic_id: str) -> bool:
        return topic_id in self._liked

    def is_favorited(self, topic_id: str) -> bool:
        return topic_id in self._favorited

    def is_completed(self, topic_id: str) -> bool:
        return topic_id in self._completed


def _clean_ids(value) -> list[str]:
    """Keep string ids, dropping duplicates but preserving first position."""
    if not isinstance(value, list):
        return []
    return list(dict.fromkeys(v for v in value if isinstance(v, str)))


class InteractionStore:
    """
    Per-user interaction state with write-through persistence.

    Id lists keep insertion/toggle order: un-liking removes an id and
    liking again appends it at the end.
    """

    def __init__(self, backend: KeyValueBackend | None = None):
        self.backend = backend if backend is not None else MemoryBackend()
        self._liked: list[str] = []
        self._favorited: list[str] = []
        self._completed: list[str] = []
        self._points: int = 0
        self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> None:
        data = self.backend.get(STORAGE_KEY)
        if data is None:
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed user data record")
            return

        self._liked = _clean_ids(data.get("liked"))
        self._favorited = _clean_ids(data.get("favorited"))
        self._completed = _clean_ids(data.get("completed"))

        points = data.get("points", 0)
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            logger.warning(f"Ignoring invalid stored points value: {points!r}")
            points = 0
        self._points = points

        logger.debug(
            f"Loaded user data: {len(self._liked)} liked, {len(self._favorited)} favorited, "
            f"{len(self._completed)} completed, {self._points} points"
        )

    def _save(self) -> None:
        self.backend.set(STORAGE_KEY, self.to_dict())

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "liked": list(self._liked),
            "favorited": list(self._favorited),
            "completed": list(self._completed),
            "points": self._points,
        }

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @staticmethod
    def _toggle(ids: list[str], topic_id: str) -> bool:
        if topic_id in ids:
            ids.remove(topic_id)
            return False
        ids.append(topic_id)
        return True

    def toggle_like(self, topic_id: str) -> bool:
        """Flip the liked flag. Returns the new value."""
        liked = self._toggle(self._liked, topic_id)
        self._save()
        logger.debug(f"{'Liked' if liked else 'Unliked'} topic {topic_id}")
        return liked

    def toggle_favorite(self, topic_id: str) -> bool:
        """Flip the favorited flag. Returns the new value."""
        favorited = self._toggle(self._favorited, topic_id)
        self._save()
        logger.debug(f"{'Favorited' if favorited else 'Unfavorited'} topic {topic_id}")
        return favorited

    def mark_completed(self, topic_id: str) -> bool:
        """
        Mark a topic completed.

        Completion is monotonic. Returns True only if the topic was not
        already completed; points are never implied and must be added
        with add_points().
        """
        if topic_id in self._completed:
            return False
        self._completed.append(topic_id)
        self._save()
        logger.info(f"Completed topic {topic_id}")
        return True

    def add_points(self, amount: int) -> int:
        """
        Add clarity points. Returns the new total.

        Raises:
            ValueError: If amount is not a positive integer
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ValueError(f"Points must be a positive integer, got {amount!r}")
        self._points += amount
        self._save()
        logger.debug(f"+{amount} points (total {self._points})")
        return self._points

    def complete_topic(self, topic_id: str, points: int = POINTS_PER_COMPLETION) -> int:
        """
        Complete a topic, awarding points only the first time.

        Returns the points awarded (0 if it was already completed).
        """
        if not self.mark_completed(topic_id):
            return 0
        self.add_points(points)
        return points

    def reset(self) -> None:
        """Forget all interactions and points."""
        self._liked.clear()
        self._favorited.clear()
        self._completed.clear()
        self._points = 0
        self.backend.delete(STORAGE_KEY)
        logger.info("User data reset")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_liked(self, topic_id: str) -> bool:
        return topic_id in self._liked

    def is_favorited(self, topic_id: str) -> bool:
        return topic_id in self._favorited

    def is_completed(self, topic_id: str) -> bool:
        return topic_id in self._completed

    @property
    def liked_topics(self) -> tuple[str, ...]:
        return tuple(self._liked)

    @property
    def favorited_topics(self) -> tuple[str, ...]:
        return tuple(self._favorited)

    @property
    def completed_topics(self) -> tuple[str, ...]:
        return tuple(self._completed)

    @property
    def points(self) -> int:
        return self._points

    def snapshot(self) -> InteractionSnapshot:
        """Freeze the current state for a derivation pass."""
        return InteractionSnapshot(
            liked_topics=tuple(self._liked),
            favorited_topics=tuple(self._favorited),
            completed_topics=tuple(self._completed),
            points=self._points,
        )
