"""
Catalog Validator - Fail fast if the topic catalog is malformed.

Philosophy:
- The app should NOT start on a broken catalog
- No silent fallbacks - explicit failures only
- Validation runs once at load time; ranking and progress code never re-checks
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from src.catalog.models import Category, Topic


class InvalidCatalog(Exception):
    """Raised when the topic catalog violates its invariants."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        summary = "; ".join(problems[:3])
        if len(problems) > 3:
            summary += f" (+{len(problems) - 3} more)"
        super().__init__(f"Invalid catalog: {summary}")


def check_topic(topic: Topic) -> list[str]:
    """Return the problems found in a single topic."""
    problems = []
    label = topic.id if isinstance(topic.id, str) and topic.id else "<missing id>"

    if not isinstance(topic.id, str):
        problems.append(f"topic id must be a string, got {topic.id!r}")
    elif not topic.id:
        problems.append("topic with empty id")
    if not isinstance(topic.title, str):
        problems.append(f"{label}: title must be a string")
    elif not topic.title:
        problems.append(f"{label}: empty title")
    if not topic.sections:
        problems.append(f"{label}: topic has no sections")
    if not isinstance(topic.category, str) or topic.category not in Category.labels():
        problems.append(f"{label}: unknown category '{topic.category}'")
    view_count = topic.view_count
    if isinstance(view_count, bool) or not isinstance(view_count, int) or view_count < 0:
        problems.append(f"{label}: view_count must be a non-negative integer")

    return problems


def validate_catalog(topics: Iterable[Topic]) -> None:
    """
    Validate a full catalog.

    Collects every problem before raising so a broken data file can be
    fixed in one pass.

    Raises:
        InvalidCatalog: If the catalog is empty, contains a duplicate id,
            or any topic fails check_topic().
    """
    topics = list(topics)
    problems: list[str] = []

    if not topics:
        problems.append("catalog is empty")

    seen: set[str] = set()
    for topic in topics:
        problems.extend(check_topic(topic))
        if not isinstance(topic.id, str):
            continue
        if topic.id in seen:
            problems.append(f"{topic.id}: duplicate id")
        seen.add(topic.id)

    if problems:
        for problem in problems:
            logger.error(f"Catalog problem: {problem}")
        raise InvalidCatalog(problems)

    logger.debug(f"Catalog validated: {len(topics)} topics")
