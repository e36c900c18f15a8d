"""
Shared scoring and sorting utilities.

Ranking outcomes rely on stable ordering: items that compare equal on
every sort key keep their input (catalog) order. Python's sort is stable
even with reverse=True, which is what these helpers build on.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def stable_sort_desc(items: Iterable[T], *keys: Callable[[T], float]) -> list[T]:
    """
    Sort descending by the first key, then by each following key.

    Items equal on all keys keep their original relative order.

    Args:
        items: Items to sort
        *keys: Key functions, primary first

    Returns:
        New sorted list
    """
    if not keys:
        return list(items)
    return sorted(items, key=lambda item: tuple(k(item) for k in keys), reverse=True)


def unique_in_order(values: Iterable[H]) -> list[H]:
    """Deduplicate, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))


def top_n(items: Sequence[T], n: int) -> list[T]:
    """First n items (all of them if fewer, none if n is negative)."""
    if n <= 0:
        return []
    return list(items[:n])
