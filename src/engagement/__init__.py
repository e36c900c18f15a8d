"""
Engagement: per-user interaction state.

Components:
- store: InteractionStore (toggle/mark/add_points) and InteractionSnapshot
- backends: key-value persistence (in-memory, JSON file)
"""

from .backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from .store import InteractionSnapshot, InteractionStore

__all__ = [
    "InteractionSnapshot",
    "InteractionStore",
    "JsonFileBackend",
    "KeyValueBackend",
    "MemoryBackend",
]
