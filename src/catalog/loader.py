"""
Catalog loader.

Reads the topic catalog from JSON (a list of topics, or an object with a
"topics" list), validates it, and returns an immutable Catalog.
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from src.catalog.models import Catalog, Topic
from src.catalog.validator import InvalidCatalog, validate_catalog

BUNDLED_CATALOG = Path(__file__).parent / "data" / "topics.json"


class CatalogLoader:
    """Load and validate the topic catalog."""

    def __init__(self, path: Path | str | None = None):
        """
        Initialize loader.

        Args:
            path: Catalog JSON file. Defaults to the bundled catalog.
        """
        self.path = Path(path) if path is not None else BUNDLED_CATALOG

    def load(self) -> Catalog:
        """
        Load the catalog from disk.

        Raises:
            FileNotFoundError: If the catalog file does not exist
            InvalidCatalog: If the file is not valid JSON or fails validation
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Catalog not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidCatalog([f"{self.path.name}: malformed JSON ({e})"]) from e

        topics = self.parse(data)
        validate_catalog(topics)

        logger.info(f"Loaded {len(topics)} topics from {self.path}")
        return Catalog(topics)

    @staticmethod
    def parse(data: list | dict) -> list[Topic]:
        """Turn decoded JSON into Topic objects without validating them."""
        if isinstance(data, dict):
            data = data.get("topics", [])
        if not isinstance(data, list):
            raise InvalidCatalog(["catalog must be a list of topics"])

        topics = []
        for i, entry in enumerate(data):
            try:
                topics.append(Topic.from_dict(entry))
            except (KeyError, TypeError, AttributeError) as e:
                raise InvalidCatalog([f"entry {i}: missing or malformed field ({e})"]) from e
        return topics


def load_catalog(path: Path | str | None = None) -> Catalog:
    """Convenience wrapper around CatalogLoader."""
    return CatalogLoader(path).load()
