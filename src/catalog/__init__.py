"""
Catalog: the static topic dataset.

Components:
- models: Topic, Section, Category and the read-only Catalog
- validator: load-time invariant checks (InvalidCatalog)
- loader: JSON loading, including the bundled catalog
"""

from .loader import BUNDLED_CATALOG, CatalogLoader, load_catalog
from .models import Catalog, Category, Section, Topic
from .validator import InvalidCatalog, validate_catalog

__all__ = [
    "BUNDLED_CATALOG",
    "Catalog",
    "CatalogLoader",
    "Category",
    "InvalidCatalog",
    "Section",
    "Topic",
    "load_catalog",
    "validate_catalog",
]
