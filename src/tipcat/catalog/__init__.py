"""Tip catalog: entries, the immutable store, and loaders."""

from .loader import load_catalog, load_records, parse_markdown
from .store import CatalogStore, TipEntry

__all__ = [
    "CatalogStore",
    "TipEntry",
    "load_catalog",
    "load_records",
    "parse_markdown",
]
