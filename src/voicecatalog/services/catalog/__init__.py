"""Catalog loading and queries."""

from voicecatalog.services.catalog.fetcher import CatalogFetcher
from voicecatalog.services.catalog.index import (
    CatalogIndex,
    find_voice_by_name,
    list_languages,
    list_voices,
)

__all__ = [
    "CatalogFetcher",
    "CatalogIndex",
    "find_voice_by_name",
    "list_languages",
    "list_voices",
]
