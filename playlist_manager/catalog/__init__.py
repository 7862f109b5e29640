"""Catalog cache and title search."""

from playlist_manager.catalog.cache import CatalogCache
from playlist_manager.catalog.search import SearchIndex, SearchResult
from playlist_manager.catalog.text_processing import keyword_set, remove_symbols_and_case

__all__ = [
    "CatalogCache",
    "SearchIndex",
    "SearchResult",
    "keyword_set",
    "remove_symbols_and_case",
]
