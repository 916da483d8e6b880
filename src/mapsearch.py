"""Public SDK surface for mapsearch.

This module provides a stable import path for library users.
It re-exports the search functions, result types, and loaders.
"""

from __future__ import annotations

from core.config import MapSearchConfig
from core.errors import (
    MapSearchAbsentError,
    MapSearchConfigError,
    MapSearchError,
    MapSearchPredicateError,
    MapSearchSourceError,
)
from core.logging_config import configure_logging
from core.types import ABSENT, EntryFilter, SearchResult
from search.entry_filter import build_entry_predicate
from search.predicate_search import all_match, any_match, find_entry, find_key, find_value
from sources.mapping_file import load_mapping

__all__ = [
    "ABSENT",
    "EntryFilter",
    "MapSearchAbsentError",
    "MapSearchConfig",
    "MapSearchConfigError",
    "MapSearchError",
    "MapSearchPredicateError",
    "MapSearchSourceError",
    "SearchResult",
    "all_match",
    "any_match",
    "build_entry_predicate",
    "configure_logging",
    "find_entry",
    "find_key",
    "find_value",
    "load_mapping",
]
