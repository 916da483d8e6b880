"""mapsearch exception hierarchy.

This module defines the library-owned error types. Exceptions raised by
caller predicates are never wrapped in these and propagate unchanged.
"""

from __future__ import annotations


class MapSearchError(Exception):
    """Base exception for all mapsearch failures."""


class MapSearchConfigError(MapSearchError):
    """Raised for invalid runtime configuration."""


class MapSearchPredicateError(MapSearchError):
    """Raised for invalid declarative entry filters."""


class MapSearchSourceError(MapSearchError):
    """Raised for mapping file loading and parsing failures."""


class MapSearchAbsentError(MapSearchError, LookupError):
    """Raised when unwrapping a search result that found nothing."""
