"""First-match searches over ordered mappings.

Every function walks the entries in insertion order, calls the predicate
with (value, key), and returns on the first decisive result. Exceptions
raised by the predicate propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from core.types import ABSENT, Predicate, SearchResult
from search.entries import bind_predicate, iter_entries

K = TypeVar("K")
V = TypeVar("V")


def find_value(mapping: Mapping[K, V], predicate: Predicate) -> SearchResult[V]:
    """Find the first value whose entry satisfies the predicate.

    Args:
        mapping: Ordered mapping (or list) to search.
        predicate: Callable taking (value, key) or only value.

    Returns:
        Result holding the first matching value, or ``ABSENT``.

    Example:
        >>> animals = {"a": "dog", "b": "cat", "e": "goose"}
        >>> find_value(animals, lambda value: len(value) > 4).value
        'goose'
    """
    test = bind_predicate(predicate)
    for key, value in iter_entries(mapping):
        if test(value, key):
            return SearchResult(found=True, value=value)
    return ABSENT


def find_key(mapping: Mapping[K, V], predicate: Predicate) -> SearchResult[K]:
    """Find the key of the first entry that satisfies the predicate.

    Args:
        mapping: Ordered mapping (or list) to search.
        predicate: Callable taking (value, key) or only value.

    Returns:
        Result holding the first matching key, or ``ABSENT``.
    """
    test = bind_predicate(predicate)
    for key, value in iter_entries(mapping):
        if test(value, key):
            return SearchResult(found=True, value=key)
    return ABSENT


def find_entry(mapping: Mapping[K, V], predicate: Predicate) -> SearchResult[tuple[K, V]]:
    """Find the first (key, value) entry that satisfies the predicate."""
    test = bind_predicate(predicate)
    for key, value in iter_entries(mapping):
        if test(value, key):
            return SearchResult(found=True, value=(key, value))
    return ABSENT


def any_match(mapping: Mapping[Any, Any], predicate: Predicate) -> bool:
    """Return True once any entry satisfies the predicate.

    An empty mapping yields False without calling the predicate.
    """
    test = bind_predicate(predicate)
    for key, value in iter_entries(mapping):
        if test(value, key):
            return True
    return False


def all_match(mapping: Mapping[Any, Any], predicate: Predicate) -> bool:
    """Return False once any entry fails the predicate.

    An empty mapping is vacuously True and never calls the predicate.
    """
    test = bind_predicate(predicate)
    for key, value in iter_entries(mapping):
        if not test(value, key):
            return False
    return True
