"""Declarative entry filtering helpers.

This module compiles EntryFilter constraints into a (value, key)
predicate so callers without Python callables can still search.
"""

from __future__ import annotations

import re
from collections.abc import Sized
from typing import Any, Callable

from core.errors import MapSearchPredicateError
from core.types import EntryFilter


def build_entry_predicate(entry_filter: EntryFilter) -> Callable[[Any, Any], bool]:
    """Compile filter constraints into one predicate.

    Args:
        entry_filter: Filter constraints, combined with AND.

    Returns:
        Predicate taking (value, key).

    Raises:
        MapSearchPredicateError: If a bound is negative or a pattern is invalid.
    """
    _validate_length_bound(entry_filter.longer_than, "longer_than")
    _validate_length_bound(entry_filter.shorter_than, "shorter_than")
    value_regex = _compile_pattern(entry_filter.value_pattern, "value_pattern")
    key_regex = _compile_pattern(entry_filter.key_pattern, "key_pattern")

    def matches(value: Any, key: Any) -> bool:
        if entry_filter.longer_than is not None:
            length = _value_length(value)
            if length is None or length <= entry_filter.longer_than:
                return False
        if entry_filter.shorter_than is not None:
            length = _value_length(value)
            if length is None or length >= entry_filter.shorter_than:
                return False
        if entry_filter.value_prefix is not None:
            if not str(value).startswith(entry_filter.value_prefix):
                return False
        if value_regex is not None and value_regex.search(str(value)) is None:
            return False
        if key_regex is not None and key_regex.fullmatch(str(key)) is None:
            return False
        if entry_filter.key_is_value_initial:
            if str(value)[:1] != str(key):
                return False
        return True

    return matches


def _value_length(value: Any) -> int | None:
    """Return the length of a sized value.

    Args:
        value: Entry value under test.

    Returns:
        Length, or None when the value has no length.
    """
    if isinstance(value, Sized):
        return len(value)
    return None


def _validate_length_bound(bound: int | None, field_name: str) -> None:
    """Check that a length bound is a non-negative integer.

    Args:
        bound: Optional bound from the filter.
        field_name: Filter field name, used in error messages.

    Raises:
        MapSearchPredicateError: If the bound is not an integer or is negative.
    """
    if bound is None:
        return
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise MapSearchPredicateError(
            f"Filter field '{field_name}' must be an integer, got {type(bound).__name__}."
        )
    if bound < 0:
        raise MapSearchPredicateError(
            f"Filter field '{field_name}' must be non-negative, got {bound}."
        )


def _compile_pattern(pattern: str | None, field_name: str) -> re.Pattern[str] | None:
    """Compile an optional regex filter field.

    Args:
        pattern: Optional regular expression text.
        field_name: Filter field name, used in error messages.

    Returns:
        Compiled pattern, or None when the field is unset.

    Raises:
        MapSearchPredicateError: If the pattern does not compile.
    """
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as error:
        raise MapSearchPredicateError(
            f"Filter field '{field_name}' is not a valid regular expression: {error}. "
            "Fix the pattern and retry."
        ) from error
