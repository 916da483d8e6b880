"""Shared typed models.

This module defines the immutable result and filter models used by the
search, source, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, TypeVar

from core.errors import MapSearchAbsentError

T = TypeVar("T")

Predicate = Callable[..., object]
SearchCommand = Literal["find", "find-key", "find-entry", "any", "all"]


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """Outcome of a first-match search.

    A stored ``None`` is reported as ``found=True, value=None``, so callers
    test ``found`` (or truthiness) instead of comparing the value to None.

    Attributes:
        found: Whether any entry satisfied the predicate.
        value: Matched value, key, or entry; None when nothing matched.
    """

    found: bool
    value: T | None = None

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> T:
        """Return the matched payload.

        Returns:
            The matched value, key, or entry.

        Raises:
            MapSearchAbsentError: If the search found nothing.
        """
        if not self.found:
            raise MapSearchAbsentError(
                "Search result is absent: no entry satisfied the predicate. "
                "Check 'found' or use value_or() before reading the value."
            )
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Return the matched payload, or ``default`` when absent."""
        if self.found:
            return self.value  # type: ignore[return-value]
        return default


ABSENT: SearchResult[Any] = SearchResult(found=False)


@dataclass(frozen=True)
class EntryFilter:
    """Declarative constraints combined into one entry predicate.

    Attributes:
        longer_than: Optional exclusive lower bound on value length.
        shorter_than: Optional exclusive upper bound on value length.
        value_prefix: Optional prefix the stringified value must start with.
        value_pattern: Optional regex searched in the stringified value.
        key_pattern: Optional regex the stringified key must fully match.
        key_is_value_initial: Require the key to equal the value's first character.
    """

    longer_than: int | None = None
    shorter_than: int | None = None
    value_prefix: str | None = None
    value_pattern: str | None = None
    key_pattern: str | None = None
    key_is_value_initial: bool = False
