"""Entry traversal and predicate binding helpers.

This module turns mappings and list-shaped collections into ordered
(key, value) pairs and adapts value-only predicates to the (value, key)
calling convention used by every search function.
"""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from typing import Any, Callable, Iterable

from core.types import Predicate

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def iter_entries(collection: Any) -> Iterable[tuple[Any, Any]]:
    """Return ordered (key, value) pairs for a collection.

    Non-string sequences are keyed by position. Anything else is treated
    as a mapping and traversed with ``items()`` in insertion order.

    Args:
        collection: Mapping or list-shaped collection to traverse.

    Returns:
        Iterable of (key, value) pairs.
    """
    if isinstance(collection, Sequence) and not isinstance(collection, (str, bytes, bytearray)):
        return enumerate(collection)
    return collection.items()


def bind_predicate(predicate: Predicate) -> Callable[[Any, Any], object]:
    """Adapt a predicate to the (value, key) calling convention.

    Args:
        predicate: Callable taking (value, key) or only value.

    Returns:
        Callable that always accepts (value, key).
    """
    if accepts_key(predicate):
        return predicate
    return lambda value, key: predicate(value)


def accepts_key(predicate: Predicate) -> bool:
    """Report whether a predicate takes a second positional argument.

    Callables without an inspectable signature are assumed value-only.
    """
    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError):
        return False
    positional_count = 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in _POSITIONAL_KINDS:
            positional_count += 1
    return positional_count >= 2
