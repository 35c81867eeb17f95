"""Collection helpers for pipeline terminal operations.

Each helper drains an element iterator into a fresh container and
returns it only after the whole iterator has been consumed.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any

from core.errors import DuplicateKeyError


def collect_mapping(
    elements: Iterator[Any],
    key_fn: Callable[[Any], Hashable],
    value_fn: Callable[[Any], Any],
    merge: Callable[[Any, Any], Any] | None = None,
) -> dict[Hashable, Any]:
    """Collect elements into a dict keyed by ``key_fn``.

    Args:
        elements: Evaluated pipeline elements.
        key_fn: Key extractor.
        value_fn: Value extractor.
        merge: Optional combiner for colliding values, called as
            ``merge(existing, new)``.

    Returns:
        Mapping in first-seen key order.

    Raises:
        DuplicateKeyError: If two elements share a key and no merge is given.
    """
    mapping: dict[Hashable, Any] = {}
    for element in elements:
        key = key_fn(element)
        value = value_fn(element)
        if key in mapping:
            if merge is None:
                raise DuplicateKeyError(key, mapping[key], value)
            value = merge(mapping[key], value)
        mapping[key] = value
    return mapping


def collect_groups(
    elements: Iterator[Any],
    key_fn: Callable[[Any], Hashable],
) -> dict[Hashable, list[Any]]:
    """Group elements into lists keyed by ``key_fn``, preserving order."""
    groups: dict[Hashable, list[Any]] = {}
    for element in elements:
        groups.setdefault(key_fn(element), []).append(element)
    return groups


def select_extreme(
    elements: Iterator[Any],
    key: Callable[[Any], Any] | None,
    default: Any,
    prefer: Callable[[Any, Any], bool],
) -> Any:
    """Pick the preferred element, keeping the first one on ties.

    Args:
        elements: Evaluated pipeline elements.
        key: Optional comparison key; elements compare directly when omitted.
        default: Result for an empty iterator.
        prefer: Strict comparison returning True when the candidate key wins.

    Returns:
        Selected element or ``default``.
    """
    best: Any = default
    best_key: Any = None
    found = False
    for element in elements:
        element_key = key(element) if key is not None else element
        if not found or prefer(element_key, best_key):
            best, best_key, found = element, element_key, True
    return best
