"""Pipeline stage descriptors and single-pass evaluation.

Each intermediate operation is recorded as an immutable ``Stage``.
Evaluation chains one iterator per stage over the source, so no
stage except ``sorted`` buffers elements.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from core.errors import PipelineArgumentError


class StageKind(str, Enum):
    """Intermediate operation tags."""

    FILTER = "filter"
    MAP = "map"
    FLAT_MAP = "flat_map"
    PEEK = "peek"
    DISTINCT = "distinct"
    SORTED = "sorted"
    LIMIT = "limit"
    SKIP = "skip"


@dataclass(frozen=True)
class Stage:
    """Queued intermediate operation.

    Attributes:
        kind: Operation tag.
        fn: Predicate, mapper, action or sort key, depending on kind.
        count: Element count for limit and skip stages.
        reverse: Descending order flag for sorted stages.
    """

    kind: StageKind
    fn: Callable[[Any], Any] | None = None
    count: int = 0
    reverse: bool = False


def function_stage(kind: StageKind, fn: Callable[[Any], Any]) -> Stage:
    """Build a stage that requires a callable argument.

    Raises:
        PipelineArgumentError: If ``fn`` is not callable.
    """
    require_callable(fn, kind.value)
    return Stage(kind=kind, fn=fn)


def count_stage(kind: StageKind, count: int) -> Stage:
    """Build a limit or skip stage.

    Raises:
        PipelineArgumentError: If ``count`` is not a non-negative integer.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise PipelineArgumentError(
            f"{kind.value} expects a non-negative integer, got {count!r}."
        )
    return Stage(kind=kind, count=count)


def sorted_stage(key: Callable[[Any], Any] | None, reverse: bool) -> Stage:
    """Build a sorted stage with an optional key function."""
    if key is not None:
        require_callable(key, "sorted key")
    return Stage(kind=StageKind.SORTED, fn=key, reverse=reverse)


def require_callable(value: object, role: str) -> None:
    """Reject non-callable stage or terminal arguments.

    Args:
        value: Candidate callable.
        role: Operation name used in the error message.

    Raises:
        PipelineArgumentError: If ``value`` is not callable.
    """
    if not callable(value):
        raise PipelineArgumentError(
            f"{role} expects a callable, got {type(value).__name__}."
        )


def apply_stages(source: Iterable[Any], stages: tuple[Stage, ...]) -> Iterator[Any]:
    """Chain stage iterators over the source in declaration order.

    Args:
        source: Finite ordered source iterable.
        stages: Queued stages, leftmost first.

    Returns:
        Lazy iterator over surviving, transformed elements.
    """
    elements: Iterator[Any] = iter(source)
    for stage in stages:
        elements = _APPLIERS[stage.kind](elements, stage)
    return elements


def _apply_filter(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    return filter(stage.fn, elements)


def _apply_map(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    return map(stage.fn, elements)


def _apply_flat_map(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    return itertools.chain.from_iterable(map(stage.fn, elements))


def _apply_peek(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    for element in elements:
        stage.fn(element)
        yield element


def _apply_distinct(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    seen: set[Any] = set()
    for element in elements:
        if element in seen:
            continue
        seen.add(element)
        yield element


def _apply_sorted(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    # Generator body defers buffering until the first element is pulled.
    yield from sorted(elements, key=stage.fn, reverse=stage.reverse)


def _apply_limit(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    return itertools.islice(elements, stage.count)


def _apply_skip(elements: Iterator[Any], stage: Stage) -> Iterator[Any]:
    return itertools.islice(elements, stage.count, None)


_APPLIERS: dict[StageKind, Callable[[Iterator[Any], Stage], Iterator[Any]]] = {
    StageKind.FILTER: _apply_filter,
    StageKind.MAP: _apply_map,
    StageKind.FLAT_MAP: _apply_flat_map,
    StageKind.PEEK: _apply_peek,
    StageKind.DISTINCT: _apply_distinct,
    StageKind.SORTED: _apply_sorted,
    StageKind.LIMIT: _apply_limit,
    StageKind.SKIP: _apply_skip,
}
