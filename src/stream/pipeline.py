"""Lazy, single-use sequence pipeline.

A ``Pipeline`` is an immutable description of a source iterable plus
queued stages. Intermediate operations return new pipelines without
touching elements; a terminal operation evaluates every stage in one
pass and marks that pipeline and every upstream stage as consumed, so
sibling branches of an evaluated stage fail fast.
"""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from core.errors import PipelineArgumentError, PipelineConsumedError
from core.logging_config import get_logger
from stream.collectors import collect_groups, collect_mapping, select_extreme
from stream.stages import (
    Stage,
    StageKind,
    apply_stages,
    count_stage,
    function_stage,
    require_callable,
    sorted_stage,
)

_LOGGER = get_logger(__name__)
_MISSING = object()

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Pipeline(Generic[T]):
    """Lazy pipeline over a finite ordered source."""

    def __init__(
        self,
        source: Iterable[T],
        stages: tuple[Stage, ...] = (),
        parent: "Pipeline[Any] | None" = None,
    ) -> None:
        if not _is_iterable(source):
            raise PipelineArgumentError(
                f"Pipeline source must be iterable, got {type(source).__name__}."
            )
        self._source = source
        self._stages = stages
        self._parent = parent
        self._consumed = False

    @classmethod
    def of(cls, source: Iterable[T]) -> "Pipeline[T]":
        """Create a pipeline over ``source`` without reading it."""
        return cls(source)

    @classmethod
    def of_values(cls, *values: T) -> "Pipeline[T]":
        """Create a pipeline over positional values."""
        return cls(values)

    @classmethod
    def empty(cls) -> "Pipeline[Any]":
        """Create a pipeline with no elements."""
        return cls(())

    @property
    def consumed(self) -> bool:
        """Whether this pipeline or an upstream stage was already evaluated."""
        return any(pipeline._consumed for pipeline in self._lineage())

    @property
    def stage_kinds(self) -> tuple[str, ...]:
        """Queued stage tags, leftmost first."""
        return tuple(stage.kind.value for stage in self._stages)

    def __repr__(self) -> str:
        stages = ", ".join(self.stage_kinds)
        return f"Pipeline(stages=[{stages}], consumed={self.consumed})"

    # Intermediate operations.

    def filter(self, predicate: Callable[[T], bool]) -> "Pipeline[T]":
        """Keep elements for which ``predicate`` holds."""
        return self._chain(function_stage(StageKind.FILTER, predicate))

    def map(self, fn: Callable[[T], U]) -> "Pipeline[U]":
        """Transform each element with ``fn``."""
        return self._chain(function_stage(StageKind.MAP, fn))

    def flat_map(self, fn: Callable[[T], Iterable[U]]) -> "Pipeline[U]":
        """Replace each element with the items of ``fn(element)``."""
        return self._chain(function_stage(StageKind.FLAT_MAP, fn))

    def peek(self, action: Callable[[T], Any]) -> "Pipeline[T]":
        """Invoke ``action`` on each element as it flows through."""
        return self._chain(function_stage(StageKind.PEEK, action))

    def distinct(self) -> "Pipeline[T]":
        """Drop repeated elements, keeping first occurrences."""
        return self._chain(Stage(kind=StageKind.DISTINCT))

    def sorted(
        self,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> "Pipeline[T]":
        """Stable sort of all upstream elements."""
        return self._chain(sorted_stage(key, reverse))

    def limit(self, count: int) -> "Pipeline[T]":
        """Keep at most the first ``count`` elements."""
        return self._chain(count_stage(StageKind.LIMIT, count))

    def skip(self, count: int) -> "Pipeline[T]":
        """Drop the first ``count`` elements."""
        return self._chain(count_stage(StageKind.SKIP, count))

    # Terminal operations.

    def __iter__(self) -> Iterator[T]:
        return self._evaluate("iter")

    def collect_to_list(self) -> list[T]:
        """Materialize surviving elements in order."""
        return list(self._evaluate("collect_to_list"))

    def collect_to_set(self) -> set[T]:
        """Materialize surviving elements without duplicates."""
        return set(self._evaluate("collect_to_set"))

    def collect_to_map(
        self,
        key_fn: Callable[[T], K],
        value_fn: Callable[[T], V],
        merge: Callable[[V, V], V] | None = None,
    ) -> dict[K, V]:
        """Collect elements into a dict.

        Args:
            key_fn: Key extractor.
            value_fn: Value extractor.
            merge: Optional combiner for values sharing a key.

        Returns:
            Mapping in first-seen key order.

        Raises:
            DuplicateKeyError: If keys collide and no merge is given.
        """
        require_callable(key_fn, "collect_to_map key_fn")
        require_callable(value_fn, "collect_to_map value_fn")
        if merge is not None:
            require_callable(merge, "collect_to_map merge")
        return collect_mapping(self._evaluate("collect_to_map"), key_fn, value_fn, merge)

    def group_by(self, key_fn: Callable[[T], K]) -> dict[K, list[T]]:
        """Group elements into ordered lists keyed by ``key_fn``."""
        require_callable(key_fn, "group_by key_fn")
        return collect_groups(self._evaluate("group_by"), key_fn)

    def joining(self, separator: str = "", prefix: str = "", suffix: str = "") -> str:
        """Concatenate string elements."""
        return prefix + separator.join(self._evaluate("joining")) + suffix

    def to_array(self) -> tuple[T, ...]:
        """Materialize surviving elements as a fixed-size tuple."""
        return tuple(self._evaluate("to_array"))

    def count(self) -> int:
        """Count surviving elements without materializing them."""
        return sum(1 for _ in self._evaluate("count"))

    def for_each(self, action: Callable[[T], Any]) -> None:
        """Invoke ``action`` once per surviving element, in order."""
        require_callable(action, "for_each")
        for element in self._evaluate("for_each"):
            action(element)

    def reduce(self, combine: Callable[[T, T], T], initial: Any = _MISSING) -> T | None:
        """Left-fold surviving elements.

        Args:
            combine: Binary combiner applied left to right.
            initial: Optional seed. When omitted the first element seeds
                the fold and an empty pipeline yields ``None``.

        Returns:
            Folded value, or ``None`` for an unseeded empty pipeline.
        """
        require_callable(combine, "reduce")
        elements = self._evaluate("reduce")
        if initial is not _MISSING:
            return functools.reduce(combine, elements, initial)
        first = next(elements, _MISSING)
        if first is _MISSING:
            return None
        return functools.reduce(combine, elements, first)

    def sum(self, start: Any = 0) -> Any:
        """Add surviving numeric elements to ``start``."""
        return sum(self._evaluate("sum"), start)

    def average(self) -> float | None:
        """Arithmetic mean of numeric elements, ``None`` when empty."""
        total = 0
        count = 0
        for element in self._evaluate("average"):
            total += element
            count += 1
        if count == 0:
            return None
        return total / count

    def any_match(self, predicate: Callable[[T], bool]) -> bool:
        """True if any element satisfies ``predicate``; stops at the first."""
        require_callable(predicate, "any_match")
        return any(predicate(element) for element in self._evaluate("any_match"))

    def all_match(self, predicate: Callable[[T], bool]) -> bool:
        """True if every element satisfies ``predicate``; True when empty."""
        require_callable(predicate, "all_match")
        return all(predicate(element) for element in self._evaluate("all_match"))

    def none_match(self, predicate: Callable[[T], bool]) -> bool:
        """True if no element satisfies ``predicate``; True when empty."""
        require_callable(predicate, "none_match")
        return not any(predicate(element) for element in self._evaluate("none_match"))

    def find_first(self, default: Any = None) -> T | None:
        """First surviving element, or ``default`` when empty."""
        return next(self._evaluate("find_first"), default)

    def min(self, key: Callable[[T], Any] | None = None, default: Any = None) -> T | None:
        """Smallest element; the first one wins ties."""
        if key is not None:
            require_callable(key, "min key")
        return select_extreme(self._evaluate("min"), key, default, operator.lt)

    def max(self, key: Callable[[T], Any] | None = None, default: Any = None) -> T | None:
        """Largest element; the first one wins ties."""
        if key is not None:
            require_callable(key, "max key")
        return select_extreme(self._evaluate("max"), key, default, operator.gt)

    def _chain(self, stage: Stage) -> "Pipeline[Any]":
        self._ensure_unconsumed(stage.kind.value)
        return Pipeline(self._source, self._stages + (stage,), parent=self)

    def _evaluate(self, terminal: str) -> Iterator[Any]:
        self._ensure_unconsumed(terminal)
        for pipeline in self._lineage():
            pipeline._consumed = True
        _LOGGER.debug(
            "pipeline_evaluated",
            terminal=terminal,
            stages=list(self.stage_kinds),
        )
        return apply_stages(self._source, self._stages)

    def _lineage(self) -> Iterator["Pipeline[Any]"]:
        pipeline: Pipeline[Any] | None = self
        while pipeline is not None:
            yield pipeline
            pipeline = pipeline._parent

    def _ensure_unconsumed(self, operation: str) -> None:
        if self._consumed:
            raise PipelineConsumedError(
                f"Cannot run '{operation}': pipeline was already evaluated. "
                "Build a new pipeline from the source instead."
            )
        if self.consumed:
            raise PipelineConsumedError(
                f"Cannot run '{operation}': an upstream stage was already evaluated "
                "through another pipeline. Build a new pipeline from the source instead."
            )


def _is_iterable(source: object) -> bool:
    """Accept iterables and sequences that only define ``__getitem__``."""
    return isinstance(source, Iterable) or hasattr(type(source), "__getitem__")


def from_iterable(source: Iterable[T]) -> Pipeline[T]:
    """Create a pipeline over ``source``.

    Args:
        source: Finite ordered iterable; it is not read until a terminal
            operation runs.

    Returns:
        Unevaluated pipeline with no stages.
    """
    return Pipeline.of(source)
