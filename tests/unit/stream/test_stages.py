"""Unit tests for pipeline stage descriptors."""

from __future__ import annotations

import pytest

from core.errors import PipelineArgumentError
from stream.stages import Stage, StageKind, apply_stages, count_stage, function_stage


def test_apply_stages_without_stages_yields_source() -> None:
    """An empty stage tuple should pass source elements through."""
    assert list(apply_stages([1, 2], ())) == [1, 2]


def test_apply_stages_runs_in_declaration_order() -> None:
    """Stages should apply leftmost first."""
    stages = (
        function_stage(StageKind.MAP, lambda number: number * 2),
        function_stage(StageKind.FILTER, lambda number: number > 2),
        count_stage(StageKind.SKIP, 1),
    )

    assert list(apply_stages([1, 2, 3], stages)) == [6]


def test_sorted_stage_defers_buffering_until_pulled() -> None:
    """The sorted stage should not read upstream until iterated."""
    pulled: list[int] = []

    def numbers():
        for number in (3, 1, 2):
            pulled.append(number)
            yield number

    elements = apply_stages(numbers(), (Stage(kind=StageKind.SORTED),))
    assert pulled == []

    assert list(elements) == [1, 2, 3]


@pytest.mark.parametrize("count", [-1, 1.5, True, "3"])
def test_count_stage_rejects_invalid_counts(count: object) -> None:
    """Limit and skip counts must be non-negative integers."""
    with pytest.raises(PipelineArgumentError):
        count_stage(StageKind.LIMIT, count)  # type: ignore[arg-type]


def test_function_stage_rejects_non_callable() -> None:
    """Function stages should require a callable."""
    with pytest.raises(PipelineArgumentError, match="filter expects a callable"):
        function_stage(StageKind.FILTER, None)  # type: ignore[arg-type]
