"""Unit tests for terminal collection helpers."""

from __future__ import annotations

import operator

import pytest

from core.errors import DuplicateKeyError
from stream.collectors import collect_groups, collect_mapping, select_extreme


def test_collect_mapping_error_names_key_and_fix() -> None:
    """Duplicate key errors should name the key and suggest merge."""
    with pytest.raises(DuplicateKeyError, match="Duplicate key 'x'.*merge="):
        collect_mapping(iter(["x", "x"]), str, len)


def test_collect_mapping_merge_sees_existing_then_new() -> None:
    """Merge should receive the stored value first."""
    merged = collect_mapping(
        iter([("k", "first"), ("k", "second")]),
        operator.itemgetter(0),
        operator.itemgetter(1),
        merge=lambda existing, new: f"{existing}+{new}",
    )

    assert merged == {"k": "first+second"}


def test_collect_groups_on_empty_iterator() -> None:
    """Grouping nothing should return an empty mapping."""
    assert collect_groups(iter([]), str) == {}


def test_select_extreme_returns_default_when_empty() -> None:
    """Empty input should produce the caller default."""
    assert select_extreme(iter([]), None, "none", operator.lt) == "none"


def test_select_extreme_handles_none_elements() -> None:
    """A None element should still be selectable when it is the only one."""
    assert select_extreme(iter([None]), lambda _: 0, "default", operator.lt) is None
