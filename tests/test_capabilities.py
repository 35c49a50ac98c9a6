"""Tests for the ordering/iteration capability checks."""

from collections.abc import Mapping

import pytest

from assertive.assertions.capabilities import (
    enumerate_items,
    is_type_like,
    matches_type,
    resolve_type,
    runtime_type_name,
    type_name,
    within_bounds,
)


# --- type names ---


def test_type_name_is_short():
    assert type_name(str) == "str"
    assert type_name(int) == "int"
    assert type_name(Mapping) == "Mapping"


def test_runtime_type_name():
    assert runtime_type_name("x") == "str"
    assert runtime_type_name(1.5) == "float"
    assert runtime_type_name(None) == "null"


# --- type resolution ---


def test_resolve_type_unwraps_generics():
    assert resolve_type(list[int]) is list
    assert resolve_type(dict[str, int]) is dict
    assert resolve_type(int) is int


def test_resolve_type_expands_unions():
    assert resolve_type(int | None) == (int, type(None))


def test_is_type_like():
    assert is_type_like(int)
    assert is_type_like(Mapping)
    assert is_type_like((int, str))
    assert not is_type_like("int")
    assert not is_type_like(42)


def test_matches_type():
    assert matches_type(True, int)
    assert matches_type({}, Mapping)
    assert not matches_type(None, str)


# --- ordering ---


@pytest.mark.parametrize(
    "value, expected",
    [(5, True), (1, True), (10, True), (0, False), (11, False)],
)
def test_within_bounds(value, expected):
    assert within_bounds(value, 1, 10) is expected


def test_within_bounds_unorderable_returns_none():
    assert within_bounds("five", 1, 10) is None
    assert within_bounds(object(), 1, 10) is None


def test_within_bounds_nan_is_outside():
    assert within_bounds(float("nan"), 0.0, 1.0) is False


# --- iteration ---


def test_enumerate_items_collects_elements():
    assert enumerate_items([3, 1, 2]) == [3, 1, 2]
    assert enumerate_items("ab") == ["a", "b"]
    assert enumerate_items({"k": 1}) == ["k"]


def test_enumerate_items_rejects_non_iterables():
    assert enumerate_items(None) is None
    assert enumerate_items(42) is None


def test_enumerate_items_checks_item_type():
    assert enumerate_items([1, 2], int) == [1, 2]
    assert enumerate_items([1, "a"], int) is None
    assert enumerate_items([], str) == []


def test_enumerate_items_does_not_modify_value():
    items = [1, 2, 3]
    result = enumerate_items(items)
    result.append(4)
    assert items == [1, 2, 3]
