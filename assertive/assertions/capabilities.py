"""
Runtime capability checks used by the assertion chain.

Range and collection assertions work on values of any type, so before
using a value they check whether it can be ordered or iterated.
"""

from __future__ import annotations

from types import UnionType
from typing import Any, Union, get_args, get_origin


def type_name(tp: Any) -> str:
    """Short, unqualified name of a type (``str``, ``int``, ``list``)."""
    return getattr(tp, "__name__", None) or repr(tp)


def runtime_type_name(value: Any) -> str:
    """Short type name of a value, or ``"null"`` for None."""
    if value is None:
        return "null"
    return type(value).__name__


def resolve_type(expected_type: Any) -> Any:
    """
    Turn a type annotation into something ``isinstance`` accepts.

    Parameterized generics (``dict[str, int]``) resolve to their origin
    class and unions to a tuple of their members.
    """
    origin = get_origin(expected_type)
    if origin is Union or origin is UnionType:
        return tuple(resolve_type(arg) for arg in get_args(expected_type))
    if origin is not None:
        return origin
    return expected_type


def is_type_like(expected_type: Any) -> bool:
    """Whether ``expected_type`` can be used for an isinstance check."""
    try:
        isinstance(None, resolve_type(expected_type))
    except TypeError:
        return False
    return True


def matches_type(value: Any, expected_type: Any) -> bool:
    """isinstance check that also understands generics and unions."""
    return isinstance(value, resolve_type(expected_type))


def within_bounds(value: Any, lower: Any, upper: Any) -> bool | None:
    """
    Check ``lower <= value <= upper``.

    Returns:
        True or False for orderable values, None when the value cannot be
        compared against the bounds at all. Unordered outcomes (NaN) are
        reported as False.
    """
    try:
        return bool(value >= lower and value <= upper)
    except TypeError:
        return None


def enumerate_items(value: Any, item_type: Any = None) -> list[Any] | None:
    """
    Traverse ``value`` once and collect its elements.

    Returns:
        The elements in iteration order, or None when the value is None,
        not iterable, or holds an element that is not an ``item_type``.
    """
    if value is None:
        return None

    try:
        iterator = iter(value)
    except TypeError:
        return None

    items = list(iterator)

    if item_type is not None:
        resolved = resolve_type(item_type)
        if not all(isinstance(item, resolved) for item in items):
            return None

    return items
