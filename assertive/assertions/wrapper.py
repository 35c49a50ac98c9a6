"""
Fluent assertion chains.

This module provides the Assertive wrapper and the assert_that entry
point. Every assertion returns the wrapper on success so checks can be
chained, and raises AssertionFailure on the first violation.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, NoReturn, TypeVar

from .capabilities import (
    enumerate_items,
    is_type_like,
    matches_type,
    runtime_type_name,
    type_name,
    within_bounds,
)
from .models import AssertionFailure, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Assertive(Generic[T]):
    """
    Fluent assertion builder for a single value.

    Instances are immutable: assertions return the same wrapper and
    with_context() returns a new one.

    Example:
        assert_that([1, 2, 3]).is_not_null().has_count(3).contains(2)

        assert_that(person).with_context("Person validation").satisfies(
            lambda p: p.age >= 18, "Person should be an adult"
        )
    """

    __slots__ = ("_value", "_context")

    def __init__(self, value: T, context: str | None = None):
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_context", context)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        if self._context:
            return f"Assertive({self._value!r}, context={self._context!r})"
        return f"Assertive({self._value!r})"

    @property
    def value(self) -> T:
        """The value being asserted, unchanged."""
        return self._value

    @property
    def context(self) -> str | None:
        return self._context

    def with_context(self, context: str) -> Assertive[T]:
        """
        Attach a label to every subsequent failure message.

        Args:
            context: Label shown as ``[context]`` in front of messages

        Returns:
            A new Assertive with the same value
        """
        return Assertive(self._value, context)

    # ─────────────────────────────────────────────────────────────────────
    # Nullability and equality
    # ─────────────────────────────────────────────────────────────────────

    def is_not_null(self) -> Assertive[T]:
        """Assert that the value is not None."""
        if self._value is None:
            self._fail("Expected value to not be null.", None, self._value)
        return self

    def is_null(self) -> Assertive[T]:
        """Assert that the value is None."""
        if self._value is not None:
            self._fail(
                f"Expected value to be null, but was '{self._value}'.",
                None,
                self._value,
            )
        return self

    def is_equal_to(self, expected: Any) -> Assertive[T]:
        """
        Assert that the value equals an expected value.

        Args:
            expected: The expected value, compared by identity or ``==``

        Returns:
            This Assertive for chaining

        Raises:
            AssertionFailure: When the values are not equal
        """
        if not _equals(self._value, expected):
            self._fail(
                f"Expected value to be '{expected}', but was '{self._value}'.",
                expected,
                self._value,
            )
        return self

    def is_not_equal_to(self, unexpected: Any) -> Assertive[T]:
        """
        Assert that the value does not equal a given value.

        Args:
            unexpected: The value that should not match

        Returns:
            This Assertive for chaining

        Raises:
            AssertionFailure: When the values are equal
        """
        if _equals(self._value, unexpected):
            self._fail(
                f"Expected value to not be '{unexpected}', but it was.",
                f"Not {unexpected}",
                self._value,
            )
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Types
    # ─────────────────────────────────────────────────────────────────────

    def is_of_type(self, expected_type: Any) -> Assertive[T]:
        """
        Assert that the value is an instance of a type.

        Subclasses and abstract base classes match, and generics such as
        ``dict[str, int]`` are checked against their origin class.

        Args:
            expected_type: The expected type

        Returns:
            This Assertive for chaining

        Raises:
            AssertionFailure: When the value is not of the expected type
            InvalidArgumentError: When expected_type is not a type
        """
        self._require_type("expected_type", expected_type)

        if not matches_type(self._value, expected_type):
            expected_name = type_name(expected_type)
            actual_name = runtime_type_name(self._value)
            self._fail(
                f"Expected type '{expected_name}', but found '{actual_name}'.",
                expected_name,
                actual_name,
            )
        return self

    def is_not_of_type(self, unexpected_type: Any) -> Assertive[T]:
        """
        Assert that the value is not an instance of a type.

        Args:
            unexpected_type: The type that should not match

        Returns:
            This Assertive for chaining

        Raises:
            AssertionFailure: When the value is of the unexpected type
            InvalidArgumentError: When unexpected_type is not a type
        """
        self._require_type("unexpected_type", unexpected_type)

        if matches_type(self._value, unexpected_type):
            unexpected_name = type_name(unexpected_type)
            self._fail(
                f"Did not expect type '{unexpected_name}', but found it.",
                f"Not {unexpected_name}",
                runtime_type_name(self._value),
            )
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Predicates
    # ─────────────────────────────────────────────────────────────────────

    def satisfies(
        self, predicate: Callable[[T], bool], message: str | None = None
    ) -> Assertive[T]:
        """
        Assert that the value satisfies a predicate.

        Args:
            predicate: The condition to check
            message: Custom failure message

        Returns:
            This Assertive for chaining

        Raises:
            AssertionFailure: When the predicate returns a falsy result
            InvalidArgumentError: When predicate is None or not callable
        """
        self._require_predicate(predicate)

        if not predicate(self._value):
            self._fail(
                message or "Value did not satisfy the specified condition.",
                "Satisfied condition",
                self._value,
            )
        return self

    def fails(
        self, predicate: Callable[[T], bool], message: str | None = None
    ) -> Assertive[T]:
        """
        Assert that the value does not satisfy a predicate.

        Args:
            predicate: The condition that should not be met
            message: Custom failure message

        Returns:
            This Assertive for chaining

        Raises:
            AssertionFailure: When the predicate returns a truthy result
            InvalidArgumentError: When predicate is None or not callable
        """
        self._require_predicate(predicate)

        if predicate(self._value):
            self._fail(
                message or "Value unexpectedly satisfied the condition.",
                "Failed condition",
                self._value,
            )
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Ranges
    # ─────────────────────────────────────────────────────────────────────

    def is_in_range(self, min_value: Any, max_value: Any) -> Assertive[T]:
        """
        Assert that the value lies between two bounds, both inclusive.

        None is never in range. A value that cannot be ordered against
        the bounds fails with its own message.

        Args:
            min_value: The minimum value (inclusive)
            max_value: The maximum value (inclusive)

        Returns:
            This Assertive for chaining
        """
        in_range = None if self._value is None else within_bounds(
            self._value, min_value, max_value
        )

        if in_range is None and self._value is not None:
            self._fail(
                f"Value of type {runtime_type_name(self._value)} does not "
                f"implement comparison for {runtime_type_name(min_value)}.",
                None,
                None,
            )

        if not in_range:
            self._fail(
                f"Expected value to be between {min_value} and {max_value} "
                f"(inclusive), but was {self._value}.",
                f"[{min_value}, {max_value}]",
                self._value,
            )
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Collections
    # ─────────────────────────────────────────────────────────────────────

    def contains(self, item: Any, item_type: Any = None) -> Assertive[T]:
        """
        Assert that the collection has an element equal to ``item``.

        Args:
            item: The item to look for
            item_type: Optional type every element must have

        Returns:
            This Assertive for chaining
        """
        items = self._enumerate(item_type)

        if not any(_equals(element, item) for element in items):
            self._fail(
                f"Expected collection to contain '{item}'.",
                f"Contains {item}",
                "Does not contain",
            )
        return self

    def does_not_contain(self, item: Any, item_type: Any = None) -> Assertive[T]:
        """
        Assert that no element of the collection equals ``item``.

        Args:
            item: The item that should not be present
            item_type: Optional type every element must have

        Returns:
            This Assertive for chaining
        """
        items = self._enumerate(item_type)

        if any(_equals(element, item) for element in items):
            self._fail(
                f"Expected collection to not contain '{item}'.",
                f"Does not contain {item}",
                "Contains",
            )
        return self

    def is_empty(self, item_type: Any = None) -> Assertive[T]:
        """Assert that the collection has no elements."""
        count = len(self._enumerate(item_type))

        if count > 0:
            self._fail(
                f"Expected collection to be empty, but it contained {count} item(s).",
                "Empty",
                f"Count: {count}",
            )
        return self

    def is_not_empty(self, item_type: Any = None) -> Assertive[T]:
        """Assert that the collection has at least one element."""
        if not self._enumerate(item_type):
            self._fail(
                "Expected collection to not be empty, but it was.",
                "Not empty",
                "Empty",
            )
        return self

    def has_count(self, expected_count: int, item_type: Any = None) -> Assertive[T]:
        """
        Assert that the collection has exactly ``expected_count`` elements.

        Args:
            expected_count: The expected number of items
            item_type: Optional type every element must have

        Returns:
            This Assertive for chaining
        """
        actual_count = len(self._enumerate(item_type))

        if actual_count != expected_count:
            self._fail(
                f"Expected collection to have {expected_count} item(s), "
                f"but found {actual_count}.",
                expected_count,
                actual_count,
            )
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────

    def _enumerate(self, item_type: Any) -> list[Any]:
        """Traverse the value once, failing if it is not a collection."""
        if item_type is not None:
            self._require_type("item_type", item_type)

        items = enumerate_items(self._value, item_type)
        if items is None:
            if item_type is None:
                self._fail("Value is not an enumerable.", None, None)
            self._fail(
                f"Value is not an enumerable of {type_name(item_type)}.",
                None,
                None,
            )
        return items

    def _format_message(self, message: str) -> str:
        if not self._context:
            return message
        return f"[{self._context}] {message}"

    def _fail(self, message: str, expected: Any, actual: Any) -> NoReturn:
        formatted = self._format_message(message)
        logger.debug(f"Assertion failed: {formatted}")
        raise AssertionFailure(formatted, expected=expected, actual=actual)

    @staticmethod
    def _require_predicate(predicate: Any) -> None:
        if predicate is None:
            logger.debug("Rejected missing predicate")
            raise InvalidArgumentError("predicate")
        if not callable(predicate):
            logger.debug(f"Rejected non-callable predicate: {predicate!r}")
            raise InvalidArgumentError("predicate", "must be callable")

    @staticmethod
    def _require_type(argument: str, expected_type: Any) -> None:
        if expected_type is None or not is_type_like(expected_type):
            logger.debug(f"Rejected {argument}: {expected_type!r}")
            raise InvalidArgumentError(argument, "must be a type")


def _equals(left: Any, right: Any) -> bool:
    """Identity or ``==``, the rule list membership uses; NaN equals itself."""
    return left is right or bool(left == right)


def assert_that(value: T) -> Assertive[T]:
    """
    Begin a fluent assertion chain for a value.

    Example:
        assert_that("Hello").is_not_null().is_of_type(str).is_equal_to("Hello")
    """
    return Assertive(value)
