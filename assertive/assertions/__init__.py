"""
Fluent Assertion Chains

This package provides the chainable assertion API and the
exceptions raised when an assertion is violated.

Supported assertions:
    - is_not_null / is_null
    - is_equal_to / is_not_equal_to
    - is_of_type / is_not_of_type
    - satisfies / fails
    - is_in_range
    - contains / does_not_contain
    - is_empty / is_not_empty / has_count

Usage:
    from assertive.assertions import assert_that, AssertionFailure

    assert_that([1, 2, 3]).is_not_empty().has_count(3).contains(2)

    try:
        assert_that("Test").with_context("Greeting").is_equal_to("Different")
    except AssertionFailure as failure:
        print(failure.message)   # [Greeting] Expected value to be 'Different', ...
        print(failure.expected)  # Different
        print(failure.actual)    # Test
"""

# Models
from .models import AssertionFailure, AssertiveError, InvalidArgumentError, format_value

# Wrapper
from .wrapper import Assertive, assert_that

__all__ = [
    # Models
    "AssertionFailure",
    "AssertiveError",
    "InvalidArgumentError",
    "format_value",
    # Wrapper
    "Assertive",
    "assert_that",
]
