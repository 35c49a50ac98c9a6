"""
Assertive - Fluent Assertions for Python Tests

This package provides chainable assertions that raise a structured
failure (message, expected, actual) on the first violated check.

Subpackages:
    - assertions: The assertion chain and its failure types

Usage:
    from assertive import assert_that, AssertionFailure

    assert_that("Hello").is_not_null().is_of_type(str).is_equal_to("Hello")

    assert_that([1, 2, 3]).with_context("Numbers").has_count(3).contains(2)

    try:
        assert_that(0).is_in_range(1, 10)
    except AssertionFailure as failure:
        print(failure.message, failure.expected, failure.actual)
"""

__version__ = "0.1.0"

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionFailure,
    AssertiveError,
    InvalidArgumentError,
    format_value,
    # Wrapper
    Assertive,
    assert_that,
)

__all__ = [
    # Package info
    "__version__",
    # Assertions - Models
    "AssertionFailure",
    "AssertiveError",
    "InvalidArgumentError",
    "format_value",
    # Assertions - Wrapper
    "Assertive",
    "assert_that",
]
