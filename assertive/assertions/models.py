"""
Assertion failure models.

This module defines the exceptions raised by assertion chains,
including the structured failure carrying expected/actual values.
"""

from __future__ import annotations

import json
from typing import Any


class AssertiveError(Exception):
    """Base class for every error raised by assertive."""


class AssertionFailure(AssertiveError, AssertionError):
    """
    Raised when an assertion in a chain is violated.

    Subclasses AssertionError so test runners report it as a test
    failure rather than an error.

    Attributes:
        message: Human-readable description, including the context prefix
        expected: What was expected (literal, type name, or phrase)
        actual: What was actually found
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"AssertionFailure(message={self.message!r}, "
            f"expected={self.expected!r}, actual={self.actual!r})"
        )

    def describe(self, max_length: int = 100) -> str:
        """Format as a multi-line, human-readable block."""
        lines = [f"❌ FAILED: {self.message}"]

        if self.expected is not None:
            lines.append(f"   Expected: {format_value(self.expected, max_length)}")

        if self.actual is not None:
            lines.append(f"   Actual:   {format_value(self.actual, max_length)}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (expected/actual left unserialized)."""
        return {
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
        }


class InvalidArgumentError(AssertiveError, ValueError):
    """
    Raised when an assertion is called with an unusable argument.

    Signals a bug in the calling test code, not a failed assertion.
    """

    def __init__(self, argument: str, reason: str = "must not be None"):
        super().__init__(f"Argument '{argument}' {reason}.")
        self.argument = argument
        self.reason = reason


def format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, dict)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted
