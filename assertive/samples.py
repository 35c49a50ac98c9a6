"""
Built-in sample chains.

Each sample exercises a group of assertions on a realistic value. They
back the ``assertive samples`` command and double as usage examples.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from .assertions import AssertionFailure, assert_that

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample:
    """A named assertion chain."""
    id: str
    title: str
    run: Callable[[], object]
    expect_failure: bool = False


@dataclass
class Person:
    name: str
    age: int


def _strings():
    return (
        assert_that("Hello, Assertive!")
        .is_not_null()
        .is_of_type(str)
        .is_equal_to("Hello, Assertive!")
        .is_not_equal_to("World")
        .satisfies(lambda s: len(s) > 5, "String should be longer than 5 characters")
    )


def _integers():
    return (
        assert_that(42)
        .is_not_null()
        .is_of_type(int)
        .is_equal_to(42)
        .is_not_equal_to(100)
        .is_in_range(1, 100)
        .satisfies(lambda x: x > 0, "Number should be positive")
        .fails(lambda x: x < 0, "Number should not be negative")
    )


def _null_value():
    return assert_that(None).is_null()


def _datetimes():
    today = datetime.now()
    return (
        assert_that(today)
        .is_not_null()
        .is_of_type(datetime)
        .satisfies(lambda d: d.year >= 2024, "Year should be at least 2024")
        .satisfies(lambda d: d <= datetime.now(), "Date should not be in the future")
    )


def _collections():
    numbers = [1, 2, 3, 4, 5]
    return (
        assert_that(numbers)
        .is_not_null()
        .is_not_empty(int)
        .has_count(5, int)
        .contains(3)
        .does_not_contain(10)
        .satisfies(lambda items: len(items) > 0, "List should not be empty")
    )


def _empty_collection():
    empty: list[str] = []
    return assert_that(empty).is_not_null().is_empty(str)


def _custom_object():
    person = Person(name="John Doe", age=30)
    return (
        assert_that(person)
        .with_context("Person validation")
        .is_not_null()
        .satisfies(lambda p: p.age >= 18, "Person should be an adult")
        .satisfies(lambda p: bool(p.name), "Person should have a name")
    )


def _intentional_failure():
    return (
        assert_that("Assertive")
        .with_context("Demo failure")
        .is_equal_to("Different String")
    )


def _range():
    temperature = 25.5
    return (
        assert_that(temperature)
        .with_context("Temperature check")
        .is_in_range(-50.0, 50.0)
        .satisfies(lambda t: t > 0, "Temperature is above freezing")
    )


def _dictionary():
    data = {"a": 1, "b": 2, "c": 3}
    return (
        assert_that(data)
        .is_not_null()
        .is_of_type(dict[str, int])
        .satisfies(lambda d: len(d) == 3, "Dictionary should have exactly 3 items")
        .satisfies(lambda d: "b" in d, "Dictionary should contain key 'b'")
        .satisfies(lambda d: d["b"] == 2, "Value for key 'b' should be 2")
    )


SAMPLES: list[Sample] = [
    Sample("strings", "String assertions", _strings),
    Sample("integers", "Integer assertions", _integers),
    Sample("null", "Null value assertions", _null_value),
    Sample("datetimes", "Datetime assertions", _datetimes),
    Sample("collections", "Collection assertions", _collections),
    Sample("empty-collection", "Empty collection assertions", _empty_collection),
    Sample("custom-object", "Custom object with context", _custom_object),
    Sample("intentional-failure", "Demonstrating an assertion failure", _intentional_failure, expect_failure=True),
    Sample("range", "Range validation", _range),
    Sample("dictionary", "Complex assertion chaining", _dictionary),
]



class Outcome(str, Enum):
    """How a sample run ended."""
    PASSED = "passed"
    EXPECTED_FAILURE = "expected failure"
    FAILED = "failed"
    ERROR = "error"

    @property
    def ok(self) -> bool:
        return self in (Outcome.PASSED, Outcome.EXPECTED_FAILURE)


@dataclass
class SampleResult:
    """Outcome of one sample run, with the failure details when it raised."""
    sample: Sample
    outcome: Outcome
    duration_ms: float
    message: str | None = None
    expected: Any = None
    actual: Any = None


def run_sample(sample: Sample) -> SampleResult:
    """
    Run a sample chain and classify how it ended.

    An AssertionFailure is a failure, or an expected failure for samples
    that are meant to raise one. Any other exception is an error, and a
    sample meant to fail that passes is a failure.

    Args:
        sample: The sample to run

    Returns:
        SampleResult for the run
    """
    started = time.perf_counter()
    failure: AssertionFailure | None = None
    error: Exception | None = None

    try:
        sample.run()
    except AssertionFailure as e:
        failure = e
    except Exception as e:
        error = e

    duration_ms = (time.perf_counter() - started) * 1000

    if error is not None:
        result = SampleResult(
            sample, Outcome.ERROR, duration_ms, message=f"{type(error).__name__}: {error}"
        )
    elif failure is not None:
        result = SampleResult(
            sample,
            Outcome.EXPECTED_FAILURE if sample.expect_failure else Outcome.FAILED,
            duration_ms,
            message=failure.message,
            expected=failure.expected,
            actual=failure.actual,
        )
    elif sample.expect_failure:
        result = SampleResult(
            sample, Outcome.FAILED, duration_ms,
            message="Expected the chain to fail, but it passed.",
        )
    else:
        result = SampleResult(sample, Outcome.PASSED, duration_ms)

    logger.debug(f"Sample {sample.id}: {result.outcome.value}")
    return result
