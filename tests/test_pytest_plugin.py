"""Tests for the pytest report hook."""

from types import SimpleNamespace

import pytest

from assertive import AssertionFailure, assert_that
from assertive.pytest_plugin import SECTION_TITLE, pytest_runtest_makereport


def _run_hook(exception, max_length=100):
    """Drive the hookwrapper generator the way pluggy does."""
    report = SimpleNamespace(sections=[])
    excinfo = None
    if exception is not None:
        excinfo = SimpleNamespace(value=exception)
    call = SimpleNamespace(excinfo=excinfo)
    item = SimpleNamespace(
        config=SimpleNamespace(getoption=lambda name, default=None: max_length)
    )

    hook = pytest_runtest_makereport(item, call)
    next(hook)
    with pytest.raises(StopIteration):
        hook.send(SimpleNamespace(get_result=lambda: report))
    return report


def _failure(chain):
    try:
        chain()
    except AssertionFailure as failure:
        return failure
    raise RuntimeError("chain did not fail")


def test_failure_adds_section():
    failure = _failure(lambda: assert_that("Test").with_context("Greeting").is_equal_to("Different"))
    report = _run_hook(failure)

    assert len(report.sections) == 1
    title, content = report.sections[0]
    assert title == SECTION_TITLE
    assert "[Greeting] Expected value to be 'Different', but was 'Test'." in content
    assert "Expected: 'Different'" in content
    assert "Actual:   'Test'" in content


def test_section_respects_max_value_length():
    failure = _failure(lambda: assert_that("x" * 200).is_null())
    _, content = _run_hook(failure, max_length=20).sections[0]
    actual_line = next(line for line in content.splitlines() if "Actual" in line)
    assert actual_line.endswith("...")


def test_passing_test_adds_nothing():
    assert _run_hook(None).sections == []


def test_other_exceptions_add_nothing():
    assert _run_hook(ValueError("boom")).sections == []
    assert _run_hook(AssertionError("plain")).sections == []
