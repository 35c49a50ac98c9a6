"""
pytest integration.

Registered through the ``pytest11`` entry point. When a test fails with
an AssertionFailure, the expected and actual values are added to the
report as an extra "assertive" section.
"""

from __future__ import annotations

import pytest

from .assertions import AssertionFailure

SECTION_TITLE = "assertive"


def pytest_addoption(parser):
    group = parser.getgroup("assertive")
    group.addoption(
        "--assertive-max-value-length",
        action="store",
        type=int,
        default=100,
        help="Truncate expected/actual values in failure sections to this many characters",
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()

    if call.excinfo is None or not isinstance(call.excinfo.value, AssertionFailure):
        return

    max_length = item.config.getoption("--assertive-max-value-length", default=100)
    report.sections.append(
        (SECTION_TITLE, call.excinfo.value.describe(max_length))
    )
