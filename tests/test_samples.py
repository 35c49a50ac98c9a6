"""Tests for the built-in sample chains."""

import pytest

from assertive import AssertionFailure, Assertive, assert_that
from assertive.samples import SAMPLES, Outcome, Sample, run_sample


def _by_id(sample_id):
    return next(sample for sample in SAMPLES if sample.id == sample_id)


def test_sample_ids_are_unique():
    ids = [sample.id for sample in SAMPLES]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize(
    "sample", [s for s in SAMPLES if not s.expect_failure], ids=lambda s: s.id
)
def test_passing_samples_return_a_wrapper(sample):
    assert isinstance(sample.run(), Assertive)


def test_intentional_failure_raises():
    sample = _by_id("intentional-failure")
    assert sample.expect_failure is True
    with pytest.raises(AssertionFailure) as exc_info:
        sample.run()
    failure = exc_info.value
    assert failure.message == (
        "[Demo failure] Expected value to be 'Different String', but was 'Assertive'."
    )
    assert failure.expected == "Different String"
    assert failure.actual == "Assertive"


# --- run_sample ---


def test_run_sample_passed():
    result = run_sample(_by_id("strings"))
    assert result.outcome == Outcome.PASSED
    assert result.outcome.ok
    assert result.message is None
    assert result.duration_ms >= 0


def test_run_sample_expected_failure_keeps_details():
    result = run_sample(_by_id("intentional-failure"))
    assert result.outcome == Outcome.EXPECTED_FAILURE
    assert result.outcome.ok
    assert result.message.startswith("[Demo failure]")
    assert result.expected == "Different String"
    assert result.actual == "Assertive"


def test_run_sample_failed():
    sample = Sample("broken", "Broken", lambda: assert_that(1).is_equal_to(2))
    result = run_sample(sample)
    assert result.outcome == Outcome.FAILED
    assert not result.outcome.ok
    assert result.expected == 2
    assert result.actual == 1


def test_run_sample_fails_when_expected_failure_passes():
    sample = Sample("lenient", "Lenient", lambda: assert_that(1).is_equal_to(1), expect_failure=True)
    result = run_sample(sample)
    assert result.outcome == Outcome.FAILED
    assert result.message == "Expected the chain to fail, but it passed."


def test_run_sample_error_on_misuse():
    sample = Sample("misuse", "Misuse", lambda: assert_that(1).satisfies(None))
    result = run_sample(sample)
    assert result.outcome == Outcome.ERROR
    assert not result.outcome.ok
    assert result.message.startswith("InvalidArgumentError: ")
