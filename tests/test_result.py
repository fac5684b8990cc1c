"""Tests for TestResult and TestFailure."""

from sunit import AssertFailed, TestCase, TestFailure, TestResult


def _raised(exc):
    try:
        raise exc
    except Exception as e:
        return e


def test_new_result_is_empty():
    result = TestResult()
    assert result.failure_count() == 0
    assert list(result.failures()) == []
    assert result.was_successful()


def test_add_failure_preserves_order():
    result = TestResult()
    a, b = TestCase("a"), TestCase("b")
    e1, e2 = AssertFailed("one"), ValueError("two")
    result.add_failure(a, e1)
    result.add_failure(b, e2)
    assert result.failure_count() == 2
    assert [(f.failed_test, f.thrown_exception) for f in result.failures()] == [
        (a, e1),
        (b, e2),
    ]
    assert not result.was_successful()


def test_failures_is_restartable_and_repeatable():
    result = TestResult()
    result.add_failure(TestCase("a"), AssertFailed("x"))
    failures = result.failures()
    assert list(failures) == list(failures)
    assert result.failures() == result.failures()


def test_failures_snapshot_ignores_later_entries():
    result = TestResult()
    result.add_failure(TestCase("a"), AssertFailed("x"))
    snapshot = result.failures()
    result.add_failure(TestCase("b"), AssertFailed("y"))
    assert len(snapshot) == 1
    assert len(result.failures()) == 2


def test_failure_str_for_assertion():
    failure = TestFailure(TestCase("t3"), AssertFailed("boom"))
    assert str(failure) == "t3 failed due to failed assertion: boom"


def test_failure_str_for_unexpected_fault():
    failure = TestFailure(TestCase("div"), ZeroDivisionError("division by zero"))
    assert str(failure) == "div failed due to ZeroDivisionError: division by zero"


def test_failure_str_for_exception_without_message():
    failure = TestFailure(TestCase("key"), KeyError())
    assert str(failure) == "key failed due to KeyError"


def test_failure_trace_contains_traceback():
    exc = _raised(ValueError("bad value"))
    trace = TestFailure(TestCase("t"), exc).trace()
    assert "Traceback" in trace
    assert "ValueError: bad value" in trace
    assert "_raised" in trace


def test_failure_from_pair():
    case, exc = TestCase("t"), AssertFailed("x")
    failure = TestFailure.from_pair((case, exc))
    assert failure == TestFailure(case, exc)
    assert failure.failed_test is case
    assert failure.thrown_exception is exc
