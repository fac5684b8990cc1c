"""Assertion system used by test bodies."""

from sunit.assertions.base import NO_MESSAGE, AssertFailed, Deferred, lazy
from sunit.assertions.checks import (
    Assert,
    assert_eq,
    assert_equals,
    assert_false,
    assert_not_eq,
    assert_not_null,
    assert_not_same,
    assert_null,
    assert_same,
    assert_true,
    fail,
    fail_not_equal,
)

__all__ = [
    "NO_MESSAGE",
    "Assert",
    "AssertFailed",
    "Deferred",
    "assert_eq",
    "assert_equals",
    "assert_false",
    "assert_not_eq",
    "assert_not_null",
    "assert_not_same",
    "assert_null",
    "assert_same",
    "assert_true",
    "fail",
    "fail_not_equal",
    "lazy",
]
