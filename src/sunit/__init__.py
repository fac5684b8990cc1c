"""Minimal unit-testing harness: cases, suites and a shared failure log."""

from sunit.assertions import (
    NO_MESSAGE,
    Assert,
    AssertFailed,
    Deferred,
    assert_eq,
    assert_equals,
    assert_false,
    assert_not_eq,
    assert_not_null,
    assert_null,
    assert_true,
    fail,
    lazy,
)
from sunit.case import Test, TestCase
from sunit.result import TestFailure, TestResult
from sunit.suite import TestSuite

__all__ = [
    "NO_MESSAGE",
    "Assert",
    "AssertFailed",
    "Deferred",
    "Test",
    "TestCase",
    "TestFailure",
    "TestResult",
    "TestSuite",
    "assert_eq",
    "assert_equals",
    "assert_false",
    "assert_not_eq",
    "assert_not_null",
    "assert_null",
    "assert_true",
    "fail",
    "lazy",
]
