"""Equality, identity and null checks that raise ``AssertFailed``."""

from __future__ import annotations

import warnings
from typing import Any

from sunit.assertions.base import NO_MESSAGE, AssertFailed, force


def fail(msg: str) -> None:
    """Raise ``AssertFailed`` with ``msg``."""
    raise AssertFailed(msg)


def fail_not_equal(msg: str, expected: Any, actual: Any) -> None:
    raise AssertFailed(f"{msg}, expected: {force(expected)}, actual: {force(actual)}")


def assert_equals(expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
    """Fail if ``expected != actual``."""
    expected_value = force(expected)
    actual_value = force(actual)
    if expected_value != actual_value:
        fail_not_equal(msg, expected_value, actual_value)


def assert_true(actual: Any, msg: str = NO_MESSAGE) -> None:
    assert_equals(True, actual, msg)


def assert_false(actual: Any, msg: str = NO_MESSAGE) -> None:
    assert_equals(False, actual, msg)


def assert_null(actual: Any, msg: str = NO_MESSAGE) -> None:
    """Fail unless ``actual`` is None."""
    if force(actual) is not None:
        fail(msg)


def assert_not_null(actual: Any, msg: str = NO_MESSAGE) -> None:
    """Fail if ``actual`` is None."""
    if force(actual) is None:
        fail(msg)


def assert_eq(expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
    """Fail unless ``expected`` and ``actual`` are the same object."""
    if force(expected) is not force(actual):
        fail(msg)


def assert_not_eq(expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
    """Fail if ``expected`` and ``actual`` are the same object."""
    if force(expected) is force(actual):
        fail(msg)


def _warn_deprecated(old: str, new: str, stacklevel: int) -> None:
    warnings.warn(
        f"{old} is deprecated, use {new} instead",
        DeprecationWarning,
        stacklevel=stacklevel + 1,
    )


def assert_same(expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
    _warn_deprecated("assert_same", "assert_eq", stacklevel=2)
    assert_eq(expected, actual, msg)


def assert_not_same(expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
    _warn_deprecated("assert_not_same", "assert_not_eq", stacklevel=2)
    assert_not_eq(expected, actual, msg)


class Assert:
    """Mixin exposing the assertion functions as methods."""

    def fail(self, msg: str) -> None:
        fail(msg)

    def assert_equals(self, expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
        assert_equals(expected, actual, msg)

    def assert_true(self, actual: Any, msg: str = NO_MESSAGE) -> None:
        assert_true(actual, msg)

    def assert_false(self, actual: Any, msg: str = NO_MESSAGE) -> None:
        assert_false(actual, msg)

    def assert_null(self, actual: Any, msg: str = NO_MESSAGE) -> None:
        assert_null(actual, msg)

    def assert_not_null(self, actual: Any, msg: str = NO_MESSAGE) -> None:
        assert_not_null(actual, msg)

    def assert_eq(self, expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
        assert_eq(expected, actual, msg)

    def assert_not_eq(self, expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
        assert_not_eq(expected, actual, msg)

    def assert_same(self, expected: Any, actual: Any, msg: str = NO_MESSAGE) -> None:
        _warn_deprecated("assert_same", "assert_eq", stacklevel=2)
        assert_eq(expected, actual, msg)

    def assert_not_same(
        self, expected: Any, actual: Any, msg: str = NO_MESSAGE
    ) -> None:
        _warn_deprecated("assert_not_same", "assert_not_eq", stacklevel=2)
        assert_not_eq(expected, actual, msg)
