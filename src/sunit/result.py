from __future__ import annotations

import logging
import traceback
from typing import Iterator, Sequence, TYPE_CHECKING, overload

from sunit.assertions.base import AssertFailed

if TYPE_CHECKING:
    from sunit.case import Test


def describe_exception(exc: BaseException) -> str:
    """Short description of a failure cause, e.g. ``ZeroDivisionError: division by zero``."""
    if isinstance(exc, AssertFailed):
        return str(exc)
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"


class TestFailure:
    """A failed test together with the exception it raised."""

    __test__ = False

    def __init__(self, failed_test: Test, thrown_exception: BaseException):
        self._failed_test = failed_test
        self._thrown_exception = thrown_exception

    @classmethod
    def from_pair(cls, pair: tuple[Test, BaseException]) -> TestFailure:
        return cls(pair[0], pair[1])

    @property
    def failed_test(self) -> Test:
        return self._failed_test

    @property
    def thrown_exception(self) -> BaseException:
        return self._thrown_exception

    def trace(self) -> str:
        """Full traceback text of the failure cause."""
        exc = self._thrown_exception
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    def __str__(self) -> str:
        return f"{self._failed_test} failed due to {describe_exception(self._thrown_exception)}"

    def __repr__(self) -> str:
        return f"TestFailure({self._failed_test!r}, {self._thrown_exception!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestFailure):
            return NotImplemented
        return (
            self._failed_test is other._failed_test
            and self._thrown_exception is other._thrown_exception
        )

    def __hash__(self) -> int:
        return hash((id(self._failed_test), id(self._thrown_exception)))


class Failures(Sequence[TestFailure]):
    """Snapshot of recorded failures; views are built on access."""

    def __init__(self, entries: Sequence[tuple[Test, BaseException]]):
        self._entries = tuple(entries)

    @overload
    def __getitem__(self, index: int) -> TestFailure: ...

    @overload
    def __getitem__(self, index: slice) -> list[TestFailure]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [TestFailure.from_pair(p) for p in self._entries[index]]
        return TestFailure.from_pair(self._entries[index])

    def __iter__(self) -> Iterator[TestFailure]:
        for pair in self._entries:
            yield TestFailure.from_pair(pair)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failures):
            return NotImplemented
        return len(self._entries) == len(other._entries) and all(
            a[0] is b[0] and a[1] is b[1]
            for a, b in zip(self._entries, other._entries)
        )

    def __repr__(self) -> str:
        return f"Failures({list(self)!r})"


class TestResult:
    """Collects the failures of a run.

    One instance is shared by every test in the run tree. Entries are kept in
    the order the failures happened and are never removed.
    """

    __test__ = False

    def __init__(self, logger: logging.Logger | None = None):
        self._entries: list[tuple[Test, BaseException]] = []
        self.logger = logger or logging.getLogger("sunit")

    def add_failure(self, test: Test, exc: BaseException) -> None:
        self._entries.append((test, exc))

    def failure_count(self) -> int:
        return len(self._entries)

    def failures(self) -> Failures:
        return Failures(self._entries)

    def was_successful(self) -> bool:
        return not self._entries
