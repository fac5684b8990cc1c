"""Run a suite and print its failures as plain text."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from sunit.case import Test
from sunit.result import TestResult


def run_suite(suite: Test, logger: logging.Logger | None = None) -> TestResult:
    """Run ``suite`` into a fresh result and return it."""
    result = TestResult(logger=logger)
    suite.run(result)
    result.logger.debug(f"Run finished with {result.failure_count()} failure(s)")
    return result


def print_failures(
    result: TestResult,
    trace: bool = False,
    out: Callable[[str], object] = print,
) -> None:
    """Write one line per failure, in the order they were recorded."""
    for failure in result.failures():
        out(str(failure))
        if trace:
            out(failure.trace().rstrip("\n"))


class TestConsoleMain(ABC):
    """Implement ``suite`` and call ``main`` to run it from a script."""

    __test__ = False

    @abstractmethod
    def suite(self) -> Test:
        ...

    def main(self, argv: list[str] | None = None) -> int:
        trace = bool(argv) and "--trace" in argv
        result = run_suite(self.suite())
        print_failures(result, trace=trace)
        return result.failure_count()
