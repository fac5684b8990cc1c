from __future__ import annotations

from typing import Callable, Iterable, Iterator, TYPE_CHECKING

from sunit.case import Test, TestCase

if TYPE_CHECKING:
    from sunit.result import TestResult


class TestSuite(Test):
    """Runs a composite of tests in insertion order.

    A suite is itself a ``Test``, so suites can be nested. Every child runs
    against the same result, which makes nesting invisible in the reported
    failures.
    """

    __test__ = False

    def __init__(self, *tests: Test):
        self._tests: list[Test] = list(tests)

    @classmethod
    def from_names(
        cls, names: Iterable[str], factory: Callable[[str], Test]
    ) -> TestSuite:
        """Build one test per name by calling ``factory``, in name order."""
        return cls(*(factory(name) for name in names))

    def add_test(self, test: Test) -> None:
        self._tests.append(test)

    def run(self, result: TestResult) -> None:
        for test in self._tests:
            test.run(result)

    def count_test_cases(self) -> int:
        """Number of leaf cases in this suite and all nested suites."""
        count = 0
        for test in self._tests:
            if isinstance(test, TestSuite):
                count += test.count_test_cases()
            else:
                count += 1
        return count

    @property
    def tests(self) -> tuple[Test, ...]:
        return tuple(self._tests)

    def __iter__(self) -> Iterator[Test]:
        return iter(self._tests)

    def __len__(self) -> int:
        return len(self._tests)

    def __repr__(self) -> str:
        return f"TestSuite({', '.join(repr(t) for t in self._tests)})"
