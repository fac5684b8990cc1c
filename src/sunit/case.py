from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TYPE_CHECKING

from sunit.assertions.checks import Assert

if TYPE_CHECKING:
    from sunit.result import TestResult


class Test(ABC):
    """Anything that can be run with its failures collected into a result."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    @abstractmethod
    def run(self, result: TestResult) -> None:
        """Run against ``result``, recording failures instead of raising them."""
        ...


class TestCase(Test, Assert):
    """A single named test.

    The body is either supplied as ``body`` or provided by overriding
    ``run_test`` in a subclass. ``set_up`` and ``tear_down`` are available
    for subclasses to call but ``run`` does not invoke them.
    """

    __test__ = False

    def __init__(self, name: str, body: Callable[[], object] | None = None):
        self._name = name
        self._body = body

    @property
    def name(self) -> str:
        return self._name

    def run_test(self) -> None:
        if self._body is None:
            raise NotImplementedError(
                f"Test case '{self._name}' has no body; pass body= or override run_test()"
            )
        self._body()

    def run(self, result: TestResult) -> None:
        result.logger.debug(f"Running test '{self._name}'")
        try:
            self.run_test()
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            result.logger.debug(f"Test '{self._name}' failed: {e!r}")
            result.add_failure(self, e)

    def set_up(self) -> None:
        pass

    def tear_down(self) -> None:
        pass

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
