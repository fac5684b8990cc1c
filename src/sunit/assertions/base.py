"""Failure signal and argument wrappers for the assertion system."""

from __future__ import annotations

from typing import Any, Callable

NO_MESSAGE = "(no message)"


class AssertFailed(RuntimeError):
    """Raised when an assertion does not hold.

    Attributes:
        msg: Human-readable description of the violated expectation.
    """

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return f"failed assertion: {self.msg}"

    def __repr__(self) -> str:
        return f"AssertFailed({self.msg!r})"


class Deferred:
    """A value that is only computed when an assertion reads it.

    Exceptions raised by the thunk propagate unchanged; they are never turned
    into an ``AssertFailed``.
    """

    __slots__ = ("thunk",)

    def __init__(self, thunk: Callable[[], Any]):
        if not callable(thunk):
            raise TypeError(f"Deferred expects a callable, got {type(thunk).__name__}")
        self.thunk = thunk

    def force(self) -> Any:
        return self.thunk()

    def __repr__(self) -> str:
        return f"Deferred({self.thunk!r})"


def lazy(thunk: Callable[[], Any]) -> Deferred:
    return Deferred(thunk)


def force(value: Any) -> Any:
    """Return ``value``, evaluating it first if it is ``Deferred``."""
    if isinstance(value, Deferred):
        return value.force()
    return value
