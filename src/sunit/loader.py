"""Resolve ``module:attribute`` references to runnable tests."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

from sunit.case import Test
from sunit.config import validate_target


class TargetError(ValueError):
    """A suite reference could not be turned into a ``Test``."""


def add_search_path(directory: Path) -> None:
    """Put ``directory`` first on ``sys.path`` so local suite modules import."""
    entry = str(directory.resolve())
    if entry in sys.path:
        sys.path.remove(entry)
    sys.path.insert(0, entry)


def load_target(target: str) -> Test:
    """Import ``module:attribute`` and return the ``Test`` it names.

    The attribute may be a ``Test`` instance or a zero-argument callable
    (for example a function or a ``TestSuite`` factory) returning one.
    """
    try:
        validate_target(target)
    except ValueError as e:
        raise TargetError(str(e)) from e

    module_name, attr_path = target.split(":", 1)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetError(f"Cannot import module '{module_name}': {e}") from e
    except Exception as e:
        raise TargetError(
            f"Error while importing module '{module_name}': {type(e).__name__}: {e}"
        ) from e

    obj: object = module
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetError(
                f"Module '{module_name}' has no attribute '{attr_path}'"
            ) from e

    if isinstance(obj, Test):
        return obj
    if callable(obj) and not isinstance(obj, type):
        try:
            built = obj()
        except Exception as e:
            raise TargetError(
                f"'{target}' raised {type(e).__name__} while building the test: {e}"
            ) from e
        if isinstance(built, Test):
            return built
        raise TargetError(
            f"'{target}' returned {type(built).__name__}, expected a Test"
        )
    raise TargetError(f"'{target}' is {type(obj).__name__}, expected a Test")
