"""Pytest configuration and fixtures."""

import logging
import re
import sys
import textwrap

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up sunit loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("sunit")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def suite_module(tmp_path, monkeypatch):
    """Write an importable module holding suites and return its name."""
    name = "suites_" + re.sub(r"\W", "_", tmp_path.name)

    def _write(source: str) -> str:
        (tmp_path / f"{name}.py").write_text(textwrap.dedent(source))
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, name, raising=False)
        return name

    return _write


@pytest.fixture(autouse=True)
def restore_sys_path(monkeypatch):
    """The CLI prepends suite directories to sys.path; undo that per test."""
    monkeypatch.setattr(sys, "path", list(sys.path))
