# topmark:header:start
#
#   project      : routemap
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the routemap test suite.

Sets TRACE logging for test runs, keeps the developer's ROUTEMAP_LOG_LEVEL
from leaking into tests, and provides a throw-away project directory with a
``config/routes.rb`` file.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from routemap.config import logging
from routemap.config.model import Config, MutableConfig
from routemap.console_api import StdConsole
from routemap.constants import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def silence_routemap_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory containing ``config/``.

    Returns:
        Path: The project root (also the working directory).
    """
    (tmp_path / "config").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def routes_rb(project: Path) -> Path:
    """Relative path of the routes file inside `project` (not created)."""
    return Path("config") / "routes.rb"


@pytest.fixture
def make_config(routes_rb: Path) -> Callable[..., Config]:
    """Return a factory building a `Config` for `routes_rb` with overrides."""

    def _make(**overrides: Any) -> Config:
        draft = MutableConfig(routes_file=routes_rb)
        for key, value in overrides.items():
            setattr(draft, key, value)
        return draft.freeze()

    return _make


@pytest.fixture
def console_out() -> io.StringIO:
    """In-memory stdout used by the `console` fixture."""
    return io.StringIO()


@pytest.fixture
def console(console_out: io.StringIO) -> StdConsole:
    """Console writing program output to `console_out`."""
    return StdConsole(out=console_out, err=io.StringIO())
