# topmark:header:start
#
#   project      : routemap
#   file         : test_provider.py
#   file_relpath : tests/test_provider.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Route listing providers."""

from __future__ import annotations

import sys

import pytest

from routemap.errors import RouteProviderError
from routemap.provider import CommandRouteProvider, StaticRouteProvider


def python_command(code: str) -> tuple[str, ...]:
    return (sys.executable, "-c", code)


def test_command_output_is_split_into_lines() -> None:
    provider = CommandRouteProvider(
        command=python_command("print('root GET / pages#index'); print('users GET /users x#y')")
    )

    assert provider.routes() == ["root GET / pages#index", "users GET /users x#y"]


def test_empty_output_is_accepted() -> None:
    assert CommandRouteProvider(command=python_command("pass")).routes() == []


def test_exit_status_is_not_enforced() -> None:
    provider = CommandRouteProvider(
        command=python_command("import sys; print('root GET / p#i'); sys.exit(3)")
    )

    assert provider.routes() == ["root GET / p#i"]


def test_missing_executable_raises() -> None:
    provider = CommandRouteProvider(command=("routemap-no-such-command-xyz", "routes"))

    with pytest.raises(RouteProviderError, match="Could not run"):
        provider.routes()


def test_non_text_output_raises() -> None:
    provider = CommandRouteProvider(
        command=python_command("import sys; sys.stdout.buffer.write(bytes([0xff, 0xfe, 0xfd]))")
    )

    with pytest.raises(RouteProviderError, match="non-text"):
        provider.routes()


def test_empty_command_raises() -> None:
    with pytest.raises(RouteProviderError):
        CommandRouteProvider(command=()).routes()


def test_static_provider_returns_a_copy() -> None:
    provider = StaticRouteProvider(["a", "b"])
    lines = provider.routes()
    lines.append("c")

    assert provider.routes() == ["a", "b"]
