# topmark:header:start
#
#   project      : routemap
#   file         : console_api.py
#   file_relpath : src/routemap/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

Program output (the one status line per operation) goes through a console,
separate from internal logging. The CLI uses a Click-backed console; library
callers get [`StdConsole`][routemap.console_api.StdConsole].
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class ConsoleLike(Protocol):
    """Minimal interface for a console used by operations and CLI commands."""

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class StdConsole(ConsoleLike):
    """Simple console writing to text streams.

    Args:
        enable_color (bool): If True, callers may pass ANSI-colored text; it is
            written as given.
        out (TextIO | None): Stream for normal output. Defaults to sys.stdout.
        err (TextIO | None): Stream for error/warning output. Defaults to sys.stderr.
    """

    def __init__(
        self, *, enable_color: bool = False, out: TextIO | None = None, err: TextIO | None = None
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        self.out.write(text + ("\n" if nl else ""))

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        self.err.write(text + ("\n" if nl else ""))

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        self.err.write(text + ("\n" if nl else ""))

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return the text unchanged."""
        return text
