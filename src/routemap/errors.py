# topmark:header:start
#
#   project      : routemap
#   file         : errors.py
#   file_relpath : src/routemap/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain errors raised by routemap operations.

These exceptions are framework-agnostic: the CLI translates them into
Click exceptions with dedicated exit codes (see
[`routemap.cli.errors`][routemap.cli.errors]). A missing routes file is not an
error; it is reported as [`Outcome.MISSING`][routemap.operations.Outcome].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class RoutemapError(Exception):
    """Base class for all routemap errors."""


class MalformedAnnotationError(RoutemapError):
    """A route map header is followed by content before its blank terminator line.

    Attributes:
        line_number (int): 1-based line number of the offending line.
        line (str): The offending line text.
    """

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed route map annotation: line {line_number} ({line!r}) follows the "
            "annotation block without a blank separator line"
        )


class RouteProviderError(RoutemapError):
    """The external route-listing command could not be run or returned non-text output."""


class ConfigError(RoutemapError):
    """Invalid configuration value (from a config file or the command line)."""


class RoutesEncodingError(RoutemapError):
    """The routes file is not valid UTF-8 text.

    Attributes:
        path (Path): The routes file.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Encoding error in {path}: {reason}")
