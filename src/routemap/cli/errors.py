# topmark:header:start
#
#   project      : routemap
#   file         : errors.py
#   file_relpath : src/routemap/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the routemap CLI.

Commands translate domain errors from [`routemap.errors`][routemap.errors]
into these Click exceptions (see [`raise_cli_error`][routemap.cli.errors.raise_cli_error])
so each failure kind exits with its own code.
"""

from __future__ import annotations

from typing import IO, Any, NoReturn

import click

from routemap.cli.exit_codes import ExitCode
from routemap.errors import (
    ConfigError,
    MalformedAnnotationError,
    RoutemapError,
    RouteProviderError,
    RoutesEncodingError,
)


class RoutemapCliError(click.ClickException):
    """Base class for all routemap CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")  # pyright: ignore[reportUnknownMemberType]
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class RoutemapUsageError(RoutemapCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RoutemapConfigError(RoutemapCliError):
    """Error for configuration errors (invalid config file or option value)."""

    exit_code = ExitCode.CONFIG_ERROR


class RoutemapMalformedAnnotationError(RoutemapCliError):
    """Error for a routes file with a malformed route map block."""

    exit_code = ExitCode.MALFORMED_ANNOTATION


class RoutemapEncodingError(RoutemapCliError):
    """Error for a routes file that cannot be decoded as UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class RoutemapProviderError(RoutemapCliError):
    """Error for a route listing command that could not be run."""

    exit_code = ExitCode.PROVIDER_ERROR


class RoutemapIOError(RoutemapCliError):
    """Error for I/O errors reading/writing the routes file."""

    exit_code = ExitCode.IO_ERROR


def raise_cli_error(exc: RoutemapError | OSError) -> NoReturn:
    """Re-raise a domain or I/O error as the matching CLI error.

    Args:
        exc (RoutemapError | OSError): The error raised by an operation.

    Raises:
        RoutemapCliError: Always; the subclass depends on the type of ``exc``.
    """
    if isinstance(exc, MalformedAnnotationError):
        raise RoutemapMalformedAnnotationError(str(exc)) from exc
    if isinstance(exc, RouteProviderError):
        raise RoutemapProviderError(str(exc)) from exc
    if isinstance(exc, RoutesEncodingError):
        raise RoutemapEncodingError(str(exc)) from exc
    if isinstance(exc, ConfigError):
        raise RoutemapConfigError(str(exc)) from exc
    if isinstance(exc, OSError):
        raise RoutemapIOError(str(exc)) from exc
    raise RoutemapCliError(str(exc)) from exc
