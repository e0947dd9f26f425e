# topmark:header:start
#
#   project      : routemap
#   file         : provider.py
#   file_relpath : src/routemap/provider.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Route listing provider.

The route table is produced by an external command (``rake routes`` by
default). The command runs synchronously without a timeout; its standard
output is the only thing routemap looks at. The exit status is logged but not
enforced: whatever the command printed is taken as the route listing.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from routemap.config.logging import get_logger
from routemap.constants import DEFAULT_ROUTE_COMMAND
from routemap.errors import RouteProviderError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from routemap.config.logging import RoutemapLogger

logger: RoutemapLogger = get_logger(__name__)


class RouteProvider(Protocol):
    """Anything that can list the application's routes as text lines."""

    def routes(self) -> list[str]:
        """Return the route listing, one line per entry, in output order."""
        ...


@dataclass(frozen=True)
class CommandRouteProvider:
    """Run an external command and return its standard output as lines.

    Attributes:
        command (Sequence[str]): Program and arguments (no shell is involved).
        cwd (Path | None): Working directory for the command.
    """

    command: Sequence[str] = DEFAULT_ROUTE_COMMAND
    cwd: Path | None = None

    def routes(self) -> list[str]:
        """Run the command and split its output into lines.

        Returns:
            list[str]: Output lines without newlines.

        Raises:
            RouteProviderError: If the command cannot be started or its output
                is not valid text.
        """
        cmd: list[str] = list(self.command)
        if not cmd:
            raise RouteProviderError("No route listing command configured")
        logger.debug("Running route listing command: %s", " ".join(cmd))
        try:
            proc: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as exc:
            raise RouteProviderError(f"Could not run {' '.join(cmd)!r}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise RouteProviderError(
                f"Route listing command {' '.join(cmd)!r} produced non-text output: {exc}"
            ) from exc

        if proc.returncode != 0:
            logger.warning(
                "Route listing command exited with status %d: %s",
                proc.returncode,
                proc.stderr.strip(),
            )
        lines: list[str] = proc.stdout.splitlines()
        logger.debug("Route listing command printed %d line(s)", len(lines))
        return lines


@dataclass(frozen=True)
class StaticRouteProvider:
    """Provider returning a fixed listing (useful for tests and scripting)."""

    lines: Sequence[str] = ()

    def routes(self) -> list[str]:
        """Return a copy of the fixed listing."""
        return list(self.lines)
