# topmark:header:start
#
#   project      : routemap
#   file         : builder.py
#   file_relpath : src/routemap/annotation/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build the route map comment block from route-listing output."""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from routemap.config.logging import get_logger
from routemap.constants import ROUTE_MAP_PREFIX, TIMESTAMP_FORMAT
from routemap.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from routemap.annotation.types import Document
    from routemap.config.logging import RoutemapLogger

logger: RoutemapLogger = get_logger(__name__)

# Older rake versions print the working directory as the first line of output.
CWD_ARTIFACT_RE: re.Pattern[str] = re.compile(r"^\(in /")


def compile_ignore_pattern(pattern: str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    """Compile the ``ignore_routes`` pattern.

    Args:
        pattern (str | re.Pattern[str] | None): Regular expression (compiled ones are
            returned as they are), or None to keep every route.

    Returns:
        re.Pattern[str] | None: The compiled pattern, or None.

    Raises:
        ConfigError: If the pattern is not a valid regular expression.
    """
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"Invalid ignore_routes pattern {pattern!r}: {exc}") from exc


def marker_line(*, timestamp: bool, now: datetime | None = None) -> str:
    """Return the marker line, with an ``(Updated ...)`` suffix when requested."""
    if not timestamp:
        return ROUTE_MAP_PREFIX
    stamp: str = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"{ROUTE_MAP_PREFIX} (Updated {stamp})"


def build_header(
    routes: Sequence[str],
    *,
    timestamp: bool = False,
    ignore_routes: str | re.Pattern[str] | None = None,
    now: datetime | None = None,
) -> Document:
    """Format route lines as a commented annotation block.

    The first route line is discarded when it is a working-directory artifact
    (``(in /path)``). Lines in which ``ignore_routes`` matches anywhere are
    dropped; the pattern sees the whole line (name, verb, path and action).

    Args:
        routes (Sequence[str]): Lines printed by the route-listing command.
        timestamp (bool): Append ``(Updated YYYY-MM-DD HH:MM)`` to the marker line.
        ignore_routes (str | re.Pattern[str] | None): Regular expression of route lines
            to exclude.
        now (datetime | None): Time used for the timestamp (defaults to the local time).

    Returns:
        Document: Marker line, a ``#`` separator, then one ``# <route>`` line per route.

    Raises:
        ConfigError: If ``ignore_routes`` is not a valid regular expression.
    """
    ignore: re.Pattern[str] | None = compile_ignore_pattern(ignore_routes)

    route_lines: list[str] = list(routes)
    if route_lines and CWD_ARTIFACT_RE.match(route_lines[0]):
        logger.debug("Dropping working directory line: %r", route_lines[0])
        route_lines.pop(0)

    if ignore is not None:
        kept: list[str] = [line for line in route_lines if not ignore.search(line)]
        logger.debug(
            "ignore_routes %r dropped %d line(s)", ignore.pattern, len(route_lines) - len(kept)
        )
        route_lines = kept

    header: Document = [marker_line(timestamp=timestamp, now=now), "#"]
    header.extend(f"# {line}".rstrip() for line in route_lines)
    return header
