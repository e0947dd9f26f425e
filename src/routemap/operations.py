# topmark:header:start
#
#   project      : routemap
#   file         : operations.py
#   file_relpath : src/routemap/operations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Annotate and remove operations.

Each operation reads the routes file once, computes the complete new text,
and writes it at most once, keeping the line endings it found. Errors such as
a malformed annotation or an undecodable file are raised before anything is written. A
missing routes file is reported and treated as a no-op.

Every call prints exactly one status line on the console:

- ``config/routes.rb annotated.`` / ``Removed annotations from config/routes.rb.``
- ``config/routes.rb unchanged.``
- ``Can't find routes.rb``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yachalk import chalk

from routemap.annotation.builder import build_header, compile_ignore_pattern
from routemap.annotation.scanner import strip_annotations
from routemap.annotation.types import split_document
from routemap.annotation.writer import (
    FileSystemSink,
    NullSink,
    merge_for_insert,
    trim_for_removal,
    write_contents,
)
from routemap.config.logging import get_logger
from routemap.console_api import StdConsole
from routemap.errors import RoutesEncodingError
from routemap.provider import CommandRouteProvider
from routemap.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    import re
    from datetime import datetime
    from pathlib import Path

    from routemap.annotation.types import Document, ScanResult
    from routemap.annotation.writer import WriteResult, WriteSink
    from routemap.config.logging import RoutemapLogger
    from routemap.config.model import Config
    from routemap.console_api import ConsoleLike
    from routemap.provider import RouteProvider

logger: RoutemapLogger = get_logger(__name__)


class Outcome(ColoredStrEnum):
    """Result of an annotate/remove operation."""

    ANNOTATED = ("annotated", chalk.green)
    REMOVED = ("removed", chalk.green)
    UNCHANGED = ("unchanged", chalk.gray)
    MISSING = ("missing", chalk.yellow)
    WOULD_ANNOTATE = ("would annotate", chalk.yellow)
    WOULD_REMOVE = ("would remove", chalk.yellow)


@dataclass(frozen=True)
class OperationResult:
    """What an operation did to the routes file.

    Attributes:
        path (Path): The routes file, as configured.
        outcome (Outcome): What happened.
        original (str): Text read from the file (empty when the file is missing).
        updated (str): Text after the operation (equal to ``original`` when unchanged).
    """

    path: Path
    outcome: Outcome
    original: str = ""
    updated: str = ""

    @property
    def changed(self) -> bool:
        """Whether the operation changed (or would change) the file."""
        return self.original != self.updated

    @property
    def message(self) -> str:
        """The status line reported to the user."""
        match self.outcome:
            case Outcome.ANNOTATED:
                return f"{self.path} annotated."
            case Outcome.REMOVED:
                return f"Removed annotations from {self.path}."
            case Outcome.WOULD_ANNOTATE:
                return f"{self.path} would be annotated."
            case Outcome.WOULD_REMOVE:
                return f"Would remove annotations from {self.path}."
            case Outcome.MISSING:
                return f"Can't find {self.path.name}"
            case _:
                return f"{self.path} unchanged."


def _routes_exist(config: Config) -> bool:
    exists: bool = config.routes_file.is_file()
    if not exists:
        logger.info("Routes file %s does not exist", config.routes_file)
    return exists


def _read_routes(config: Config) -> str:
    """Read the routes file as UTF-8, keeping its line endings as they are on disk.

    Raises:
        RoutesEncodingError: If the file is not valid UTF-8.
    """
    try:
        with open(config.routes_file, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        logger.error("Encoding error while reading %s: %s", config.routes_file, exc)
        raise RoutesEncodingError(config.routes_file, str(exc)) from exc


def _select_sink(config: Config) -> WriteSink:
    if config.dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    return FileSystemSink()


def _report(result: OperationResult, console: ConsoleLike | None) -> OperationResult:
    logger.info("%s: %s", result.path, result.outcome.color(result.outcome.value))
    out: ConsoleLike = console or StdConsole()
    status: str = result.outcome.color(result.message) if out.enable_color else result.message
    out.print(status)
    return result


def _commit(
    config: Config,
    existing_text: str,
    new_content: Document,
    *,
    changed_outcome: Outcome,
    dry_run_outcome: Outcome,
) -> OperationResult:
    written: WriteResult = write_contents(
        config.routes_file, existing_text, new_content, sink=_select_sink(config)
    )
    outcome: Outcome
    if not written.changed:
        outcome = Outcome.UNCHANGED
    elif written.written:
        outcome = changed_outcome
    else:
        outcome = dry_run_outcome
    return OperationResult(
        path=config.routes_file,
        outcome=outcome,
        original=existing_text,
        updated=written.text,
    )


def annotate(
    config: Config,
    *,
    provider: RouteProvider | None = None,
    console: ConsoleLike | None = None,
    now: datetime | None = None,
) -> OperationResult:
    """Insert or refresh the route map annotation in the routes file.

    Args:
        config (Config): Resolved configuration (target file, position, formatting).
        provider (RouteProvider | None): Source of route lines; defaults to running
            ``config.route_command``.
        console (ConsoleLike | None): Where the status line goes (stdout by default).
        now (datetime | None): Time used for the optional timestamp.

    Returns:
        OperationResult: ``ANNOTATED``, ``UNCHANGED``, ``WOULD_ANNOTATE`` or ``MISSING``.

    Raises:
        RouteProviderError: If the route listing command fails.
        MalformedAnnotationError: If the existing annotation is malformed.
        ConfigError: If ``config.ignore_routes`` is not a valid regular expression
            (checked before the route command runs).
        RoutesEncodingError: If the routes file is not valid UTF-8.
    """
    ignore: re.Pattern[str] | None = compile_ignore_pattern(config.ignore_routes)
    if not _routes_exist(config):
        return _report(OperationResult(path=config.routes_file, outcome=Outcome.MISSING), console)

    source: RouteProvider = provider or CommandRouteProvider(command=config.route_command)
    header: Document = build_header(
        source.routes(),
        timestamp=config.timestamp,
        ignore_routes=ignore,
        now=now,
    )

    existing_text: str = _read_routes(config)
    scan: ScanResult = strip_annotations(split_document(existing_text))
    logger.info(
        "%s: existing annotation %s; inserting at %s",
        config.routes_file,
        scan.describe(),
        config.position.value,
    )

    content: Document = merge_for_insert(scan, header, config.position)
    result: OperationResult = _commit(
        config,
        existing_text,
        content,
        changed_outcome=Outcome.ANNOTATED,
        dry_run_outcome=Outcome.WOULD_ANNOTATE,
    )
    return _report(result, console)


def remove(config: Config, *, console: ConsoleLike | None = None) -> OperationResult:
    """Remove the route map annotation from the routes file.

    A block at the top (bottom) of the file takes the blank lines that follow
    (precede) it along; a block in the middle leaves the surrounding blank
    lines in place.

    Args:
        config (Config): Resolved configuration (only the target file and dry-run flag matter).
        console (ConsoleLike | None): Where the status line goes (stdout by default).

    Returns:
        OperationResult: ``REMOVED``, ``UNCHANGED``, ``WOULD_REMOVE`` or ``MISSING``.

    Raises:
        MalformedAnnotationError: If the existing annotation is malformed.
        RoutesEncodingError: If the routes file is not valid UTF-8.
    """
    if not _routes_exist(config):
        return _report(OperationResult(path=config.routes_file, outcome=Outcome.MISSING), console)

    existing_text: str = _read_routes(config)
    scan: ScanResult = strip_annotations(split_document(existing_text))
    logger.info("%s: existing annotation %s", config.routes_file, scan.describe())

    content: Document = trim_for_removal(scan)
    result: OperationResult = _commit(
        config,
        existing_text,
        content,
        changed_outcome=Outcome.REMOVED,
        dry_run_outcome=Outcome.WOULD_REMOVE,
    )
    return _report(result, console)
