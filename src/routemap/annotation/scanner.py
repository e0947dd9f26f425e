# topmark:header:start
#
#   project      : routemap
#   file         : scanner.py
#   file_relpath : src/routemap/annotation/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detect and strip a previously inserted route map annotation.

The scanner walks the Document once, switching between two states
([`ScanMode`][routemap.annotation.types.ScanMode]):

- ``CONTENT``: lines are copied to the output, except a route map marker line,
  which is dropped and switches to ``INSIDE_HEADER``.
- ``INSIDE_HEADER``: comment lines are dropped. The first non-comment line ends
  the block and must be exactly empty; it is dropped as well.

A non-empty, non-comment line directly after a block means the annotation was
edited by hand into an inconsistent shape. The scanner raises
[`MalformedAnnotationError`][routemap.errors.MalformedAnnotationError] rather
than guessing where the block ends.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from routemap.annotation.types import Placement, ScanMode, ScanResult
from routemap.config.logging import get_logger
from routemap.errors import MalformedAnnotationError

if TYPE_CHECKING:
    from routemap.annotation.types import Document
    from routemap.config.logging import RoutemapLogger

logger: RoutemapLogger = get_logger(__name__)

HEADER_RE: re.Pattern[str] = re.compile(r"^\s*#\s*== Route.*$")
COMMENT_RE: re.Pattern[str] = re.compile(r"^\s*#")


def classify(found_at: int, content_lines: int) -> Placement:
    """Classify where a marker line was found.

    Args:
        found_at (int): 1-based marker line number (``0`` if not found).
        content_lines (int): Number of lines left after stripping the block.

    Returns:
        Placement: ``NONE`` when nothing was found, ``AFTER`` when the block ran to
        the end of the content (or was the whole file), ``BEFORE`` when it started on
        the first line, ``MIDDLE`` otherwise.
    """
    if found_at == 0:
        return Placement.NONE
    if content_lines == 0:
        return Placement.AFTER
    if found_at == 1:
        return Placement.BEFORE
    if found_at >= content_lines:
        return Placement.AFTER
    return Placement.MIDDLE


def strip_annotations(lines: Document) -> ScanResult:
    """Remove the route map annotation block from a Document.

    Args:
        lines (Document): The file content as a Document.

    Returns:
        ScanResult: The stripped Document and where the block was found.

    Raises:
        MalformedAnnotationError: If the block is followed by a non-empty,
            non-comment line.
    """
    real_content: Document = []
    mode: ScanMode = ScanMode.CONTENT
    header_found_at: int = 0

    for line_number, line in enumerate(lines, start=1):
        if mode is ScanMode.INSIDE_HEADER:
            if COMMENT_RE.match(line):
                continue
            if line != "":
                raise MalformedAnnotationError(line_number, line)
            mode = ScanMode.CONTENT
        elif HEADER_RE.match(line):
            logger.debug("Route map marker found at line %d", line_number)
            header_found_at = line_number
            mode = ScanMode.INSIDE_HEADER
        else:
            real_content.append(line)

    placement: Placement = classify(header_found_at, len(real_content))
    result = ScanResult(lines=real_content, placement=placement, found_at=header_found_at)
    logger.trace(
        "strip_annotations: placement=%s, %d content lines",
        result.describe(),
        len(real_content),
    )
    return result
