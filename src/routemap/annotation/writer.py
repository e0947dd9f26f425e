# topmark:header:start
#
#   project      : routemap
#   file         : writer.py
#   file_relpath : src/routemap/annotation/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge an annotation block into stripped content and commit the result.

Merging is pure (Document in, Document out). Committing goes through a
[`WriteSink`][routemap.annotation.writer.WriteSink]: the filesystem sink
rewrites the file in place, the null sink (dry run) writes nothing. In both
cases the new text is computed in full before the sink is consulted, and the
sink is skipped when the text is unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from routemap.annotation.types import InsertPosition, Placement, join_document
from routemap.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from routemap.annotation.types import Document, ScanResult
    from routemap.config.logging import RoutemapLogger

logger: RoutemapLogger = get_logger(__name__)


def merge_for_insert(scan: ScanResult, header: Document, position: InsertPosition) -> Document:
    """Combine stripped content with a new annotation block.

    Bottom insertion keeps exactly one blank line between the content and the
    block. When the block moves from the top to the bottom, the blank spacer a
    previous top insertion left behind is dropped.

    Top insertion follows the block with a blank line unless the content
    already starts with one; the spacer is always added when a block was
    removed in this run, so repeated runs produce the same text.

    Args:
        scan (ScanResult): Stripped content and where the old block was found.
        header (Document): The new annotation block.
        position (InsertPosition): Where to put the block.

    Returns:
        Document: The merged content (not yet terminated by a final empty line).
    """
    content: Document = list(scan.lines)

    if position is InsertPosition.BOTTOM:
        if not content or content[-1] != "":
            content.append("")
        if scan.placement is Placement.BEFORE and content and content[0] == "":
            content.pop(0)
        return content + header

    block: Document = list(header)
    if not content or content[0] != "" or scan.found:
        block.append("")
    return block + content


def trim_for_removal(scan: ScanResult) -> Document:
    """Drop the blank lines a removed block leaves at the edge of the file.

    A block removed from the middle of the file keeps its surrounding blank
    lines as they were.
    """
    content: Document = list(scan.lines)
    if scan.placement is Placement.BEFORE:
        while content and content[0] == "":
            content.pop(0)
    elif scan.placement is Placement.AFTER:
        while content and content[-1] == "":
            content.pop()
    return content


def render_text(lines: Document) -> str:
    """Join a Document into text that ends with a single newline.

    The empty Document renders as the empty text.
    """
    if not lines:
        return ""
    if lines[-1] != "":
        lines = [*lines, ""]
    return join_document(lines)


@dataclass(frozen=True)
class WriteResult:
    """Result of committing new content.

    Attributes:
        changed (bool): Whether the new text differs from the original text.
        written (bool): Whether the new text was written to the file.
        text (str): The new text.
    """

    changed: bool
    written: bool
    text: str


class WriteSink(Protocol):
    """Destination for updated routes file content."""

    def write(self, path: Path, text: str) -> bool:
        """Write ``text`` to ``path``; return whether anything was written."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, path: Path, text: str) -> bool:
        """No-op write for dry-run mode."""
        logger.debug("NullSink: not writing %d characters to %s", len(text), path)
        return False


class FileSystemSink:
    """Filesystem sink that rewrites the file in place."""

    def write(self, path: Path, text: str) -> bool:
        """Overwrite ``path`` with ``text`` (UTF-8, no newline translation).

        Args:
            path (Path): Target file.
            text (str): Full new content.

        Returns:
            bool: Always True.
        """
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.debug("FileSystemSink: wrote %d bytes to %s", len(text.encode("utf-8")), path)
        return True


def write_contents(
    path: Path,
    existing_text: str,
    new_content: Document,
    *,
    sink: WriteSink | None = None,
) -> WriteResult:
    """Render ``new_content`` and write it when it differs from ``existing_text``.

    Args:
        path (Path): Target file.
        existing_text (str): The text read at the start of the operation.
        new_content (Document): The merged Document.
        sink (WriteSink | None): Where to write; defaults to the filesystem.

    Returns:
        WriteResult: Change verdict, whether a write happened, and the new text.
    """
    new_text: str = render_text(new_content)
    if new_text == existing_text:
        logger.info("%s: content unchanged, nothing to write", path)
        return WriteResult(changed=False, written=False, text=new_text)

    written: bool = (sink or FileSystemSink()).write(path, new_text)
    return WriteResult(changed=True, written=written, text=new_text)
