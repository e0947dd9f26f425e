# topmark:header:start
#
#   project      : routemap
#   file         : types.py
#   file_relpath : src/routemap/annotation/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Types shared by the annotation scanner, builder and writer.

A *Document* is the file content split on ``"\\n"``: a list of lines without
their newline, where a trailing ``""`` records that the text ended with a
newline. The empty text is the empty Document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Document = list[str]


def split_document(text: str) -> Document:
    """Split text into a Document, keeping a trailing empty line.

    Args:
        text (str): File content.

    Returns:
        Document: Lines without newlines; ``[]`` for the empty text.
    """
    if not text:
        return []
    return text.split("\n")


def join_document(lines: Document) -> str:
    """Join a Document back into text (inverse of `split_document`)."""
    return "\n".join(lines)


class ScanMode(Enum):
    """State of the annotation scanner."""

    CONTENT = "content"
    INSIDE_HEADER = "inside_header"


class Placement(Enum):
    """Where a previously inserted annotation block was found."""

    NONE = "none"
    BEFORE = "before"
    AFTER = "after"
    MIDDLE = "middle"


class InsertPosition(Enum):
    """Where a new annotation block is inserted."""

    TOP = "top"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, value: str | None) -> InsertPosition:
        """Map a ``position_in_routes`` value to an insert position.

        ``"before"`` and ``"top"`` select the top of the file; every other value,
        including ``None``, selects the bottom.

        Args:
            value (str | None): Raw option value.

        Returns:
            InsertPosition: The resolved position.
        """
        if value is not None and value.strip().lower() in ("before", "top"):
            return cls.TOP
        return cls.BOTTOM


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning a Document for an annotation block.

    Attributes:
        lines (Document): The Document with the annotation block removed.
        placement (Placement): Where the block was found.
        found_at (int): 1-based line number of the marker line, ``0`` when no block was found.
    """

    lines: Document
    placement: Placement
    found_at: int = 0

    @property
    def found(self) -> bool:
        """Whether an annotation block was removed."""
        return self.placement is not Placement.NONE

    def describe(self) -> str:
        """Return a short human-readable placement description (for logs)."""
        if self.placement is Placement.MIDDLE:
            return f"middle-at-{self.found_at}"
        return self.placement.value
