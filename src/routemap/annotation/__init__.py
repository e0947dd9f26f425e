# topmark:header:start
#
#   project      : routemap
#   file         : __init__.py
#   file_relpath : src/routemap/annotation/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Route map annotation primitives: scanning, building and merging.

These functions are pure apart from
[`write_contents`][routemap.annotation.writer.write_contents]; the operations
in [`routemap.operations`][routemap.operations] compose them.
"""

from __future__ import annotations

from routemap.annotation.builder import build_header
from routemap.annotation.scanner import strip_annotations
from routemap.annotation.types import (
    Document,
    InsertPosition,
    Placement,
    ScanMode,
    ScanResult,
    join_document,
    split_document,
)
from routemap.annotation.writer import (
    merge_for_insert,
    render_text,
    trim_for_removal,
    write_contents,
)

__all__ = [
    "Document",
    "InsertPosition",
    "Placement",
    "ScanMode",
    "ScanResult",
    "build_header",
    "join_document",
    "merge_for_insert",
    "render_text",
    "split_document",
    "strip_annotations",
    "trim_for_removal",
    "write_contents",
]
