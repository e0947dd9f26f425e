# topmark:header:start
#
#   project      : routemap
#   file         : test_annotation_properties.py
#   file_relpath : tests/test_annotation_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for annotate/remove idempotence and round-trips.

Generated routes files are plain code lines (no comments that could be taken
for a route map block), optionally with blank lines and with or without a
final newline.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from routemap.annotation.builder import build_header
from routemap.annotation.scanner import strip_annotations
from routemap.annotation.types import InsertPosition, Placement, split_document
from routemap.annotation.writer import merge_for_insert, render_text, trim_for_removal

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

code_line = st.text(
    alphabet=st.characters(
        categories=("L", "N"), include_characters=" ;.()'_=", max_codepoint=0x7F
    ),
    max_size=20,
)

route_line = st.text(
    alphabet=st.characters(
        categories=("L", "N"), include_characters=" #/_.:()", max_codepoint=0x7F
    ),
    max_size=30,
)

file_text = st.builds(
    lambda lines, final_nl: "\n".join(lines) + ("\n" if final_nl and lines else ""),
    st.lists(code_line, max_size=8),
    st.booleans(),
)

positions = st.sampled_from([InsertPosition.TOP, InsertPosition.BOTTOM])


def annotate_text(text: str, routes: list[str], position: InsertPosition) -> str:
    scan = strip_annotations(split_document(text))
    return render_text(merge_for_insert(scan, build_header(routes), position))


def remove_text(text: str) -> str:
    return render_text(trim_for_removal(strip_annotations(split_document(text))))


@settings(max_examples=200, deadline=None)
@given(text=file_text, routes=st.lists(route_line, max_size=5), position=positions)
def test_annotate_is_idempotent(text: str, routes: list[str], position: InsertPosition) -> None:
    once = annotate_text(text, routes, position)

    assert annotate_text(once, routes, position) == once


@settings(max_examples=200, deadline=None)
@given(text=file_text, routes=st.lists(route_line, max_size=5), position=positions)
def test_single_block_after_annotate(
    text: str, routes: list[str], position: InsertPosition
) -> None:
    once = annotate_text(text, routes, position)

    assert sum(line.startswith("# == Route Map") for line in once.split("\n")) == 1
    if position is InsertPosition.TOP:
        first = next(line for line in once.split("\n") if line != "")
        assert first == "# == Route Map"


@settings(max_examples=200, deadline=None)
@given(text=file_text, routes=st.lists(route_line, max_size=5))
def test_remove_after_bottom_annotate_restores_content(text: str, routes: list[str]) -> None:
    annotated = annotate_text(text, routes, InsertPosition.BOTTOM)
    restored = remove_text(annotated)

    # Equal up to the final newline and trailing blank lines of the original.
    assert restored.rstrip("\n") == text.rstrip("\n")
    assert strip_annotations(split_document(restored)).placement is Placement.NONE


@settings(max_examples=100, deadline=None)
@given(
    text=file_text,
    routes=st.lists(route_line, max_size=5),
    moves=st.lists(positions, min_size=1, max_size=6),
)
def test_moving_block_does_not_accumulate_lines(
    text: str, routes: list[str], moves: list[InsertPosition]
) -> None:
    current = text
    for position in moves:
        current = annotate_text(current, routes, position)

    assert annotate_text(current, routes, moves[-1]) == current
    # Block, one separator, at most one added blank line and the final newline.
    limit = len(text.split("\n")) + len(build_header(routes)) + 3
    assert len(current.split("\n")) <= limit
