# topmark:header:start
#
#   project      : routemap
#   file         : test_writer.py
#   file_relpath : tests/annotation/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge, trimming and write-back rules for annotation blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from routemap.annotation.types import InsertPosition, Placement, ScanResult
from routemap.annotation.writer import (
    FileSystemSink,
    NullSink,
    merge_for_insert,
    render_text,
    trim_for_removal,
    write_contents,
)

if TYPE_CHECKING:
    from pathlib import Path

HEADER = ["# == Route Map", "#", "# r"]


def result(
    lines: list[str], placement: Placement = Placement.NONE, found_at: int = 0
) -> ScanResult:
    if placement is not Placement.NONE and found_at == 0:
        found_at = 1
    return ScanResult(lines=lines, placement=placement, found_at=found_at)


class TestMergeBottom:
    def test_adds_blank_separator(self) -> None:
        merged = merge_for_insert(result(["a"]), HEADER, InsertPosition.BOTTOM)

        assert merged == ["a", "", *HEADER]

    def test_keeps_single_existing_blank(self) -> None:
        merged = merge_for_insert(result(["a", ""]), HEADER, InsertPosition.BOTTOM)

        assert merged == ["a", "", *HEADER]

    def test_empty_content(self) -> None:
        merged = merge_for_insert(result([]), HEADER, InsertPosition.BOTTOM)

        assert merged == ["", *HEADER]

    def test_moving_from_top_drops_spacer(self) -> None:
        scan = result(["", "a", ""], Placement.BEFORE)

        merged = merge_for_insert(scan, HEADER, InsertPosition.BOTTOM)

        assert merged == ["a", "", *HEADER]

    def test_leading_blank_kept_when_not_moving_from_top(self) -> None:
        scan = result(["", "a", ""], Placement.AFTER, found_at=4)

        merged = merge_for_insert(scan, HEADER, InsertPosition.BOTTOM)

        assert merged == ["", "a", "", *HEADER]


class TestMergeTop:
    def test_adds_blank_after_header(self) -> None:
        merged = merge_for_insert(result(["a", ""]), HEADER, InsertPosition.TOP)

        assert merged == [*HEADER, "", "a", ""]

    def test_no_extra_blank_when_content_starts_blank(self) -> None:
        merged = merge_for_insert(result(["", "a", ""]), HEADER, InsertPosition.TOP)

        assert merged == [*HEADER, "", "a", ""]

    def test_blank_always_added_when_block_was_removed(self) -> None:
        scan = result(["", "a", ""], Placement.AFTER, found_at=3)

        merged = merge_for_insert(scan, HEADER, InsertPosition.TOP)

        assert merged == [*HEADER, "", "", "a", ""]

    def test_header_is_not_mutated(self) -> None:
        header = list(HEADER)
        merge_for_insert(result(["a"]), header, InsertPosition.TOP)

        assert header == HEADER


@pytest.mark.parametrize(
    "placement, lines, expected",
    [
        (Placement.BEFORE, ["", "", "a", ""], ["a", ""]),
        (Placement.AFTER, ["a", "", ""], ["a"]),
        (Placement.MIDDLE, ["a", "", "", "b", ""], ["a", "", "", "b", ""]),
        (Placement.NONE, ["", "a", ""], ["", "a", ""]),
        (Placement.AFTER, [], []),
    ],
)
def test_trim_for_removal(placement: Placement, lines: list[str], expected: list[str]) -> None:
    assert trim_for_removal(result(lines, placement)) == expected


@pytest.mark.parametrize(
    "lines, expected",
    [
        (["a"], "a\n"),
        (["a", ""], "a\n"),
        (["a", "", ""], "a\n\n"),
        ([""], ""),
        ([], ""),
    ],
)
def test_render_text(lines: list[str], expected: str) -> None:
    assert render_text(lines) == expected


def test_write_contents_unchanged_does_not_write(tmp_path: Path) -> None:
    f = tmp_path / "routes.rb"
    f.write_text("a\n", encoding="utf-8")
    mtime = f.stat().st_mtime_ns

    outcome = write_contents(f, "a\n", ["a", ""])

    assert not outcome.changed
    assert not outcome.written
    assert f.stat().st_mtime_ns == mtime


def test_write_contents_changed_writes_once(tmp_path: Path) -> None:
    f = tmp_path / "routes.rb"
    f.write_text("a\n", encoding="utf-8")

    outcome = write_contents(f, "a\n", ["a", "", *HEADER])

    assert outcome.changed and outcome.written
    assert f.read_bytes() == b"a\n\n# == Route Map\n#\n# r\n"


def test_write_contents_null_sink(tmp_path: Path) -> None:
    f = tmp_path / "routes.rb"
    f.write_text("a\n", encoding="utf-8")

    outcome = write_contents(f, "a\n", ["b"], sink=NullSink())

    assert outcome.changed
    assert not outcome.written
    assert outcome.text == "b\n"
    assert f.read_text(encoding="utf-8") == "a\n"


def test_filesystem_sink_does_not_translate_newlines(tmp_path: Path) -> None:
    f = tmp_path / "routes.rb"

    assert FileSystemSink().write(f, "a\nb\n")
    assert f.read_bytes() == b"a\nb\n"
