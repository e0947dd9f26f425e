# topmark:header:start
#
#   project      : routemap
#   file         : diff.py
#   file_relpath : src/routemap/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering for routes file changes."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from routemap.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def unified_diff(original: str, updated: str, *, path: str) -> str:
    """Return a unified diff between two versions of a file.

    Args:
        original (str): Text before the change.
        updated (str): Text after the change.
        path (str): File name used in the ``---``/``+++`` headers.

    Returns:
        str: The diff text (empty when both versions are identical).
    """
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        updated.splitlines(keepends=True),
        fromfile=f"{path} (current)",
        tofile=f"{path} (updated)",
        n=3,
    )
    return "".join(diff)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as either a sequence of lines or a single multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
