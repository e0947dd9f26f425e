# topmark:header:start
#
#   project      : routemap
#   file         : cmd_common.py
#   file_relpath : src/routemap/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the routemap commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from routemap.cli.errors import raise_cli_error
from routemap.config import resolve_config
from routemap.config.logging import get_logger
from routemap.errors import ConfigError
from routemap.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from routemap.config.model import Config, MutableConfig
    from routemap.console_api import ConsoleLike
    from routemap.operations import OperationResult

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console created by the group callback."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def build_config(overrides: MutableConfig, *, no_config: bool) -> Config:
    """Resolve the effective configuration, translating errors for the CLI.

    Args:
        overrides (MutableConfig): Values given on the command line.
        no_config (bool): Skip config files.

    Returns:
        Config: The frozen configuration.
    """
    try:
        config: Config = resolve_config(overrides, root=Path.cwd(), no_config=no_config)
    except ConfigError as exc:
        raise_cli_error(exc)
    logger.debug("Effective config: %s", config)
    return config


def emit_diff(console: ConsoleLike, result: OperationResult) -> None:
    """Print a colorized unified diff when the operation changed the file."""
    if not result.changed:
        return
    patch: str = unified_diff(result.original, result.updated, path=str(result.path))
    console.print(render_patch(patch), nl=False)
