# topmark:header:start
#
#   project      : routemap
#   file         : remove.py
#   file_relpath : src/routemap/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""routemap ``remove`` command.

Removes the route map comment block from the routes file.

Examples:
  Preview the removal:

    $ routemap remove --dry-run --diff

  Remove the block:

    $ routemap remove
"""

from __future__ import annotations

from pathlib import Path

import click

from routemap.cli.cmd_common import build_config, emit_diff, get_console
from routemap.cli.errors import raise_cli_error
from routemap.cli.options import CONTEXT_SETTINGS, common_config_options, common_write_options
from routemap.config.logging import get_logger
from routemap.config.model import MutableConfig
from routemap.errors import RoutemapError
from routemap.operations import remove

logger = get_logger(__name__)


@click.command(
    name="remove",
    help="Remove the route map comment block from the routes file.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_write_options
def remove_command(
    *,
    routes_file: str | None,
    no_config: bool,
    dry_run: bool,
    diff: bool,
) -> None:
    """Remove the route map annotation.

    Args:
        routes_file (str | None): Routes file override.
        no_config (bool): Skip config files.
        dry_run (bool): Do not write the file.
        diff (bool): Print a unified diff of the change.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    overrides = MutableConfig(
        routes_file=Path(routes_file) if routes_file else None,
        dry_run=dry_run or None,
    )
    config = build_config(overrides, no_config=no_config)

    try:
        result = remove(config, console=console)
    except (RoutemapError, OSError) as exc:
        logger.debug("remove failed: %r", exc)
        raise_cli_error(exc)

    if diff:
        emit_diff(console, result)
