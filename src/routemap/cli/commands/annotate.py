# topmark:header:start
#
#   project      : routemap
#   file         : annotate.py
#   file_relpath : src/routemap/cli/commands/annotate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""routemap ``annotate`` command.

Runs the route listing command and inserts (or refreshes) the route map
comment block in the routes file.

Examples:
  Annotate at the bottom of ``config/routes.rb`` (the default):

    $ routemap annotate

  Put the block at the top, with a timestamp, leaving out admin routes:

    $ routemap annotate --position top --timestamp --ignore-routes '^\\s*admin'
"""

from __future__ import annotations

from pathlib import Path

import click

from routemap.cli.cmd_common import build_config, emit_diff, get_console
from routemap.cli.errors import raise_cli_error
from routemap.cli.options import (
    CONTEXT_SETTINGS,
    annotation_formatting_options,
    common_config_options,
    common_write_options,
)
from routemap.config.logging import get_logger
from routemap.config.model import MutableConfig, parse_command
from routemap.errors import RoutemapError
from routemap.operations import annotate

logger = get_logger(__name__)


@click.command(
    name="annotate",
    help="Insert or update the route map comment block in the routes file.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Annotate config/routes.rb at the bottom
  routemap annotate

  # Annotate at the top with a timestamp
  routemap annotate --position top --timestamp
""",
)
@common_config_options
@annotation_formatting_options
@common_write_options
def annotate_command(
    *,
    routes_file: str | None,
    no_config: bool,
    position_in_routes: str | None,
    timestamp: bool | None,
    ignore_routes: str | None,
    route_command: str | None,
    dry_run: bool,
    diff: bool,
) -> None:
    """Insert or update the route map annotation.

    Args:
        routes_file (str | None): Routes file override.
        no_config (bool): Skip config files.
        position_in_routes (str | None): ``before``/``top`` or ``after``/``bottom``.
        timestamp (bool | None): Add an ``(Updated ...)`` suffix to the marker line.
        ignore_routes (str | None): Regular expression of route lines to leave out.
        route_command (str | None): Route listing command (shell-like string).
        dry_run (bool): Do not write the file.
        diff (bool): Print a unified diff of the change.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    try:
        overrides = MutableConfig(
            routes_file=Path(routes_file) if routes_file else None,
            position_in_routes=position_in_routes,
            timestamp=timestamp,
            ignore_routes=ignore_routes,
            route_command=parse_command(route_command) if route_command is not None else None,
            dry_run=dry_run or None,
        )
    except RoutemapError as exc:
        raise_cli_error(exc)
    config = build_config(overrides, no_config=no_config)

    try:
        result = annotate(config, console=console)
    except (RoutemapError, OSError) as exc:
        logger.debug("annotate failed: %r", exc)
        raise_cli_error(exc)

    if diff:
        emit_diff(console, result)
