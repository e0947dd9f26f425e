# topmark:header:start
#
#   project      : routemap
#   file         : main.py
#   file_relpath : src/routemap/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""routemap CLI entry point.

Group-level options (verbosity, color) are initialized once and stored in
``ctx.obj``; subcommands pick up the console from there.
"""

from __future__ import annotations

import click

from routemap.cli.commands.annotate import annotate_command
from routemap.cli.commands.remove import remove_command
from routemap.cli.commands.version import version_command
from routemap.cli.console import ClickConsole
from routemap.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from routemap.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize logging and the program-output console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    # -v wins over ROUTEMAP_LOG_LEVEL; neither means CRITICAL only.
    level: int | None = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color, quiet=quiet > 0)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Keep a route map comment block in your routes file.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the routemap CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'routemap annotate' to update config/routes.rb.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(annotate_command)
cli.add_command(remove_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
