# topmark:header:start
#
#   project      : routemap
#   file         : version.py
#   file_relpath : src/routemap/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""routemap ``version`` command."""

from __future__ import annotations

import click

from routemap.cli.cmd_common import get_console
from routemap.constants import ROUTEMAP_VERSION


@click.command(
    name="version",
    help="Show the current version of routemap.",
)
def version_command() -> None:
    """Print the installed routemap version."""
    console = get_console(click.get_current_context())
    console.print(console.styled(ROUTEMAP_VERSION, bold=True))
