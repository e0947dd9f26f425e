# topmark:header:start
#
#   project      : routemap
#   file         : options.py
#   file_relpath : src/routemap/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for the routemap commands.

Reusable option groups live here so the command modules stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from routemap.cli.errors import RoutemapUsageError
from routemap.config.logging import TRACE_LEVEL
from routemap.config.model import POSITION_CHOICES

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def resolve_verbosity(verbose_count: int, quiet_count: int = 0) -> int | None:
    """Map the number of ``-v`` flags to a logging level.

    Args:
        verbose_count (int): Number of times ``-v`` was given.
        quiet_count (int): Number of times ``-q`` was given.

    Returns:
        int | None: ``None`` without ``-v`` (keep the environment/default level),
        INFO for ``-v``, DEBUG for ``-vv``, TRACE for ``-vvv`` or more.

    Raises:
        RoutemapUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RoutemapUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive) to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v info, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress status lines and diffs (errors are still shown).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color`` to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the target file and config-file options shared by all file commands."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Ignore [tool.routemap] in pyproject.toml and routemap.toml.",
    )(f)
    f = click.option(
        "--routes-file",
        "routes_file",
        type=click.Path(dir_okay=False),
        default=None,
        help="Routes file to update (default: config/routes.rb).",
    )(f)
    return f


def common_write_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dry-run`` and ``--diff``."""
    f = click.option(
        "--diff",
        is_flag=True,
        default=False,
        help="Show a unified diff of the change.",
    )(f)
    f = click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        default=False,
        help="Report what would change without writing the file.",
    )(f)
    return f


def annotation_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options that shape the annotation block."""
    f = click.option(
        "--command",
        "route_command",
        default=None,
        metavar="CMD",
        help="Command printing the route table (default: 'rake routes').",
    )(f)
    f = click.option(
        "--ignore-routes",
        "ignore_routes",
        default=None,
        metavar="PATTERN",
        help="Regular expression; route lines matching it are left out.",
    )(f)
    f = click.option(
        "--timestamp/--no-timestamp",
        "timestamp",
        default=None,
        help="Add '(Updated YYYY-MM-DD HH:MM)' to the marker line.",
    )(f)
    f = click.option(
        "--position",
        "--position-in-routes",
        "position_in_routes",
        type=click.Choice(POSITION_CHOICES, case_sensitive=False),
        default=None,
        help="Where the annotation goes (default: bottom).",
    )(f)
    return f
