# topmark:header:start
#
#   project      : routemap
#   file         : __main__.py
#   file_relpath : src/routemap/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running routemap via ``python -m routemap``.

Delegates to [`routemap.cli.main.cli`][routemap.cli.main.cli] so both launch
styles share a single CLI entry point.

Examples:
    Annotate the routes file of the current project::

        python -m routemap annotate --position top
"""

from __future__ import annotations

from routemap.cli.main import cli

if __name__ == "__main__":
    cli()
