# topmark:header:start
#
#   project      : routemap
#   file         : __init__.py
#   file_relpath : src/routemap/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""routemap subcommands."""

from __future__ import annotations
