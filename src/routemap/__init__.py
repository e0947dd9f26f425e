# topmark:header:start
#
#   project      : routemap
#   file         : __init__.py
#   file_relpath : src/routemap/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""routemap package.

routemap keeps a generated route map comment block in a routes configuration
file. It runs an external route-listing command, formats the output as a
comment block, and inserts (or replaces, or removes) that block at the top or
bottom of the file without disturbing the rest of its content.
"""

from __future__ import annotations

from routemap.operations import Outcome, OperationResult, annotate, remove

__all__ = [
    "Outcome",
    "OperationResult",
    "annotate",
    "remove",
]
