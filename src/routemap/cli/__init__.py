# topmark:header:start
#
#   project      : routemap
#   file         : __init__.py
#   file_relpath : src/routemap/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for routemap.

The console script ``routemap`` maps to [`routemap.cli.main.cli`][routemap.cli.main.cli].
"""

from __future__ import annotations
