# topmark:header:start
#
#   project      : routemap
#   file         : constants.py
#   file_relpath : src/routemap/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""routemap constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path

try:
    ROUTEMAP_VERSION: str = get_version("routemap")
except PackageNotFoundError:
    ROUTEMAP_VERSION = "0.0.0"

# Marker line of the annotation block
ROUTE_MAP_PREFIX: str = "# == Route Map"

# Format of the optional "(Updated ...)" suffix on the marker line
TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M"

DEFAULT_ROUTES_FILE: Path = Path("config") / "routes.rb"
DEFAULT_ROUTE_COMMAND: tuple[str, ...] = ("rake", "routes")

PYPROJECT_TOML_NAME: str = "pyproject.toml"
ROUTEMAP_TOML_NAME: str = "routemap.toml"
PYPROJECT_TOOL_SECTION: str = "routemap"

LOG_LEVEL_ENV_VAR: str = "ROUTEMAP_LOG_LEVEL"
