# topmark:header:start
#
#   project      : routemap
#   file         : io.py
#   file_relpath : src/routemap/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O for routemap configuration (tomlkit-based).

Two sources are consulted in the working directory, lowest precedence first:

1. ``pyproject.toml``, table ``[tool.routemap]``
2. ``routemap.toml``, top-level keys
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from routemap.config.logging import get_logger
from routemap.config.model import MutableConfig
from routemap.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION, ROUTEMAP_TOML_NAME
from routemap.errors import ConfigError

logger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Error loading TOML from {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_pyproject_table(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.routemap]`` table of a parsed pyproject, if present."""
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def load_project_config(root: Path | None = None) -> MutableConfig:
    """Collect routemap settings from the config files in ``root``.

    Args:
        root (Path | None): Directory to look in (defaults to the working directory).

    Returns:
        MutableConfig: Partial configuration; unset values stay ``None``.
    """
    base: Path = root or Path.cwd()
    draft = MutableConfig()

    pyproject: Path = base / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        table: TomlTable | None = extract_pyproject_table(load_toml_dict(pyproject))
        if table is not None:
            logger.debug("Loading [tool.%s] from %s", PYPROJECT_TOOL_SECTION, pyproject)
            draft.merge_with(MutableConfig.from_mapping(table, source=pyproject))

    routemap_toml: Path = base / ROUTEMAP_TOML_NAME
    if routemap_toml.is_file():
        logger.debug("Loading %s", routemap_toml)
        draft.merge_with(
            MutableConfig.from_mapping(load_toml_dict(routemap_toml), source=routemap_toml)
        )

    return draft
