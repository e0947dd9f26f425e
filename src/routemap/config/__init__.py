# topmark:header:start
#
#   project      : routemap
#   file         : __init__.py
#   file_relpath : src/routemap/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for routemap.

Public surface:
    - [`Config`][routemap.config.model.Config]: immutable runtime configuration.
    - [`MutableConfig`][routemap.config.model.MutableConfig]: builder used while merging.
    - [`resolve_config`][routemap.config.resolve_config]: defaults < config files < overrides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from routemap.config.io import load_project_config
from routemap.config.model import Config, MutableConfig

if TYPE_CHECKING:
    from pathlib import Path


def resolve_config(
    overrides: MutableConfig | None = None,
    *,
    root: Path | None = None,
    no_config: bool = False,
) -> Config:
    """Merge defaults, project config files and explicit overrides.

    Args:
        overrides (MutableConfig | None): Highest-precedence values (e.g. CLI options).
        root (Path | None): Directory holding the config files (defaults to the working directory).
        no_config (bool): Skip config files entirely.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If a config file or override is invalid.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if not no_config:
        draft.merge_with(load_project_config(root))
    if overrides is not None:
        draft.merge_with(overrides)
    return draft.freeze()


__all__ = [
    "Config",
    "MutableConfig",
    "load_project_config",
    "resolve_config",
]
