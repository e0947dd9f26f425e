# topmark:header:start
#
#   project      : routemap
#   file         : model.py
#   file_relpath : src/routemap/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for routemap.

`MutableConfig` collects values from defaults, config files and command-line
overrides; `freeze()` validates it into an immutable `Config` that is passed
explicitly to every operation.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

from routemap.annotation.types import InsertPosition
from routemap.config.logging import get_logger
from routemap.constants import DEFAULT_ROUTE_COMMAND, DEFAULT_ROUTES_FILE
from routemap.errors import ConfigError

logger = get_logger(__name__)

POSITION_CHOICES: tuple[str, ...] = ("before", "top", "after", "bottom")

CONFIG_KEYS: frozenset[str] = frozenset(
    {"routes_file", "position_in_routes", "timestamp", "ignore_routes", "route_command"}
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        routes_file (Path): The routes file to annotate (relative to the working directory).
        position (InsertPosition): Where the annotation block goes.
        timestamp (bool): Whether the marker line carries an ``(Updated ...)`` suffix.
        ignore_routes (str | None): Regular expression of route lines to leave out.
        route_command (tuple[str, ...]): Command that prints the route listing.
        dry_run (bool): Compute and report changes without writing.
        config_files (tuple[Path, ...]): Config files that contributed values.
    """

    routes_file: Path = DEFAULT_ROUTES_FILE
    position: InsertPosition = InsertPosition.BOTTOM
    timestamp: bool = False
    ignore_routes: str | None = None
    route_command: tuple[str, ...] = DEFAULT_ROUTE_COMMAND
    dry_run: bool = False
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            routes_file=self.routes_file,
            position_in_routes=self.position.value,
            timestamp=self.timestamp,
            ignore_routes=self.ignore_routes,
            route_command=list(self.route_command),
            dry_run=self.dry_run,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while merging config sources.

    ``None`` means "not set by this source"; `merge_with` lets a later source
    override only what it sets.
    """

    routes_file: Path | None = None
    position_in_routes: str | None = None
    timestamp: bool | None = None
    ignore_routes: str | None = None
    route_command: list[str] | None = None
    dry_run: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return Config().thaw()

    @classmethod
    def from_mapping(cls, data: dict[str, Any], *, source: Path | None = None) -> MutableConfig:
        """Build a (partial) config from a parsed TOML table.

        Args:
            data (dict[str, Any]): Table with routemap keys.
            source (Path | None): File the table came from (for diagnostics).

        Returns:
            MutableConfig: The values present in ``data``; others stay ``None``.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        where: str = f" in {source}" if source else ""
        for key in sorted(set(data) - CONFIG_KEYS):
            logger.warning("Ignoring unknown routemap setting %r%s", key, where)

        draft = cls(config_files=[source] if source else [])

        routes_file = data.get("routes_file")
        if routes_file is not None:
            if not isinstance(routes_file, str):
                raise ConfigError(f"routes_file must be a string{where}")
            draft.routes_file = Path(routes_file)

        position = data.get("position_in_routes")
        if position is not None:
            if not isinstance(position, str):
                raise ConfigError(f"position_in_routes must be a string{where}")
            draft.position_in_routes = position

        timestamp = data.get("timestamp")
        if timestamp is not None:
            if not isinstance(timestamp, bool):
                raise ConfigError(f"timestamp must be a boolean{where}")
            draft.timestamp = timestamp

        ignore_routes = data.get("ignore_routes")
        if ignore_routes is not None:
            if not isinstance(ignore_routes, str):
                raise ConfigError(f"ignore_routes must be a string{where}")
            draft.ignore_routes = ignore_routes

        command = data.get("route_command")
        if command is not None:
            draft.route_command = parse_command(command, where=where)

        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Override this config with the values set in ``other`` (in place).

        Args:
            other (MutableConfig): The higher-precedence source.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if other.routes_file is not None:
            self.routes_file = other.routes_file
        if other.position_in_routes is not None:
            self.position_in_routes = other.position_in_routes
        if other.timestamp is not None:
            self.timestamp = other.timestamp
        if other.ignore_routes is not None:
            self.ignore_routes = other.ignore_routes
        if other.route_command is not None:
            self.route_command = list(other.route_command)
        if other.dry_run is not None:
            self.dry_run = other.dry_run
        self.config_files.extend(other.config_files)
        return self

    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable `Config`.

        Raises:
            ConfigError: If ``position_in_routes`` is not a known position.
        """
        position: str | None = self.position_in_routes
        if position is not None and position.strip().lower() not in POSITION_CHOICES:
            raise ConfigError(
                f"Invalid position_in_routes {position!r} "
                f"(expected one of: {', '.join(POSITION_CHOICES)})"
            )
        return Config(
            routes_file=self.routes_file or DEFAULT_ROUTES_FILE,
            position=InsertPosition.parse(position),
            timestamp=bool(self.timestamp),
            ignore_routes=self.ignore_routes,
            route_command=tuple(
                self.route_command if self.route_command is not None else DEFAULT_ROUTE_COMMAND
            ),
            dry_run=bool(self.dry_run),
            config_files=tuple(self.config_files),
        )


def parse_command(value: object, *, where: str = "") -> list[str]:
    """Normalize a route command given as a shell-like string or a list of strings.

    Raises:
        ConfigError: If the value is neither, or is empty.
    """
    parts: list[str] | None = None
    if isinstance(value, str):
        parts = shlex.split(value)
    elif isinstance(value, list):
        items: list[object] = cast("list[object]", value)
        if all(isinstance(v, str) for v in items):
            parts = [str(v) for v in items]
    if parts is None:
        raise ConfigError(f"route_command must be a string or a list of strings{where}")
    if not parts:
        raise ConfigError(f"route_command must not be empty{where}")
    return parts
