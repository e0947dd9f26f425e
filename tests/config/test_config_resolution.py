# topmark:header:start
#
#   project      : routemap
#   file         : test_config_resolution.py
#   file_relpath : tests/config/test_config_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model, TOML loading and precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from routemap.annotation.types import InsertPosition
from routemap.config import MutableConfig, resolve_config
from routemap.config.io import load_project_config, load_toml_dict
from routemap.config.model import Config, parse_command
from routemap.constants import DEFAULT_ROUTE_COMMAND, DEFAULT_ROUTES_FILE
from routemap.errors import ConfigError


def test_defaults(tmp_path: Path) -> None:
    config = resolve_config(root=tmp_path)

    assert config == Config()
    assert config.routes_file == DEFAULT_ROUTES_FILE
    assert config.position is InsertPosition.BOTTOM
    assert config.timestamp is False
    assert config.ignore_routes is None
    assert config.route_command == DEFAULT_ROUTE_COMMAND


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, InsertPosition.BOTTOM),
        ("before", InsertPosition.TOP),
        ("top", InsertPosition.TOP),
        ("after", InsertPosition.BOTTOM),
        ("bottom", InsertPosition.BOTTOM),
        (" Top ", InsertPosition.TOP),
    ],
)
def test_position_parsing(raw: str | None, expected: InsertPosition) -> None:
    assert MutableConfig(position_in_routes=raw).freeze().position is expected


def test_invalid_position_is_rejected() -> None:
    with pytest.raises(ConfigError, match="position_in_routes"):
        MutableConfig(position_in_routes="sideways").freeze()


def test_pyproject_table_is_loaded(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n'
        "[tool.routemap]\n"
        'routes_file = "app/routes.rb"\n'
        'position_in_routes = "top"\n'
        "timestamp = true\n"
        'ignore_routes = "^admin"\n'
        'route_command = "bin/rails routes --expanded"\n',
        encoding="utf-8",
    )

    config = resolve_config(root=tmp_path)

    assert config.routes_file == Path("app/routes.rb")
    assert config.position is InsertPosition.TOP
    assert config.timestamp is True
    assert config.ignore_routes == "^admin"
    assert config.route_command == ("bin/rails", "routes", "--expanded")
    assert config.config_files == (tmp_path / "pyproject.toml",)


def test_routemap_toml_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.routemap]\nposition_in_routes = "top"\ntimestamp = true\n', encoding="utf-8"
    )
    (tmp_path / "routemap.toml").write_text(
        'position_in_routes = "bottom"\nroute_command = ["rails", "routes"]\n', encoding="utf-8"
    )

    config = resolve_config(root=tmp_path)

    assert config.position is InsertPosition.BOTTOM
    assert config.timestamp is True
    assert config.route_command == ("rails", "routes")


def test_overrides_win_over_files(tmp_path: Path) -> None:
    (tmp_path / "routemap.toml").write_text('position_in_routes = "top"\n', encoding="utf-8")

    config = resolve_config(MutableConfig(position_in_routes="after"), root=tmp_path)

    assert config.position is InsertPosition.BOTTOM


def test_no_config_skips_files(tmp_path: Path) -> None:
    (tmp_path / "routemap.toml").write_text('position_in_routes = "top"\n', encoding="utf-8")

    config = resolve_config(root=tmp_path, no_config=True)

    assert config.position is InsertPosition.BOTTOM
    assert config.config_files == ()


def test_pyproject_without_table_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert load_project_config(tmp_path) == MutableConfig()


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    (tmp_path / "routemap.toml").write_text('colour = "blue"\ntimestamp = true\n', "utf-8")

    assert resolve_config(root=tmp_path).timestamp is True


@pytest.mark.parametrize(
    "toml_text, message",
    [
        ("timestamp = 'yes'\n", "timestamp"),
        ("routes_file = 3\n", "routes_file"),
        ("route_command = [1, 2]\n", "route_command"),
        ("route_command = ''\n", "route_command"),
        ("ignore_routes = false\n", "ignore_routes"),
        ("position_in_routes = 1\n", "position_in_routes"),
    ],
)
def test_invalid_values(tmp_path: Path, toml_text: str, message: str) -> None:
    (tmp_path / "routemap.toml").write_text(toml_text, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        resolve_config(root=tmp_path)


def test_invalid_toml_is_a_config_error(tmp_path: Path) -> None:
    bad = tmp_path / "routemap.toml"
    bad.write_text("timestamp = = true\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="decoding"):
        load_toml_dict(bad)


def test_thaw_freeze_roundtrip() -> None:
    config = MutableConfig(
        routes_file=Path("r.rb"), position_in_routes="top", timestamp=True, dry_run=True
    ).freeze()

    assert config.thaw().freeze() == config


def test_parse_command() -> None:
    assert parse_command("rake routes") == ["rake", "routes"]
    assert parse_command(["bin/rails", "routes"]) == ["bin/rails", "routes"]
    with pytest.raises(ConfigError):
        parse_command(42)
