# -*- coding: utf-8 -*-
"""Tests for config persistence and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dahueditor.config import get_default_config, load_config, save_config, validate_config
from dahueditor.errors import ConfigError


@pytest.fixture
def default_config() -> dict:
    return get_default_config()


def test_default_config_has_all_keys(default_config: dict) -> None:
    assert {"hotkeys", "project", "capture", "logging", "default_project_dir"}.issubset(default_config.keys())
    assert default_config["hotkeys"] == {"capture": "F7", "exit": "Escape"}
    assert default_config["project"]["document_name"] == "presentation.dahu"


def test_default_config_is_a_copy() -> None:
    first = get_default_config()
    first["hotkeys"]["capture"] = "F9"
    assert get_default_config()["hotkeys"]["capture"] == "F7"


def test_load_missing_file_returns_defaults(tmp_path: Path, default_config: dict) -> None:
    assert load_config(tmp_path / "settings.json") == default_config


def test_save_and_load_round_trip(tmp_path: Path, default_config: dict) -> None:
    target = tmp_path / "settings.json"
    default_config["hotkeys"]["capture"] = "F9"
    default_config["default_project_dir"] = str(tmp_path / "deck")
    save_config(default_config, target)
    loaded = load_config(target)
    assert loaded["hotkeys"]["capture"] == "F9"
    assert loaded["default_project_dir"] == str(tmp_path / "deck")


def test_partial_file_is_merged_into_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"hotkeys": {"exit": "Q"}}), encoding="utf-8")
    loaded = load_config(target)
    assert loaded["hotkeys"] == {"capture": "F7", "exit": "Q"}
    assert loaded["capture"]["image_format"] == "png"


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(target)


@pytest.mark.parametrize(
    ("section", "key", "value"),
    [
        ("hotkeys", "capture", ""),
        ("hotkeys", "exit", None),
        ("hotkeys", "exit", "f7"),
        ("project", "document_name", ""),
        ("project", "document_name", "sub/presentation.dahu"),
        ("capture", "image_format", "gif"),
    ],
)
def test_invalid_values_rejected(default_config: dict, section: str, key: str, value) -> None:
    default_config[section][key] = value
    with pytest.raises(ConfigError):
        validate_config(default_config)


def test_default_project_dir_must_be_string(default_config: dict) -> None:
    default_config["default_project_dir"] = 42
    with pytest.raises(ConfigError):
        validate_config(default_config)


def test_save_rejects_invalid_config(tmp_path: Path, default_config: dict) -> None:
    default_config["capture"]["image_format"] = "bmp"
    target = tmp_path / "settings.json"
    with pytest.raises(ConfigError):
        save_config(default_config, target)
    assert not target.exists()


def test_logging_defaults(default_config: dict) -> None:
    assert default_config["logging"] == {"level": "INFO", "dir": "logs"}


@pytest.mark.parametrize("logging_settings", [{"level": "VERBOSE"}, {"dir": ""}, {"dir": None}])
def test_invalid_logging_settings_rejected(default_config: dict, logging_settings: dict) -> None:
    default_config["logging"].update(logging_settings)
    with pytest.raises(ConfigError):
        validate_config(default_config)
