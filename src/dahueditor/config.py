# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Any

from dahueditor.constants import DEFAULT_HOTKEYS, DEFAULT_SETTINGS_FILE, IMAGE_FORMATS, PROJECT_DOCUMENT_NAME
from dahueditor.errors import ConfigError
from dahueditor.utils.file_utils import read_text_file, write_text_file


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

DEFAULT_CONFIG: dict[str, Any] = {
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
    "project": {"document_name": PROJECT_DOCUMENT_NAME},
    "capture": {"image_format": "png"},
    "logging": {"level": "INFO", "dir": "logs"},
    "default_project_dir": None,
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the editor relies on."""
    hotkeys = config.get("hotkeys", {})
    capture_key = hotkeys.get("capture")
    exit_key = hotkeys.get("exit")
    for name, value in (("capture", capture_key), ("exit", exit_key)):
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"hotkeys.{name} must be a non-empty string", operation="validate_config")
    if capture_key.strip().lower() == exit_key.strip().lower():
        raise ConfigError("hotkeys.capture and hotkeys.exit must differ", operation="validate_config")

    document_name = config.get("project", {}).get("document_name")
    if not isinstance(document_name, str) or not document_name.strip():
        raise ConfigError("project.document_name must be a non-empty string", operation="validate_config")
    if "/" in document_name or "\\" in document_name:
        raise ConfigError("project.document_name must not contain path separators", operation="validate_config")

    image_format = config.get("capture", {}).get("image_format")
    if image_format not in IMAGE_FORMATS:
        raise ConfigError(
            f"capture.image_format must be one of {', '.join(IMAGE_FORMATS)}", operation="validate_config"
        )

    log_settings = config.get("logging", {})
    if str(log_settings.get("level", "")).upper() not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}", operation="validate_config")
    log_dir = log_settings.get("dir")
    if not isinstance(log_dir, str) or not log_dir.strip():
        raise ConfigError("logging.dir must be a non-empty string", operation="validate_config")

    default_dir = config.get("default_project_dir")
    if default_dir is not None and not isinstance(default_dir, str):
        raise ConfigError("default_project_dir must be a string or null", operation="validate_config")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    if not config_path.exists():
        return get_default_config()

    try:
        loaded = json.loads(read_text_file(config_path))
    except ValueError as exc:
        raise ConfigError(f"Invalid settings file: {exc}", operation="load_config", path=config_path) from exc
    if not isinstance(loaded, dict):
        raise ConfigError("Settings file must hold a JSON object", operation="load_config", path=config_path)
    merged = _deep_merge(get_default_config(), loaded)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_text_file(config_path, json.dumps(config, indent=2, ensure_ascii=True) + "\n")
    return config_path
