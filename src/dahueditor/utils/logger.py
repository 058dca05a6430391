# -*- coding: utf-8 -*-
"""Logging setup for one editor run, driven by the ``logging`` settings."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "dahueditor"
LOG_FORMAT = "%(asctime)s %(name)s - %(levelname)s - %(message)s"


def _session_handler(logger: logging.Logger) -> logging.FileHandler | None:
    for handler in logger.handlers:
        if getattr(handler, "_dahueditor_session", False):
            return handler  # type: ignore[return-value]
    return None


def setup_session_logging(config: dict[str, Any], base_dir: str | Path) -> Path | None:
    """Attach console and per-run file handlers to the ``dahueditor`` logger.

    ``config["logging"]`` supplies the level and the log directory (relative
    to ``base_dir`` unless absolute). Calling it again keeps the first
    session's file. Returns the session log path, or None when the file
    could not be opened.
    """
    settings = config.get("logging", {})
    level = getattr(logging, str(settings.get("level", "INFO")).upper())
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    existing = _session_handler(logger)
    if existing is not None:
        return Path(existing.baseFilename)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    logs_dir = Path(settings.get("dir", "logs"))
    if not logs_dir.is_absolute():
        logs_dir = Path(base_dir) / logs_dir
    log_path = logs_dir / f"session-{datetime.now().strftime('%Y%m%d-%H%M%S')}.log"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to open session log %s: %s", log_path, exc)
        return None
    file_handler.setFormatter(formatter)
    file_handler._dahueditor_session = True  # type: ignore[attr-defined]
    logger.addHandler(file_handler)
    logger.info("Session log file: %s (level %s)", log_path, logging.getLevelName(level))
    return log_path
