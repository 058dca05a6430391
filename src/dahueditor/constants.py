# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "dahu-editor"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
PROJECT_DOCUMENT_NAME = "presentation.dahu"

IMAGE_FORMATS = ("png", "jpg")

DEFAULT_HOTKEYS = {
    "capture": "F7",
    "exit": "Escape",
}
