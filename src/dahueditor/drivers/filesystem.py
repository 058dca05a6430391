# -*- coding: utf-8 -*-
"""Local disk implementation of the filesystem collaborator.

Only low level file operations live here. Each call reports success or
failure explicitly; nothing is silently ignored.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dahueditor.errors import FileReadError
from dahueditor.utils.file_utils import copy_file, ensure_dir, read_text_file, write_text_file

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Filesystem collaborator backed by ``pathlib``."""

    separator = os.sep

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str | Path) -> bool:
        return Path(path).is_dir()

    def is_writable(self, path: str | Path) -> bool:
        return os.access(Path(path), os.W_OK)

    def create_directory(self, path: str | Path) -> bool:
        """Create ``path`` with its parents. True only if it exists afterwards."""
        try:
            ensure_dir(path)
        except OSError as exc:
            logger.error("Unable to create directory %s: %s", path, exc)
            return False
        return True

    def read_text(self, path: str | Path) -> str:
        try:
            return read_text_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Unable to read content from %s: %s", path, exc)
            raise FileReadError(f"Unable to read file: {exc}", operation="read_text", path=path) from exc

    def write_text(self, path: str | Path, content: str) -> bool:
        try:
            write_text_file(path, content)
        except OSError as exc:
            logger.error("Unable to write content to %s: %s", path, exc)
            return False
        return True

    def copy(self, source: str | Path, destination: str | Path) -> bool:
        try:
            copy_file(source, destination)
        except OSError as exc:
            logger.error("Unable to copy %s to %s: %s", source, destination, exc)
            return False
        return True

    def copy_directory_content(self, source: str | Path, destination: str | Path) -> bool:
        """Copy the plain files of ``source`` (not subdirectories) into ``destination``."""
        src = Path(source)
        if not src.is_dir():
            logger.warning("Not a directory: %s", src)
            return False
        ok = True
        for entry in sorted(src.iterdir()):
            if entry.is_file():
                ok = self.copy(entry, Path(destination) / entry.name) and ok
        return ok
