# -*- coding: utf-8 -*-
"""Screen and cursor capture through Qt."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from PyQt6.QtGui import QCursor, QGuiApplication

from dahueditor.errors import CaptureFailed

logger = logging.getLogger(__name__)


class QtScreenCapture:
    """Grab the primary screen into the project directory."""

    def __init__(self, image_format: str = "png") -> None:
        self.image_format = image_format
        self._counter = 0

    def _next_name(self, target_dir: Path) -> str:
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        while True:
            self._counter += 1
            name = f"screen-{stamp}-{self._counter:03d}.{self.image_format}"
            if not (target_dir / name).exists():
                return name

    def take_screen(self, target_dir: str | Path) -> str:
        """Save a screenshot in ``target_dir`` and return its file name."""
        directory = Path(target_dir)
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            raise CaptureFailed("No screen available", operation="take_screen", path=directory)
        pixmap = screen.grabWindow(0)
        if pixmap.isNull():
            raise CaptureFailed("Screen grab returned an empty image", operation="take_screen", path=directory)
        name = self._next_name(directory)
        if not pixmap.save(str(directory / name), self.image_format.upper()):
            raise CaptureFailed("Screenshot could not be saved", operation="take_screen", path=directory / name)
        logger.debug("Screenshot saved: %s", directory / name)
        return name

    def get_cursor_position(self) -> tuple[int, int]:
        pos = QCursor.pos()
        return pos.x(), pos.y()
