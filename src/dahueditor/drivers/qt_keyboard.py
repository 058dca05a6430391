# -*- coding: utf-8 -*-
"""Qt key presses as a keyboard trigger source."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtGui import QKeyEvent, QKeySequence

from dahueditor.drivers.keyboard import KeyTriggerSource

logger = logging.getLogger(__name__)


class _KeyPressFilter(QObject):
    def __init__(self, source: QtKeyTriggerSource) -> None:
        super().__init__()
        self._source = source

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.KeyPress and isinstance(event, QKeyEvent) and not event.isAutoRepeat():
            return self._source.key_pressed(event.key())
        return super().eventFilter(watched, event)


class QtKeyTriggerSource(KeyTriggerSource):
    """Feeds Qt key presses of a watched object into the listeners."""

    # QKeySequence spells Escape as "Esc"
    _ALIASES = {"esc": "Escape"}

    def __init__(self) -> None:
        super().__init__()
        self._filter = _KeyPressFilter(self)

    @classmethod
    def key_name(cls, key: int) -> str:
        name = QKeySequence(key).toString()
        return cls._ALIASES.get(name.lower(), name)

    def install(self, target: QObject) -> None:
        target.installEventFilter(self._filter)

    def uninstall(self, target: QObject) -> None:
        target.removeEventFilter(self._filter)

    def key_pressed(self, key: int) -> bool:
        """Dispatch a Qt key code. Returns True when a listener consumed it."""
        name = self.key_name(key)
        if not name or not self.listener_count():
            return False
        logger.debug("Key pressed: %s", name)
        self.dispatch(name)
        return True
