# -*- coding: utf-8 -*-
"""Keyboard trigger source: key names delivered to registered listeners."""

from __future__ import annotations

from collections.abc import Callable


KeyListener = Callable[[str], None]


class KeyTriggerSource:
    """Ordered set of key listeners fed by ``dispatch``."""

    def __init__(self) -> None:
        self._listeners: list[KeyListener] = []

    def add_key_listener(self, listener: KeyListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_key_listener(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def listener_count(self) -> int:
        return len(self._listeners)

    def dispatch(self, key_name: str) -> None:
        for listener in list(self._listeners):
            listener(key_name)
