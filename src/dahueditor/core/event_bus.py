# -*- coding: utf-8 -*-
"""Synchronous in-process publish/subscribe."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


Handler = Callable[[Any], None]


@dataclass
class DeliveryError:
    """A handler that raised while an event was being delivered."""

    handler: Handler
    error: Exception


class EventBus:
    """Ordered fan-out to subscribers.

    Handlers run synchronously in subscription order. A handler that raises
    is logged and reported in the return value of ``publish``; the remaining
    handlers still run. Events published before a handler subscribes are
    not replayed to it.
    """

    def __init__(self, name: str = "event") -> None:
        self.name = name
        self._handlers: list[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            return
        self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def publish(self, payload: Any = None) -> list[DeliveryError]:
        failures: list[DeliveryError] = []
        for handler in list(self._handlers):
            try:
                handler(payload)
            except Exception as exc:
                logger.exception("Handler %r failed on '%s' event", handler, self.name)
                failures.append(DeliveryError(handler=handler, error=exc))
        return failures

    def subscriber_count(self) -> int:
        return len(self._handlers)


@dataclass
class EditorEvents:
    """The editor's named events."""

    slide_added: EventBus = field(default_factory=lambda: EventBus("slide_added"))
    selection_changed: EventBus = field(default_factory=lambda: EventBus("selection_changed"))
    project_loaded: EventBus = field(default_factory=lambda: EventBus("project_loaded"))
