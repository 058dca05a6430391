# -*- coding: utf-8 -*-
"""Capture mode: turns trigger keys into slides while armed."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from dahueditor.constants import DEFAULT_HOTKEYS
from dahueditor.core.project_controller import ProjectController
from dahueditor.errors import CaptureFailed, DahuError, NoActiveProject
from dahueditor.models.slide import Slide

logger = logging.getLogger(__name__)


KeyListener = Callable[[str], None]
ErrorCallback = Callable[[DahuError], None]


def _is_coordinate(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ScreenSource(Protocol):
    """Screen and pointer collaborator."""

    def take_screen(self, target_dir: Path) -> str: ...

    def get_cursor_position(self) -> tuple[int, int]: ...


class TriggerSource(Protocol):
    """Keyboard collaborator delivering key names to registered listeners."""

    def add_key_listener(self, listener: KeyListener) -> None: ...

    def remove_key_listener(self, listener: KeyListener) -> None: ...


class CaptureSession:
    """Disarmed/Armed state machine for capture mode.

    While armed the session listens on ``triggers``; the capture key grabs
    the screen and cursor position and appends a slide to the active project,
    the exit key disarms. Capture errors are reported through
    ``capture_failed`` when set (otherwise raised) and never disarm.
    """

    def __init__(
        self,
        controller: ProjectController,
        screen: ScreenSource,
        triggers: TriggerSource,
        hotkeys: dict[str, str] | None = None,
    ) -> None:
        self._controller = controller
        self._screen = screen
        self._triggers = triggers
        keys = dict(DEFAULT_HOTKEYS)
        keys.update(hotkeys or {})
        self.capture_key = keys["capture"].strip().lower()
        self.exit_key = keys["exit"].strip().lower()
        self._armed = False

        self.capture_failed: ErrorCallback | None = None
        self.armed_changed: Callable[[bool], None] | None = None

        controller.attach_capture_session(self)

    @property
    def is_armed(self) -> bool:
        return self._armed

    def enter(self) -> None:
        with self._controller.lock:
            if self._armed:
                return
            if not self._controller.has_active_project():
                logger.warning("Can't enter capture mode: no project selected")
                raise NoActiveProject("No project is active", operation="enter_capture_mode")
            self._triggers.add_key_listener(self.handle_key)
            self._armed = True
            logger.info("Capture mode on")
            if self.armed_changed is not None:
                self.armed_changed(True)

    def exit(self) -> None:
        """Disarm. Waits for a capture in progress to finish appending."""
        with self._controller.lock:
            if not self._armed:
                return
            self._triggers.remove_key_listener(self.handle_key)
            self._armed = False
            logger.info("Capture mode off")
            if self.armed_changed is not None:
                self.armed_changed(False)

    def toggle(self) -> bool:
        if self._armed:
            self.exit()
        else:
            self.enter()
        return self._armed

    def handle_key(self, key_name: str) -> None:
        """Listener registered with the trigger source while armed."""
        if not self._armed:
            return
        key = key_name.strip().lower()
        if key == self.capture_key:
            try:
                self.capture()
            except DahuError as exc:
                if self.capture_failed is None:
                    raise
                self.capture_failed(exc)
        elif key == self.exit_key:
            self.exit()

    def capture(self) -> Slide | None:
        """Grab one slide. Does nothing while disarmed."""
        with self._controller.lock:
            if not self._armed:
                return None
            project = self._controller.require_project("capture")
            try:
                image_path = self._screen.take_screen(project.project_dir)
                x, y = self._screen.get_cursor_position()
                if not _is_coordinate(x) or not _is_coordinate(y):
                    raise CaptureFailed(
                        f"Cursor position must be integers, got ({x!r}, {y!r})",
                        operation="get_cursor_position",
                        path=project.project_dir,
                    )
            except CaptureFailed:
                logger.warning("Screen capture failed in %s", project.project_dir)
                raise
            except Exception as exc:
                logger.exception("Screen capture collaborator error")
                raise CaptureFailed(
                    f"Screen capture failed: {exc}", operation="capture", path=project.project_dir
                ) from exc
            return self._controller.append_captured_slide(image_path, x, y)
