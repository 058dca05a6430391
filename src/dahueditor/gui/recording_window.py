# -*- coding: utf-8 -*-
"""Small always-on-top window shown while recording a project."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QMessageBox, QVBoxLayout, QWidget

from dahueditor.constants import APP_NAME
from dahueditor.core.capture_session import CaptureSession
from dahueditor.core.project_controller import ProjectController
from dahueditor.errors import DahuError

logger = logging.getLogger(__name__)


class RecordingWindow(QWidget):
    """Shows capture status; saves the project and closes when capture mode ends."""

    def __init__(self, controller: ProjectController, session: CaptureSession) -> None:
        super().__init__()
        self.controller = controller
        self.session = session
        self.setWindowTitle(f"{APP_NAME} - recording")
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        project = controller.require_project("record")
        self.project_label = QLabel(str(project.project_dir))
        self.status_label = QLabel()
        self.count_label = QLabel()
        self.hint_label = QLabel(
            f"{session.capture_key.upper()}: capture slide    {session.exit_key.capitalize()}: stop and save"
        )
        layout = QVBoxLayout(self)
        for label in (self.project_label, self.status_label, self.count_label, self.hint_label):
            layout.addWidget(label)

        controller.events.slide_added.subscribe(self._on_slide_added)
        session.armed_changed = self._on_armed_changed
        session.capture_failed = self._on_capture_failed
        self._refresh_count()
        self._show_mode(session.is_armed)

    def _refresh_count(self) -> None:
        project = self.controller.active_project
        total = len(project.model) if project is not None else 0
        self.count_label.setText(f"Slides: {total}")

    def _on_slide_added(self, image_path: str) -> None:
        self._refresh_count()
        self.status_label.setText(f"Captured {image_path}")

    def _on_capture_failed(self, error: DahuError) -> None:
        self.status_label.setText(f"Capture failed: {error.message}")

    def _show_mode(self, armed: bool) -> None:
        self.status_label.setText("Capture mode on" if armed else "Capture mode off")

    def _on_armed_changed(self, armed: bool) -> None:
        self._show_mode(armed)
        if armed:
            return
        try:
            self.controller.save_project()
        except DahuError as exc:
            logger.error("Saving after capture failed: %s", exc)
            QMessageBox.critical(self, APP_NAME, f"The project could not be saved.\n{exc}")
            return
        self.close()

    def closeEvent(self, event) -> None:
        was_armed = self.session.is_armed
        # disarm without triggering the save-and-close path
        self.session.armed_changed = None
        self.session.exit()
        self.session.armed_changed = self._on_armed_changed
        self._show_mode(False)
        check = self.controller.request_close()
        if check.needs_confirmation:
            answer = QMessageBox.question(self, APP_NAME, check.message)
            if answer != QMessageBox.StandardButton.Yes:
                event.ignore()
                if was_armed:
                    self.session.enter()
                return
        self.session.armed_changed = None
        self.session.capture_failed = None
        self.controller.events.slide_added.unsubscribe(self._on_slide_added)
        super().closeEvent(event)
