# -*- coding: utf-8 -*-
"""Shared pytest fixtures for the editor core."""

from __future__ import annotations

import base64
import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from dahueditor.core.capture_session import CaptureSession
from dahueditor.core.project_controller import ProjectController
from dahueditor.drivers.filesystem import LocalFileSystem
from dahueditor.drivers.keyboard import KeyTriggerSource
from dahueditor.errors import CaptureFailed


PNG_1X1_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO7+fJ8AAAAASUVORK5CYII="
)


class FakeScreen:
    """Writes a 1x1 PNG per capture and reports scripted cursor positions."""

    def __init__(self) -> None:
        self.positions: list[tuple[int, int]] = [(10, 20), (30, 40), (50, 60)]
        self.fail_with: Exception | None = None
        self.calls: list[Path] = []

    def take_screen(self, target_dir: Path) -> str:
        self.calls.append(Path(target_dir))
        if self.fail_with is not None:
            raise self.fail_with
        name = f"s{len(self.calls)}.png"
        (Path(target_dir) / name).write_bytes(PNG_1X1_BYTES)
        return name

    def get_cursor_position(self) -> tuple[int, int]:
        index = min(len(self.calls), len(self.positions)) - 1
        return self.positions[max(index, 0)]


class RecordingFileSystem(LocalFileSystem):
    """Local filesystem that records writes and can be told to fail."""

    def __init__(self) -> None:
        self.writes: list[Path] = []
        self.copies: list[tuple[Path, Path]] = []
        self.fail_writes = False
        self.fail_copies = False
        self.fail_mkdir = False
        self.raise_on_write = False

    def create_directory(self, path):
        if self.fail_mkdir:
            return False
        return super().create_directory(path)

    def write_text(self, path, content):
        if self.raise_on_write:
            raise PermissionError("driver fault")
        self.writes.append(Path(path))
        if self.fail_writes:
            return False
        return super().write_text(path, content)

    def copy(self, source, destination):
        self.copies.append((Path(source), Path(destination)))
        if self.fail_copies:
            return False
        return super().copy(source, destination)


@pytest.fixture
def filesystem() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture
def controller(filesystem: RecordingFileSystem) -> ProjectController:
    return ProjectController(filesystem)


@pytest.fixture
def fake_screen() -> FakeScreen:
    return FakeScreen()


@pytest.fixture
def triggers() -> KeyTriggerSource:
    return KeyTriggerSource()


@pytest.fixture
def session(controller: ProjectController, fake_screen: FakeScreen, triggers: KeyTriggerSource) -> CaptureSession:
    return CaptureSession(controller, fake_screen, triggers)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    return tmp_path / "project"


@pytest.fixture
def capture_failure() -> CaptureFailed:
    return CaptureFailed("capture hardware unavailable", operation="take_screen")


@pytest.fixture
def sample_screenshot(tmp_path: Path) -> Path:
    path = tmp_path / "sample_screenshot.png"
    path.write_bytes(PNG_1X1_BYTES)
    return path


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6.QtWidgets", reason="PyQt6 not available")
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
