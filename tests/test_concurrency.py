# -*- coding: utf-8 -*-
"""Tests that a save never interleaves with a capture on the same project."""

from __future__ import annotations

import json
import threading
from pathlib import Path


def test_save_waits_for_capture_in_progress(controller, session, fake_screen, filesystem, project_dir: Path) -> None:
    controller.create_project(project_dir)
    session.enter()

    grabbing = threading.Event()
    release = threading.Event()
    take_screen = fake_screen.take_screen

    def blocking_take_screen(target_dir):
        grabbing.set()
        release.wait(5)
        return take_screen(target_dir)

    fake_screen.take_screen = blocking_take_screen
    capture_thread = threading.Thread(target=session.capture)
    capture_thread.start()
    assert grabbing.wait(5)

    saved: list[Path] = []

    def stop_and_save() -> None:
        session.exit()
        saved.append(controller.save_project())

    save_thread = threading.Thread(target=stop_and_save)
    save_thread.start()
    save_thread.join(0.2)
    assert save_thread.is_alive()
    assert session.is_armed is True
    assert filesystem.writes == []

    release.set()
    capture_thread.join(5)
    save_thread.join(5)
    assert not capture_thread.is_alive()
    assert not save_thread.is_alive()

    assert saved == [project_dir / "presentation.dahu"]
    data = json.loads(saved[0].read_text(encoding="utf-8"))
    assert data == {"slides": [{"path": "s1.png", "x": 10, "y": 20}]}
    assert controller.is_dirty() is False


def test_capture_after_concurrent_exit_adds_nothing(controller, session, fake_screen, project_dir: Path) -> None:
    controller.create_project(project_dir)
    session.enter()
    with controller.lock:
        capture_thread = threading.Thread(target=session.capture)
        capture_thread.start()
        capture_thread.join(0.1)
        assert capture_thread.is_alive()
        session.exit()
    capture_thread.join(5)
    assert fake_screen.calls == []
    assert len(controller.active_project.model) == 0
