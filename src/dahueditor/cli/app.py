# -*- coding: utf-8 -*-
"""Command line entry point: create, inspect and record projects."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from dahueditor.config import load_config
from dahueditor.core.project_controller import ProjectController
from dahueditor.drivers.filesystem import LocalFileSystem
from dahueditor.errors import DahuError, ProjectNotFound

app = typer.Typer(help="Record screen captures into slide projects")
logger = logging.getLogger(__name__)


def _controller(settings: Optional[Path]) -> tuple[ProjectController, dict]:
    config = load_config(settings)
    controller = ProjectController(LocalFileSystem(), document_name=config["project"]["document_name"])
    return controller, config


def _fail(error: DahuError) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command()
def new(
    project_dir: Path = typer.Argument(..., help="Project directory (created when missing)"),
    settings: Optional[Path] = typer.Option(None, help="Path to settings.json"),
) -> None:
    """Create an empty project and write its document."""
    try:
        controller, _ = _controller(settings)
        controller.create_project(project_dir)
        doc_path = controller.save_project()
    except DahuError as exc:
        _fail(exc)
        return
    typer.echo(f"Project created: {doc_path}")


@app.command()
def info(
    project_dir: Path = typer.Argument(..., help="Project directory"),
    settings: Optional[Path] = typer.Option(None, help="Path to settings.json"),
) -> None:
    """List the slides of a project."""
    try:
        controller, _ = _controller(settings)
        project = controller.open_project(project_dir)
    except DahuError as exc:
        _fail(exc)
        return
    slides = project.model.slides()
    typer.echo(f"Project: {project.project_dir}")
    typer.echo(f"Slides: {len(slides)}")
    for index, slide in enumerate(slides, start=1):
        typer.echo(f"  {index:3d}. {slide.image_path} @ ({slide.x}, {slide.y})")


@app.command()
def record(
    project_dir: Optional[Path] = typer.Argument(None, help="Project directory (default: settings default_project_dir)"),
    settings: Optional[Path] = typer.Option(None, help="Path to settings.json"),
) -> None:
    """Open or create a project and record slides until the exit key is pressed."""
    from PyQt6.QtWidgets import QApplication

    from dahueditor.core.capture_session import CaptureSession
    from dahueditor.drivers.qt_keyboard import QtKeyTriggerSource
    from dahueditor.drivers.screen import QtScreenCapture
    from dahueditor.gui.recording_window import RecordingWindow
    from dahueditor.utils.logger import setup_session_logging

    try:
        controller, config = _controller(settings)
        setup_session_logging(config, Path.cwd())
        target = project_dir or config.get("default_project_dir")
        if not target:
            typer.echo("Error: no project directory given and no default_project_dir configured", err=True)
            raise typer.Exit(code=2)
        try:
            controller.open_project(target)
        except ProjectNotFound:
            logger.info("No project in %s, creating one", target)
            controller.create_project(target)
    except DahuError as exc:
        _fail(exc)
        return

    qt_app = QApplication.instance() or QApplication(sys.argv[:1])
    triggers = QtKeyTriggerSource()
    triggers.install(qt_app)
    session = CaptureSession(
        controller,
        QtScreenCapture(image_format=config["capture"]["image_format"]),
        triggers,
        hotkeys=config["hotkeys"],
    )
    window = RecordingWindow(controller, session)
    window.show()
    session.enter()
    exit_code = qt_app.exec()
    triggers.uninstall(qt_app)
    raise typer.Exit(code=exit_code)
