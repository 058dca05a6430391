# -*- coding: utf-8 -*-
"""Ownership of the active project: create, open, save and dirty tracking."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from dahueditor.constants import PROJECT_DOCUMENT_NAME
from dahueditor.core.event_bus import EditorEvents
from dahueditor.core.slide_model import SlideModel
from dahueditor.errors import (
    CaptureInProgress,
    DirectoryUnavailable,
    FileReadError,
    InvalidSlideData,
    NoActiveProject,
    PersistenceFailed,
    ProjectNotFound,
    SaveWhileCapturing,
)
from dahueditor.models.project import Project
from dahueditor.models.slide import Slide

if TYPE_CHECKING:
    from dahueditor.core.capture_session import CaptureSession

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Filesystem collaborator used by the controller."""

    separator: str

    def exists(self, path: str | Path) -> bool: ...

    def is_directory(self, path: str | Path) -> bool: ...

    def is_writable(self, path: str | Path) -> bool: ...

    def create_directory(self, path: str | Path) -> bool: ...

    def read_text(self, path: str | Path) -> str: ...

    def write_text(self, path: str | Path, content: str) -> bool: ...

    def copy(self, source: str | Path, destination: str | Path) -> bool: ...


def _same_location(first: Path, second: Path) -> bool:
    """Lexical path comparison; symlinks are not followed."""
    return os.path.normcase(os.path.abspath(first)) == os.path.normcase(os.path.abspath(second))


@dataclass(frozen=True)
class CloseCheck:
    """Answer to a quit request; the caller decides whether to discard."""

    needs_confirmation: bool
    message: str


class ProjectController:
    """Owns the single active project and everything that replaces or mutates it."""

    def __init__(
        self,
        filesystem: FileSystem,
        events: EditorEvents | None = None,
        document_name: str = PROJECT_DOCUMENT_NAME,
    ) -> None:
        self.filesystem = filesystem
        self.events = events or EditorEvents()
        self.document_name = document_name
        self.lock = threading.RLock()
        self._project: Project | None = None
        self._capture_session: CaptureSession | None = None

    @property
    def active_project(self) -> Project | None:
        return self._project

    def has_active_project(self) -> bool:
        return self._project is not None

    def require_project(self, operation: str) -> Project:
        if self._project is None:
            logger.warning("Cannot %s: no project selected", operation)
            raise NoActiveProject("No project is active", operation=operation)
        return self._project

    def attach_capture_session(self, session: CaptureSession) -> None:
        self._capture_session = session

    def is_capturing(self) -> bool:
        return self._capture_session is not None and self._capture_session.is_armed

    def is_dirty(self) -> bool:
        return self._project is not None and self._project.has_unsaved_changes

    def mark_dirty(self) -> None:
        project = self.require_project("mark_dirty")
        project.has_unsaved_changes = True

    def document_path(self, project_dir: str | Path | None = None) -> Path:
        base = Path(project_dir) if project_dir is not None else self.require_project("document_path").project_dir
        return base / self.document_name

    def slide_file(self, image_path: str) -> str:
        """Full path of a slide image inside the project directory."""
        project = self.require_project("slide_file")
        return f"{project.project_dir}{self.filesystem.separator}{image_path}"

    def _reject_while_capturing(self, operation: str, path: str | Path) -> None:
        if self.is_capturing():
            logger.warning("Cannot %s while capture mode is on", operation)
            raise CaptureInProgress("Capture mode is on", operation=operation, path=path)

    def create_project(self, project_dir: str | Path) -> Project:
        """Replace the active project with an empty one in ``project_dir``."""
        path = Path(project_dir)
        with self.lock:
            self._reject_while_capturing("create_project", path)
            self._ensure_writable_directory(path, "create_project")
            self._project = Project(project_dir=path, status="created")
        logger.info("Project created in %s", path)
        self.events.project_loaded.publish(path)
        return self._project

    def open_project(self, project_dir: str | Path) -> Project:
        """Load ``project_dir``'s document and make it the active project."""
        path = Path(project_dir)
        doc_path = self.document_path(path)
        with self.lock:
            self._reject_while_capturing("open_project", path)
            if not self.filesystem.exists(doc_path):
                logger.warning("No project document at %s", doc_path)
                raise ProjectNotFound("Project document not found", operation="open_project", path=doc_path)
            try:
                text = self.filesystem.read_text(doc_path)
            except FileReadError as exc:
                logger.warning("Unable to read project document %s: %s", doc_path, exc)
                raise ProjectNotFound(
                    "Project document could not be read", operation="open_project", path=doc_path
                ) from exc
            model = SlideModel.create_empty()
            model.from_document(text)
            self._project = Project(project_dir=path, status="opened", model=model)
            slide_paths = model.slide_paths()
        logger.info("Project opened from %s with %d slides", path, len(slide_paths))
        self.events.project_loaded.publish(path)
        for image_path in slide_paths:
            self.events.slide_added.publish(image_path)
        return self._project

    def save_project(self) -> Path:
        """Write the active project's document. Clears the dirty flag on success."""
        with self.lock:
            project = self.require_project("save_project")
            if self.is_capturing():
                logger.warning("Can't save a project while capture mode is on")
                raise SaveWhileCapturing(
                    "Cannot save while capture mode is on", operation="save_project", path=project.project_dir
                )
            doc_path = self.document_path(project.project_dir)
            self._write_document(doc_path, project.model, "save_project")
            project.has_unsaved_changes = False
        logger.info("Project saved in %s", project.project_dir)
        return doc_path

    def save_project_as(self, project_dir: str | Path) -> Path:
        """Copy the slide images to ``project_dir``, save there and switch to it."""
        target = Path(project_dir)
        with self.lock:
            project = self.require_project("save_project_as")
            if self.is_capturing():
                logger.warning("Can't save a project while capture mode is on")
                raise SaveWhileCapturing(
                    "Cannot save while capture mode is on", operation="save_project_as", path=target
                )
            self._ensure_writable_directory(target, "save_project_as")
            if not _same_location(target, project.project_dir):
                for image_path in project.model.slide_paths():
                    source = project.project_dir / image_path
                    if not self.filesystem.copy(source, target / image_path):
                        logger.error("Failed to copy %s to %s", source, target)
                        raise PersistenceFailed("Slide image copy failed", operation="save_project_as", path=source)
            doc_path = self.document_path(target)
            self._write_document(doc_path, project.model, "save_project_as")
            project.project_dir = target
            project.has_unsaved_changes = False
        logger.info("Project saved as %s", target)
        return doc_path

    def request_close(self) -> CloseCheck:
        if self.is_dirty():
            return CloseCheck(needs_confirmation=True, message="Quit without saving any changes ?")
        return CloseCheck(needs_confirmation=False, message="Are you sure you want to quit ?")

    def append_captured_slide(self, image_path: str, x: int, y: int) -> Slide:
        """Append a captured slide to the active project and mark it dirty."""
        with self.lock:
            project = self.require_project("append_captured_slide")
            slide = project.model.add_slide(image_path, x, y)
            project.has_unsaved_changes = True
        self.events.slide_added.publish(slide.image_path)
        return slide

    def select_slide(self, image_path: str) -> bool:
        """Make ``image_path`` the current slide. Returns True if the selection changed."""
        project = self.require_project("select_slide")
        if not project.model.contains(image_path):
            raise InvalidSlideData("Slide is not part of the project", operation="select_slide", path=image_path)
        if project.current_slide == image_path:
            return False
        project.current_slide = image_path
        self.events.selection_changed.publish(image_path)
        return True

    def _ensure_writable_directory(self, path: Path, operation: str) -> None:
        fs = self.filesystem
        if not fs.exists(path):
            if not fs.create_directory(path):
                logger.warning("Unable to create directory: %s", path)
                raise DirectoryUnavailable("Directory could not be created", operation=operation, path=path)
        elif not fs.is_directory(path):
            raise DirectoryUnavailable("Path is not a directory", operation=operation, path=path)
        if not fs.is_writable(path):
            raise DirectoryUnavailable("Directory is not writable", operation=operation, path=path)

    def _write_document(self, doc_path: Path, model: SlideModel, operation: str) -> None:
        try:
            written = self.filesystem.write_text(doc_path, model.to_json())
        except OSError as exc:
            logger.exception("Filesystem error while writing %s", doc_path)
            raise PersistenceFailed("Project document could not be written", operation=operation, path=doc_path) from exc
        if not written:
            logger.error("Failed to save project document %s", doc_path)
            raise PersistenceFailed("Project document could not be written", operation=operation, path=doc_path)
