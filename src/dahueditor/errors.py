# -*- coding: utf-8 -*-
"""Error taxonomy for the editor core.

Every error is recoverable: it is raised to the caller after the
component that detected it has left its state untouched.
"""

from __future__ import annotations

from pathlib import Path


class DahuError(Exception):
    """Base error carrying the failed operation and the path involved."""

    def __init__(self, message: str, operation: str | None = None, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.path = str(path) if path is not None else None

    def __str__(self) -> str:
        context = []
        if self.operation:
            context.append(f"operation={self.operation}")
        if self.path:
            context.append(f"path={self.path}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class InvalidSlideData(DahuError):
    """Raised when a slide gets an empty path or non-integer coordinates."""


class MalformedProjectDocument(DahuError):
    """Raised when a project document is not valid JSON of the expected shape."""


class ProjectNotFound(DahuError):
    """Raised when the project document does not exist in the directory."""


class DirectoryUnavailable(DahuError):
    """Raised when a project directory cannot be created or written."""


class PersistenceFailed(DahuError):
    """Raised when writing or copying project files fails."""


class CaptureFailed(DahuError):
    """Raised when the screen capture collaborator cannot deliver an image."""


class NoActiveProject(DahuError):
    """Raised when an operation needs a project and none is active."""


class SaveWhileCapturing(DahuError):
    """Raised when a save is requested while capture mode is armed."""


class CaptureInProgress(DahuError):
    """Raised when a project is created or opened while capture mode is armed."""


class FileReadError(DahuError):
    """Raised by the filesystem collaborator when a file cannot be read."""


class ConfigError(DahuError, ValueError):
    """Raised when settings are invalid."""
