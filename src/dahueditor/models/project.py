# -*- coding: utf-8 -*-
"""Active project aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dahueditor.core.slide_model import SlideModel


@dataclass
class Project:
    """Project directory, its slides and the unsaved-changes flag.

    ``status`` is ``"created"`` for a fresh project and ``"opened"`` for
    one loaded from disk.
    """

    project_dir: Path
    status: str
    model: SlideModel = field(default_factory=SlideModel.create_empty)
    has_unsaved_changes: bool = False
    current_slide: str | None = None
