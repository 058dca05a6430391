# -*- coding: utf-8 -*-
"""Project file helpers: UTF-8 text, directory creation, image copies."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_text_file(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text_file(path: str | Path, content: str) -> Path:
    """Replace ``path`` with ``content`` in one step.

    The text goes to a temporary file next to the target first, so a failed
    write never leaves a truncated project document behind.
    """
    file_path = Path(path)
    ensure_dir(file_path.parent)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{file_path.name}.", suffix=".tmp", dir=file_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        os.replace(tmp_name, file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return file_path


def copy_file(source: str | Path, destination: str | Path) -> Path:
    """Copy a slide image, creating the destination directory when needed."""
    target = Path(destination)
    ensure_dir(target.parent)
    shutil.copy2(Path(source), target)
    return target
