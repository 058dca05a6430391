# -*- coding: utf-8 -*-
"""Slide data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Slide:
    """One captured screen image plus the cursor position at capture time."""

    image_path: str
    x: int
    y: int

    def to_dict(self) -> dict:
        return {"path": self.image_path, "x": self.x, "y": self.y}
