# -*- coding: utf-8 -*-
"""Ordered slide collection and its project document form."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from dahueditor.errors import InvalidSlideData, MalformedProjectDocument
from dahueditor.models.slide import Slide

logger = logging.getLogger(__name__)


class SlidePathView:
    """Re-iterable snapshot of slide image paths."""

    def __init__(self, paths: tuple[str, ...]) -> None:
        self._paths = paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SlidePathView):
            return self._paths == other._paths
        if isinstance(other, (list, tuple)):
            return list(self._paths) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SlidePathView({list(self._paths)!r})"


def _is_coordinate(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_slide(image_path: Any, x: Any, y: Any) -> None:
    if not isinstance(image_path, str) or not image_path.strip():
        raise InvalidSlideData("Slide image path must be a non-empty string", operation="add_slide")
    if not _is_coordinate(x) or not _is_coordinate(y):
        raise InvalidSlideData(
            f"Slide coordinates must be integers, got ({x!r}, {y!r})",
            operation="add_slide",
            path=image_path,
        )


def _parse_slides(doc: Any) -> list[Slide]:
    if isinstance(doc, (str, bytes)):
        try:
            doc = json.loads(doc)
        except ValueError as exc:
            raise MalformedProjectDocument(f"Project document is not valid JSON: {exc}", operation="from_document") from exc
    if not isinstance(doc, dict):
        raise MalformedProjectDocument("Project document must be a JSON object", operation="from_document")
    if "slides" not in doc:
        raise MalformedProjectDocument("Project document has no 'slides' field", operation="from_document")
    entries = doc["slides"]
    if not isinstance(entries, list):
        raise MalformedProjectDocument("'slides' must be an array", operation="from_document")

    slides: list[Slide] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or "path" not in entry:
            raise MalformedProjectDocument(f"Slide #{index} has no 'path'", operation="from_document")
        x = entry.get("x", 0)
        y = entry.get("y", 0)
        try:
            _validate_slide(entry["path"], x, y)
        except InvalidSlideData as exc:
            raise MalformedProjectDocument(f"Slide #{index} is invalid: {exc.message}", operation="from_document") from exc
        if entry["path"] in seen:
            raise MalformedProjectDocument(f"Slide #{index} repeats path {entry['path']!r}", operation="from_document")
        seen.add(entry["path"])
        slides.append(Slide(image_path=entry["path"], x=x, y=y))
    return slides


class SlideModel:
    """Append-only ordered list of slides; insertion order is presentation order."""

    def __init__(self) -> None:
        self._slides: list[Slide] = []

    @classmethod
    def create_empty(cls) -> "SlideModel":
        return cls()

    def add_slide(self, image_path: str, x: int, y: int) -> Slide:
        """Append a slide and return it. Raises InvalidSlideData without mutating."""
        _validate_slide(image_path, x, y)
        if self.contains(image_path):
            raise InvalidSlideData("Slide image path already in project", operation="add_slide", path=image_path)
        slide = Slide(image_path=image_path, x=x, y=y)
        self._slides.append(slide)
        logger.debug("Slide #%d added: %s at (%d, %d)", len(self._slides), image_path, x, y)
        return slide

    def to_document(self) -> dict[str, Any]:
        return {"slides": [slide.to_dict() for slide in self._slides]}

    def to_json(self) -> str:
        return json.dumps(self.to_document(), indent=2, ensure_ascii=True) + "\n"

    def from_document(self, doc: dict[str, Any] | str | bytes) -> None:
        """Replace all slides with the ones parsed from ``doc``.

        The document is parsed completely before anything is replaced, so
        a MalformedProjectDocument leaves the current slides as they were.
        """
        slides = _parse_slides(doc)
        self._slides = slides
        logger.debug("Slide model loaded with %d slides", len(slides))

    def slide_paths(self) -> SlidePathView:
        return SlidePathView(tuple(slide.image_path for slide in self._slides))

    def slides(self) -> list[Slide]:
        return list(self._slides)

    def contains(self, image_path: str) -> bool:
        return any(slide.image_path == image_path for slide in self._slides)

    def __len__(self) -> int:
        return len(self._slides)
