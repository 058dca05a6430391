# -*- coding: utf-8 -*-
"""Module entry point for `python -m dahueditor`."""

from __future__ import annotations

from dahueditor.cli.app import app


if __name__ == "__main__":
    app()
