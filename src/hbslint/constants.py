# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for hbs-lint."""

from __future__ import annotations

from pathlib import Path
from typing import Final

TEMPLATE_EXTENSION: Final[str] = ".hbs"

STDIN_PATH: Final[Path] = Path("/dev/stdin")
STDIN_DASH: Final[str] = "-"
STDIN_ALIASES: Final[frozenset[str]] = frozenset({STDIN_DASH, str(STDIN_PATH)})
STDIN_MODULE_NAME: Final[str] = "stdin"

ALWAYS_EXCLUDE_DIRS: Final[tuple[str, ...]] = ("dist", "tmp", "node_modules")

FLAG_PREFIX: Final[str] = "--"

ENGINE_ENTRY_POINT_GROUP: Final[str] = "hbslint.engines"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "hbslint"

__all__ = [
    "ALWAYS_EXCLUDE_DIRS",
    "ENGINE_ENTRY_POINT_GROUP",
    "FLAG_PREFIX",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "STDIN_ALIASES",
    "STDIN_DASH",
    "STDIN_MODULE_NAME",
    "STDIN_PATH",
    "TEMPLATE_EXTENSION",
]
