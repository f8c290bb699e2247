# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool settings loaded from ``[tool.hbslint]`` in ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .constants import (
    ALWAYS_EXCLUDE_DIRS,
    PYPROJECT_FILENAME,
    PYPROJECT_SECTION_KEY,
    PYPROJECT_TOOL_KEY,
    TEMPLATE_EXTENSION,
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintSettings(BaseModel):
    """Settings controlling discovery and engine selection."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    engine: str | None = None
    extension: str = TEMPLATE_EXTENSION
    exclude_dirs: tuple[str, ...] = ALWAYS_EXCLUDE_DIRS
    respect_gitignore: bool = True

    @field_validator("extension")
    @classmethod
    def _require_leading_dot(cls, value: str) -> str:
        """Ensure the template extension is spelled with its leading dot."""

        if not value.startswith(".") or len(value) < 2:
            raise ValueError("extension must look like '.hbs'")
        return value

    @field_validator("exclude_dirs", mode="before")
    @classmethod
    def _coerce_exclude_dirs(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        return value


def load_settings(root: Path) -> LintSettings:
    """Return settings for the project rooted at ``root``.

    Args:
        root: Directory expected to contain ``pyproject.toml``.

    Returns:
        LintSettings: Parsed settings, or defaults when no section exists.

    Raises:
        ConfigError: If the TOML document or the section is invalid.
    """

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return LintSettings()
    try:
        with pyproject.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Unable to parse {pyproject}: {exc}") from exc

    section = _extract_section(document)
    if section is None:
        return LintSettings()
    try:
        return LintSettings.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.{PYPROJECT_SECTION_KEY}] settings in {pyproject}: {exc}") from exc


def _extract_section(document: Mapping[str, Any]) -> Mapping[str, Any] | None:
    tool = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool, Mapping):
        return None
    section = tool.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return None
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] must be a table")
    return section


__all__ = ["ConfigError", "LintSettings", "load_settings"]
