# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models shared across the lint pipeline."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict

from .constants import STDIN_MODULE_NAME, STDIN_PATH


class Diagnostic(BaseModel):
    """Single issue reported by a verification engine."""

    model_config = ConfigDict(frozen=True, extra="allow")

    severity: int
    message: str
    line: int
    column: int
    rule: str | None = None
    source: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready mapping used for machine output."""

        return self.model_dump(mode="json", exclude_none=True)


DiagnosticLike: TypeAlias = Diagnostic | Mapping[str, Any]
DiagnosticMap: TypeAlias = dict[str, list[Diagnostic]]


def normalize_diagnostics(candidates: Sequence[DiagnosticLike] | None) -> list[Diagnostic]:
    """Coerce engine results into :class:`Diagnostic` models, preserving order.

    Args:
        candidates: Diagnostics returned by the engine. ``None`` is treated as
            an empty result.

    Returns:
        list[Diagnostic]: Validated diagnostics in engine order.
    """

    if not candidates:
        return []
    normalized: list[Diagnostic] = []
    for candidate in candidates:
        if isinstance(candidate, Diagnostic):
            normalized.append(candidate)
            continue
        normalized.append(Diagnostic.model_validate(dict(candidate)))
    return normalized


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Options derived once from the raw invocation arguments."""

    quiet: bool = False
    json: bool = False
    verbose: bool = False
    config_path: str | None = None
    debug: bool = False
    no_color: bool = False


@dataclass(frozen=True, slots=True)
class NamedFile:
    """Template file on disk."""

    path: Path
    module_name: str

    @property
    def identifier(self) -> str:
        """Return the absolute path used as aggregation key."""

        return str(self.path)


@dataclass(frozen=True, slots=True)
class StandardStream:
    """Template source piped through standard input."""

    @property
    def identifier(self) -> str:
        """Return the key used for stdin diagnostics."""

        return str(STDIN_PATH)

    @property
    def module_name(self) -> str:
        return STDIN_MODULE_NAME


InputSource: TypeAlias = NamedFile | StandardStream


@dataclass(frozen=True, slots=True)
class SeverityCounts:
    """Totals computed after quiet-mode filtering."""

    errors: int = 0
    warnings: int = 0

    @property
    def total(self) -> int:
        return self.errors + self.warnings


@dataclass(slots=True)
class LintRun:
    """Raw outcome of linting every resolved input."""

    diagnostics: DiagnosticMap
    failed: bool = False


__all__ = [
    "Diagnostic",
    "DiagnosticLike",
    "DiagnosticMap",
    "InputSource",
    "LintRun",
    "NamedFile",
    "RunOptions",
    "SeverityCounts",
    "StandardStream",
    "normalize_diagnostics",
]
