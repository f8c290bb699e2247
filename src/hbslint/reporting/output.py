# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render filtered diagnostics as JSON or human readable text."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, Final

from rich.console import Console
from rich.text import Text

from ..engine import VerificationEngine
from ..models import Diagnostic, DiagnosticMap, RunOptions, SeverityCounts
from ..runtime.console import get_console_manager

SUMMARY_STYLE: Final[str] = "bold red"
JSON_INDENT: Final[int] = 2


def summary_line(counts: SeverityCounts) -> str:
    """Return the closing summary for text reports."""

    return f"✖ {counts.total} problems ({counts.errors} errors, {counts.warnings} warnings)"


def diagnostics_payload(diagnostics: Mapping[str, Sequence[Diagnostic]]) -> dict[str, list[dict[str, Any]]]:
    """Return the JSON-ready form of ``diagnostics``, omitting empty entries."""

    return {
        identifier: [entry.to_payload() for entry in entries]
        for identifier, entries in diagnostics.items()
        if entries
    }


class ReportWriter:
    """Write the final report for a run to standard output."""

    def __init__(self, options: RunOptions, *, console: Console | None = None) -> None:
        self._options = options
        self._console = console or get_console_manager().get(color=not options.no_color)

    def write(self, diagnostics: DiagnosticMap, counts: SeverityCounts, engine: VerificationEngine) -> None:
        """Render ``diagnostics`` in the mode selected by the run options.

        Args:
            diagnostics: Filtered diagnostics keyed by identifier.
            counts: Totals matching ``diagnostics``.
            engine: Engine providing the per-file text rendering.
        """

        if self._options.json:
            self.write_json(diagnostics)
            return
        self.write_text(diagnostics, counts, engine)

    def write_json(self, diagnostics: DiagnosticMap) -> None:
        payload = json.dumps(diagnostics_payload(diagnostics), indent=JSON_INDENT, ensure_ascii=False)
        self._console.out(payload, highlight=False)

    def write_text(self, diagnostics: DiagnosticMap, counts: SeverityCounts, engine: VerificationEngine) -> None:
        for identifier, entries in diagnostics.items():
            if not entries:
                continue
            block = engine.format_messages(identifier, entries, verbose=self._options.verbose)
            if block:
                self._console.print(Text.from_ansi(block.rstrip("\n")))
        if counts.total > 0:
            self._console.print(Text(summary_line(counts), style=SUMMARY_STYLE))


__all__ = ["ReportWriter", "diagnostics_payload", "summary_line"]
