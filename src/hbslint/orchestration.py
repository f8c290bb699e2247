# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequential lint orchestration over resolved inputs."""

from __future__ import annotations

from collections.abc import Iterable

from .engine import VerificationEngine
from .logging import CLILogger
from .models import Diagnostic, InputSource, LintRun, normalize_diagnostics
from .severity import contains_failure
from .sources import SourceReader


class LintOrchestrator:
    """Run one engine over every input and collect the raw diagnostics."""

    def __init__(
        self,
        engine: VerificationEngine,
        reader: SourceReader,
        *,
        logger: CLILogger | None = None,
    ) -> None:
        self._engine = engine
        self._reader = reader
        self._logger = logger or CLILogger(debug_enabled=False)

    def lint_source(self, source: InputSource) -> list[Diagnostic]:
        """Return the engine's diagnostics for a single input.

        Args:
            source: Input to read and verify.

        Returns:
            list[Diagnostic]: Diagnostics in engine order; empty when standard
            input has nothing attached.
        """

        text = self._reader.read(source)
        if text is None:
            self._logger.debug(f"skipped={source.identifier} reason=no-input-attached")
            return []
        return normalize_diagnostics(self._engine.verify(text, source.module_name))

    def run(self, sources: Iterable[InputSource]) -> LintRun:
        """Lint ``sources`` in order.

        Args:
            sources: Resolved inputs.

        Returns:
            LintRun: Unfiltered diagnostics keyed by identifier, plus whether
            any error-level diagnostic was seen.
        """

        result = LintRun(diagnostics={})
        for source in sources:
            diagnostics = self.lint_source(source)
            self._logger.debug(f"linted={source.identifier} module={source.module_name} count={len(diagnostics)}")
            if contains_failure(diagnostic.severity for diagnostic in diagnostics):
                result.failed = True
            if diagnostics:
                result.diagnostics[source.identifier] = diagnostics
        return result


__all__ = ["LintOrchestrator"]
