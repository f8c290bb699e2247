# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity filtering and counting."""

from __future__ import annotations

from ..models import DiagnosticMap, SeverityCounts
from ..severity import Severity


def filter_by_severity(diagnostics: DiagnosticMap, *, quiet: bool) -> SeverityCounts:
    """Filter ``diagnostics`` in place and return the totals.

    Each sequence becomes its errors followed by its warnings; warnings are
    dropped entirely in quiet mode. Severities other than warning and error
    are neither kept nor counted.

    Args:
        diagnostics: Mapping rewritten with the filtered sequences.
        quiet: Suppress warnings from the output and the counts.

    Returns:
        SeverityCounts: Error and warning totals after filtering.
    """

    errors = 0
    warnings = 0
    for identifier, entries in diagnostics.items():
        kept_errors = [entry for entry in entries if entry.severity == Severity.ERROR]
        kept_warnings = [] if quiet else [entry for entry in entries if entry.severity == Severity.WARNING]
        errors += len(kept_errors)
        warnings += len(kept_warnings)
        diagnostics[identifier] = kept_errors + kept_warnings
    return SeverityCounts(errors=errors, warnings=warnings)


__all__ = ["filter_by_severity"]
