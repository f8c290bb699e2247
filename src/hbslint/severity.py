# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import Final


class Severity(IntEnum):
    """Severity levels reported by verification engines."""

    WARNING = 1
    ERROR = 2


_SEVERITY_LABELS: Final[dict[int, str]] = {
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
}


def severity_label(value: int) -> str:
    """Return the human readable label for ``value``.

    Args:
        value: Numeric severity reported by the engine.

    Returns:
        str: ``"error"`` or ``"warning"``; unknown levels render as their number.
    """

    return _SEVERITY_LABELS.get(value, str(value))


def is_failing_severity(value: int) -> bool:
    """Return ``True`` when ``value`` should fail the run.

    Anything above :attr:`Severity.WARNING` counts, including levels the
    engine invents beyond :attr:`Severity.ERROR`.
    """

    return value > Severity.WARNING


def contains_failure(severities: Iterable[int]) -> bool:
    """Return ``True`` when any severity in ``severities`` fails the run."""

    return any(is_failing_severity(value) for value in severities)


__all__ = [
    "Severity",
    "contains_failure",
    "is_failing_severity",
    "severity_label",
]
