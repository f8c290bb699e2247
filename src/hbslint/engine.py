# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Verification engine contract and entry-point loading.

Engines are contributed by other distributions through the
``hbslint.engines`` entry-point group. Each entry point resolves to a
factory called as ``factory(config_path=...)`` that returns an object
implementing :class:`VerificationEngine`. Subclassing :class:`BaseEngine`
provides the default text rendering for reports.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from importlib import metadata
from importlib.metadata import EntryPoint
from typing import Protocol, TypeAlias, runtime_checkable

from .constants import ENGINE_ENTRY_POINT_GROUP
from .models import Diagnostic, DiagnosticLike
from .severity import severity_label


class EngineConstructionError(Exception):
    """Raised when no verification engine could be constructed."""


@runtime_checkable
class VerificationEngine(Protocol):
    """Capability that inspects template source and reports diagnostics."""

    def verify(self, source: str, module_name: str) -> Sequence[DiagnosticLike]:
        """Return diagnostics for ``source`` attributed to ``module_name``."""
        ...

    def format_messages(
        self,
        identifier: str,
        diagnostics: Sequence[Diagnostic],
        *,
        verbose: bool = False,
    ) -> str:
        """Render ``diagnostics`` for ``identifier`` as human readable text."""
        ...


EngineFactory: TypeAlias = Callable[..., VerificationEngine]


class BaseEngine:
    """Convenience base providing the standard text report layout."""

    def __init__(self, *, config_path: str | None = None) -> None:
        self.config_path = config_path

    def verify(self, source: str, module_name: str) -> Sequence[DiagnosticLike]:
        raise NotImplementedError

    def format_messages(
        self,
        identifier: str,
        diagnostics: Sequence[Diagnostic],
        *,
        verbose: bool = False,
    ) -> str:
        """Return ``identifier`` followed by one indented line per diagnostic.

        Args:
            identifier: Resolved path the diagnostics belong to.
            diagnostics: Filtered diagnostics to render.
            verbose: Append each diagnostic's source excerpt when available.

        Returns:
            str: Rendered block, or an empty string when nothing is reported.
        """

        if not diagnostics:
            return ""
        lines = [identifier]
        for diagnostic in diagnostics:
            columns = [
                f"{diagnostic.line}:{diagnostic.column}",
                severity_label(diagnostic.severity),
                diagnostic.message,
            ]
            if diagnostic.rule:
                columns.append(diagnostic.rule)
            lines.append("  " + "  ".join(columns))
            if verbose and diagnostic.source:
                lines.append(diagnostic.source)
        return "\n".join(lines) + "\n"


def available_engines() -> dict[str, EntryPoint]:
    """Return registered engine entry points keyed by name."""

    entries = metadata.entry_points(group=ENGINE_ENTRY_POINT_GROUP)
    return {entry.name: entry for entry in sorted(entries, key=lambda entry: entry.name)}


def resolve_engine_factory(name: str | None = None) -> tuple[str, EngineFactory]:
    """Return the engine factory registered under ``name``.

    Without a name the first registered engine (by name) is selected.

    Args:
        name: Entry-point name to select, or ``None``.

    Returns:
        tuple[str, EngineFactory]: Selected entry-point name and its factory.

    Raises:
        EngineConstructionError: If no suitable entry point can be loaded.
    """

    engines = available_engines()
    if not engines:
        raise EngineConstructionError(
            f"No verification engine is installed; register one under the '{ENGINE_ENTRY_POINT_GROUP}' "
            "entry-point group."
        )
    if name is None:
        name = next(iter(engines))
    entry = engines.get(name)
    if entry is None:
        known = ", ".join(engines)
        raise EngineConstructionError(f"Unknown verification engine '{name}' (available: {known})")
    try:
        factory = entry.load()
    except (AttributeError, ImportError, ValueError) as exc:
        raise EngineConstructionError(f"Unable to load verification engine '{name}': {exc}") from exc
    return name, factory


def construct_engine(factory: EngineFactory, *, config_path: str | None) -> VerificationEngine:
    """Build the single engine instance used for a run.

    Args:
        factory: Engine factory selected for the run.
        config_path: Opaque configuration path forwarded to the factory.

    Returns:
        VerificationEngine: Constructed engine.

    Raises:
        EngineConstructionError: If the factory fails for any reason.
    """

    try:
        return factory(config_path=config_path)
    except Exception as exc:  # engines report invalid configuration with arbitrary exception types
        raise EngineConstructionError(str(exc) or type(exc).__name__) from exc


__all__ = [
    "BaseEngine",
    "EngineConstructionError",
    "EngineFactory",
    "VerificationEngine",
    "available_engines",
    "construct_engine",
    "resolve_engine_factory",
]
