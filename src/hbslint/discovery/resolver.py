# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve command-line arguments into ordered, unique input sources."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from ..config import LintSettings
from ..constants import STDIN_ALIASES
from ..models import InputSource, NamedFile, StandardStream
from .base import GlobExpander


class FileResolver:
    """Turn positional arguments into the inputs a run will lint."""

    def __init__(self, expander: GlobExpander, settings: LintSettings, *, root: Path | None = None) -> None:
        """Create a resolver.

        Args:
            expander: Glob capability used for every non-stdin argument.
            settings: Settings providing the extension and exclusions.
            root: Directory relative matches are resolved against.
        """

        self._expander = expander
        self._settings = settings
        self._root = Path.cwd() if root is None else root

    def resolve(self, arguments: Sequence[str]) -> list[InputSource]:
        """Return the deduplicated inputs named by ``arguments``.

        No arguments means standard input. ``-`` and ``/dev/stdin`` both name
        standard input, which appears at most once. First occurrences win.

        Args:
            arguments: Positional command-line arguments.

        Returns:
            list[InputSource]: Inputs in first-seen order.
        """

        if not arguments:
            return [StandardStream()]
        resolved: list[InputSource] = []
        seen: set[str] = set()
        for source in self._iter_sources(arguments):
            if source.identifier in seen:
                continue
            seen.add(source.identifier)
            resolved.append(source)
        return resolved

    def _iter_sources(self, arguments: Iterable[str]) -> Iterator[InputSource]:
        for argument in arguments:
            if argument in STDIN_ALIASES:
                yield StandardStream()
                continue
            yield from self._expand(argument)

    def _expand(self, pattern: str) -> Iterator[NamedFile]:
        extension = self._settings.extension
        matches = self._expander.expand(
            pattern,
            exclude_dirs=self._settings.exclude_dirs,
            respect_gitignore=self._settings.respect_gitignore,
        )
        for match in matches:
            if not match.endswith(extension):
                continue
            yield NamedFile(
                path=Path(os.path.abspath(self._root / match)),
                module_name=match[: -len(extension)],
            )


__all__ = ["FileResolver"]
