# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default glob expansion strategy."""

from __future__ import annotations

import glob
import os
import re
from collections.abc import Sequence
from pathlib import Path, PurePath
from typing import Final

from .base import GlobExpander
from .gitignore import CommandRunner, filter_gitignored
from ..process import run_command

_MAGIC_RE: Final[re.Pattern[str]] = re.compile(r"[*?[]")
_RECURSIVE_SUFFIX: Final[tuple[str, str]] = ("**", "*")


class PathGlobExpander(GlobExpander):
    """Expand patterns with :mod:`glob` relative to a working directory."""

    def __init__(self, root: Path | None = None, *, runner: CommandRunner = run_command) -> None:
        """Create an expander rooted at ``root``.

        Args:
            root: Directory relative patterns are resolved against. Defaults
                to the current working directory.
            runner: Command runner used for ignore-file checks.
        """

        self.root = Path.cwd() if root is None else root
        self._runner = runner

    def expand(
        self,
        pattern: str,
        *,
        exclude_dirs: Sequence[str],
        respect_gitignore: bool,
    ) -> list[str]:
        effective = self._expand_directory(pattern)
        matches = sorted(glob.glob(effective, root_dir=self.root, recursive=True))
        base = _static_base(effective) if os.path.isabs(effective) else None
        excluded = frozenset(exclude_dirs)
        kept = [
            match
            for match in matches
            if (self.root / match).is_file() and not _is_excluded(match, base, excluded)
        ]
        if respect_gitignore:
            kept = filter_gitignored(kept, self.root, runner=self._runner)
        return kept

    def _expand_directory(self, pattern: str) -> str:
        """Turn a pattern naming an existing directory into a recursive glob."""

        if _MAGIC_RE.search(pattern):
            return pattern
        if (self.root / pattern).is_dir():
            return os.path.join(pattern, *_RECURSIVE_SUFFIX)
        return pattern


def _static_base(pattern: str) -> PurePath:
    """Return the leading portion of ``pattern`` that contains no glob magic."""

    parts: list[str] = []
    for part in PurePath(pattern).parts:
        if _MAGIC_RE.search(part):
            break
        parts.append(part)
    return PurePath(*parts)


def _is_excluded(match: str, base: PurePath | None, excluded: frozenset[str]) -> bool:
    """Return whether ``match`` sits beneath an excluded directory.

    Absolute matches are only checked below the literal prefix of the pattern,
    so directories above it never count.
    """

    if not excluded:
        return False
    candidate = PurePath(match)
    if base is not None:
        try:
            candidate = candidate.relative_to(base)
        except ValueError:
            return False
    return any(part in excluded for part in candidate.parent.parts)


__all__ = ["PathGlobExpander"]
