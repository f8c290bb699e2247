# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Abstractions for locating template files."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class GlobExpander(Protocol):
    """Capability expanding a glob pattern into matching paths.

    Implementations return paths relative to their working directory for
    relative patterns and absolute paths for absolute patterns.
    """

    def expand(
        self,
        pattern: str,
        *,
        exclude_dirs: Sequence[str],
        respect_gitignore: bool,
    ) -> list[str]:
        """Return the files matching ``pattern``.

        Args:
            pattern: Glob pattern or plain path supplied on the command line.
            exclude_dirs: Directory names whose contents are never returned.
            respect_gitignore: When ``True`` drop paths ignored by git.

        Returns:
            list[str]: Matching file paths in a stable order.
        """
        ...


__all__ = ["GlobExpander"]
