# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal, TextIO

from rich.console import Console


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal.

    Args:
        stream: Stream to inspect; defaults to ``sys.stdout``.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by colour and stream."""

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool], Console] = {}

    def get(self, *, color: bool, stderr: bool = False) -> Console:
        """Return a console configured for ``color`` writing to stdout or stderr.

        The console resolves ``sys.stdout``/``sys.stderr`` at print time so
        redirected streams are honoured.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            stderr: ``True`` to write to standard error.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty(sys.stderr if stderr else sys.stdout)
        key = (color, stderr, tty)
        if key not in self._cache:
            color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
                "auto" if color and tty else None
            )
            self._cache[key] = Console(
                color_system=color_system,
                force_terminal=tty,
                no_color=not (color and tty),
                stderr=stderr,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )
        return self._cache[key]


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
