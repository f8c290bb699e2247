# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour support."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rich.text import Text

from .runtime.console import get_console_manager


def _print_line(msg: str, *, style: str | None, use_color: bool, stderr: bool) -> None:
    """Render ``msg`` using the shared console manager.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_color: Flag indicating whether colour output is requested.
        stderr: ``True`` to write to standard error.
    """

    console = get_console_manager().get(color=use_color, stderr=stderr)
    text = Text(msg)
    if style and use_color:
        text.stylize(style)
    console.print(text)


def fail(msg: str, *, use_color: bool) -> None:
    """Emit an error message on standard error."""

    _print_line(msg, style="red", use_color=use_color, stderr=True)


@dataclass(slots=True)
class CLILogger:
    """Adapter around the logging helpers honouring CLI presentation flags."""

    use_color: bool = True
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"), repr=False)

    def fail(self, message: str) -> None:
        """Log a failure message.

        Args:
            message: Text describing the failure state.
        """

        fail(message, use_color=self.use_color)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload; ``key=value`` pairs are highlighted.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        console = get_console_manager().get(color=self.use_color, stderr=True)
        console.print(text)


def build_cli_logger(*, debug: bool, no_color: bool) -> CLILogger:
    """Return a :class:`CLILogger` configured from the CLI flags."""

    return CLILogger(use_color=not no_color, debug_enabled=debug)


__all__ = ["CLILogger", "build_cli_logger", "fail"]
