# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers shared by the CLI and reporting layers."""

from __future__ import annotations

from .console import RichConsoleManager, detect_tty, get_console_manager

__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
