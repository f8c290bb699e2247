# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Input discovery: glob expansion, ignore rules and source resolution."""

from __future__ import annotations

from .base import GlobExpander
from .globbing import PathGlobExpander
from .resolver import FileResolver

__all__ = ["FileResolver", "GlobExpander", "PathGlobExpander"]
