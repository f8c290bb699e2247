# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity aggregation and report rendering."""

from __future__ import annotations

from .aggregation import filter_by_severity
from .output import ReportWriter, summary_line

__all__ = ["ReportWriter", "filter_by_severity", "summary_line"]
