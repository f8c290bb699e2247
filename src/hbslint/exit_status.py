# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process exit status decisions."""

from __future__ import annotations

from enum import IntEnum

from .models import LintRun


class ExitCode(IntEnum):
    """Exit codes returned by the command-line interface."""

    SUCCESS = 0
    FAILURE = 1


def decide_exit_status(run: LintRun) -> ExitCode:
    """Return the exit code for ``run``.

    Only the unfiltered outcome counts, so ``--quiet`` and ``--json`` never
    change the result.
    """

    return ExitCode.FAILURE if run.failed else ExitCode.SUCCESS


__all__ = ["ExitCode", "decide_exit_status"]
