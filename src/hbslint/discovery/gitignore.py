# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git ignore-rule filtering backed by ``git check-ignore``."""

from __future__ import annotations

import subprocess  # nosec B404 - only used for the TimeoutExpired type
from collections.abc import Callable, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from ..process import CommandOptions, run_command

CommandRunner = Callable[..., CompletedProcess[str]]

_GIT_CHECK_IGNORE: Final[tuple[str, ...]] = ("git", "check-ignore", "-z", "--stdin")
_NUL: Final[str] = "\0"
_EXIT_SOME_IGNORED: Final[int] = 0
_TIMEOUT_SECONDS: Final[float] = 30.0


def filter_gitignored(
    paths: Sequence[str],
    root: Path,
    *,
    runner: CommandRunner = run_command,
) -> list[str]:
    """Return ``paths`` without the entries git would ignore.

    Outside a git work tree, or when git is unavailable, every path is kept.

    Args:
        paths: Candidate paths, relative to ``root`` or absolute.
        root: Directory git is invoked from.
        runner: Command runner, replaceable in tests.

    Returns:
        list[str]: Surviving paths in their original order.
    """

    if not paths:
        return []
    options = CommandOptions(cwd=root, input_text=_NUL.join(paths) + _NUL, timeout=_TIMEOUT_SECONDS)
    try:
        completed = runner(list(_GIT_CHECK_IGNORE), options=options)
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return list(paths)
    if completed.returncode != _EXIT_SOME_IGNORED:
        return list(paths)
    ignored = {entry for entry in (completed.stdout or "").split(_NUL) if entry}
    return [path for path in paths if path not in ignored]


__all__ = ["filter_gitignored"]
