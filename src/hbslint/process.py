# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrapper around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; arguments are passed as a list
# without shell expansion.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    input_text: str | None = None
    timeout: float | None = None


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute ``args`` capturing text output.

    Args:
        args: Command and argument sequence to execute.
        options: Execution options; defaults to :class:`CommandOptions`.

    Returns:
        CompletedProcess[str]: Subprocess execution metadata. Non-zero exit
        codes are returned, not raised.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
    """

    if not args:
        raise ValueError("args must not be empty")
    resolved = options or CommandOptions()
    executable = shutil.which(args[0])
    if executable is None:
        raise FileNotFoundError(args[0])
    return subprocess.run(  # nosec B603 - controlled arguments, not shell-expanded
        [executable, *args[1:]],
        cwd=str(resolved.cwd) if resolved.cwd is not None else None,
        input=resolved.input_text,
        capture_output=True,
        text=True,
        timeout=resolved.timeout,
        check=False,
    )


__all__ = ["CommandOptions", "run_command"]
