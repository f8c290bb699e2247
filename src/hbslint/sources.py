# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read template source text for resolved inputs."""

from __future__ import annotations

import errno
from pathlib import Path

from .constants import STDIN_PATH
from .models import InputSource, NamedFile


class SourceReader:
    """Read inputs as UTF-8 text."""

    def __init__(self, *, stdin_path: Path = STDIN_PATH) -> None:
        self._stdin_path = stdin_path

    def read(self, source: InputSource) -> str | None:
        """Return the text behind ``source``.

        Args:
            source: Named file or standard stream.

        Returns:
            str | None: Full text, or ``None`` when standard input has no data
            source attached (``ENXIO``).

        Raises:
            OSError: For every other read failure.
        """

        path = source.path if isinstance(source, NamedFile) else self._stdin_path
        try:
            return self._read_text(path)
        except OSError as exc:
            if exc.errno == errno.ENXIO:
                return None
            raise

    def _read_text(self, path: Path) -> str:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()


__all__ = ["SourceReader"]
