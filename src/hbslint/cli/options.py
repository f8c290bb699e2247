# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse raw invocation arguments into :class:`RunOptions`."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..constants import FLAG_PREFIX
from ..models import RunOptions

QUIET_FLAG: Final[str] = "--quiet"
JSON_FLAG: Final[str] = "--json"
VERBOSE_FLAG: Final[str] = "--verbose"
CONFIG_PATH_FLAG: Final[str] = "--config-path"
DEBUG_FLAG: Final[str] = "--debug"
NO_COLOR_FLAG: Final[str] = "--no-color"


@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Run options together with the positional file arguments."""

    options: RunOptions
    patterns: tuple[str, ...]


def parse_arguments(argv: Sequence[str]) -> ParsedArguments:
    """Split ``argv`` into run options and positional patterns.

    Tokens starting with ``--`` are never positional, whether recognised or
    not. The token following ``--config-path`` is its value and is consumed;
    when the flag is last the value is ``None``.

    Args:
        argv: Raw arguments, excluding the program name.

    Returns:
        ParsedArguments: Immutable options plus patterns in argument order.
    """

    flags: set[str] = set()
    patterns: list[str] = []
    config_path: str | None = None
    tokens = list(argv)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token.startswith(FLAG_PREFIX):
            patterns.append(token)
            continue
        flags.add(token)
        if token == CONFIG_PATH_FLAG and config_path is None:
            if index < len(tokens):
                config_path = tokens[index]
                index += 1
    options = RunOptions(
        quiet=QUIET_FLAG in flags,
        json=JSON_FLAG in flags,
        verbose=VERBOSE_FLAG in flags,
        config_path=config_path,
        debug=DEBUG_FLAG in flags,
        no_color=NO_COLOR_FLAG in flags,
    )
    return ParsedArguments(options=options, patterns=tuple(patterns))


__all__ = ["ParsedArguments", "parse_arguments"]
