# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import errno
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest

from hbslint.config import LintSettings
from hbslint.engine import BaseEngine
from hbslint.models import Diagnostic, DiagnosticLike
from hbslint.severity import Severity
from hbslint.sources import SourceReader


class FakeEngine(BaseEngine):
    """Engine returning canned diagnostics keyed by module name."""

    def __init__(
        self,
        results: Mapping[str, Sequence[DiagnosticLike]] | None = None,
        *,
        config_path: str | None = None,
    ) -> None:
        super().__init__(config_path=config_path)
        self.results = dict(results or {})
        self.calls: list[tuple[str, str]] = []

    def verify(self, source: str, module_name: str) -> Sequence[DiagnosticLike]:
        self.calls.append((source, module_name))
        return list(self.results.get(module_name, []))


class FakeExpander:
    """Glob capability returning canned matches per pattern."""

    def __init__(self, matches: Mapping[str, Sequence[str]]) -> None:
        self.matches = dict(matches)
        self.calls: list[str] = []

    def expand(self, pattern: str, *, exclude_dirs: Sequence[str], respect_gitignore: bool) -> list[str]:
        self.calls.append(pattern)
        return list(self.matches.get(pattern, []))


class DetachedStdinReader(SourceReader):
    """Reader behaving as if nothing were piped into standard input."""

    def _read_text(self, path: Path) -> str:
        if path == Path("/dev/stdin"):
            raise OSError(errno.ENXIO, "No such device or address", str(path))
        return super()._read_text(path)


def make_diagnostic(
    severity: int,
    message: str = "issue",
    *,
    line: int = 1,
    column: int = 0,
    rule: str | None = None,
) -> Diagnostic:
    return Diagnostic(severity=severity, message=message, line=line, column=column, rule=rule)


@pytest.fixture
def diagnostic() -> Callable[..., Diagnostic]:
    """Return a factory building diagnostics."""
    return make_diagnostic


@pytest.fixture
def fake_engine_cls() -> type[FakeEngine]:
    return FakeEngine


@pytest.fixture
def fake_expander_cls() -> type[FakeExpander]:
    return FakeExpander


@pytest.fixture
def detached_stdin_reader() -> SourceReader:
    return DetachedStdinReader()


@pytest.fixture
def plain_settings() -> LintSettings:
    """Return settings that never shell out to git."""
    return LintSettings(respect_gitignore=False)


@pytest.fixture
def template_project(tmp_path: Path) -> Path:
    """Create ``a.hbs`` and ``b.hbs`` under a fresh project directory."""
    (tmp_path / "a.hbs").write_text("<div>{{a}}</div>\n", encoding="utf-8")
    (tmp_path / "b.hbs").write_text("<p>{{b}}</p>\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def mixed_results() -> dict[str, list[Diagnostic]]:
    """Return one warning for ``a`` and an error plus a warning for ``b``."""
    return {
        "a": [make_diagnostic(Severity.WARNING, "Unexpected bare string", line=1, column=5, rule="no-bare-strings")],
        "b": [
            make_diagnostic(Severity.WARNING, "Trailing whitespace", line=1, column=12, rule="no-trailing-spaces"),
            make_diagnostic(Severity.ERROR, "Unclosed element", line=1, column=0, rule="block-indentation"),
        ],
    }
