# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the lint command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hbslint.cli import command as command_module
from hbslint.cli.app import app
from hbslint.cli.command import LintServices, run_lint
from hbslint.exit_status import ExitCode
from hbslint.severity import Severity


def _services(engine, settings, **overrides) -> LintServices:
    return LintServices(engine_factory=lambda *, config_path: engine, settings=settings, **overrides)


def test_mixed_severities_report_and_fail(
    template_project: Path, fake_engine_cls, mixed_results, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    engine = fake_engine_cls(mixed_results)

    code = run_lint(["a.hbs", "b.hbs"], root=template_project, services=_services(engine, plain_settings))

    out = capsys.readouterr().out
    root = template_project
    assert code is ExitCode.FAILURE
    assert str(root / "a.hbs") in out
    assert str(root / "b.hbs") in out
    assert out.index(str(root / "a.hbs")) < out.index(str(root / "b.hbs"))
    assert out.rstrip().endswith("✖ 3 problems (1 errors, 2 warnings)")


def test_quiet_hides_warnings_but_keeps_failure(
    template_project: Path, fake_engine_cls, mixed_results, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    engine = fake_engine_cls(mixed_results)

    code = run_lint(["--quiet", "a.hbs", "b.hbs"], root=template_project, services=_services(engine, plain_settings))

    out = capsys.readouterr().out
    root = template_project
    assert code is ExitCode.FAILURE
    assert str(root / "a.hbs") not in out
    assert "Unclosed element" in out
    assert "Trailing whitespace" not in out
    assert out.rstrip().endswith("✖ 1 problems (1 errors, 0 warnings)")


def test_quiet_cannot_fail_a_warning_only_run(
    template_project: Path, fake_engine_cls, diagnostic, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    engine = fake_engine_cls({"a": [diagnostic(Severity.WARNING)]})

    code = run_lint(["--quiet", "a.hbs"], root=template_project, services=_services(engine, plain_settings))

    assert code is ExitCode.SUCCESS
    assert capsys.readouterr().out == ""


def test_json_counts_match_filtered_totals(
    template_project: Path, fake_engine_cls, mixed_results, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    engine = fake_engine_cls(mixed_results)

    code = run_lint(["--json", "--quiet", "*.hbs"], root=template_project, services=_services(engine, plain_settings))

    payload = json.loads(capsys.readouterr().out)
    root = template_project
    assert code is ExitCode.FAILURE
    assert payload == {
        str(root / "b.hbs"): [
            {"severity": 2, "message": "Unclosed element", "line": 1, "column": 0, "rule": "block-indentation"}
        ],
    }


def test_clean_run_prints_nothing(
    template_project: Path, fake_engine_cls, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    code = run_lint(["*.hbs"], root=template_project, services=_services(fake_engine_cls(), plain_settings))

    captured = capsys.readouterr()
    assert code is ExitCode.SUCCESS
    assert captured.out == ""
    assert captured.err == ""


def test_no_arguments_and_no_piped_input(
    tmp_path: Path, fake_engine_cls, detached_stdin_reader, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    engine = fake_engine_cls()

    code = run_lint([], root=tmp_path, services=_services(engine, plain_settings, reader=detached_stdin_reader))

    assert code is ExitCode.SUCCESS
    assert engine.calls == []
    assert capsys.readouterr().out == ""


def test_engine_construction_failure_is_fatal(
    template_project: Path, fake_engine_cls, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    constructed: list[str | None] = []

    def factory(*, config_path: str | None):
        constructed.append(config_path)
        raise RuntimeError(f"Cannot find config file at {config_path}")

    services = LintServices(engine_factory=factory, settings=plain_settings)
    code = run_lint(["--config-path", "nope.json", "a.hbs"], root=template_project, services=services)

    captured = capsys.readouterr()
    assert code is ExitCode.FAILURE
    assert constructed == ["nope.json"]
    assert captured.out == ""
    assert captured.err.strip() == "Cannot find config file at nope.json"


def test_invalid_settings_are_fatal(template_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (template_project / "pyproject.toml").write_text('[tool.hbslint]\nextension = "hbs"\n', encoding="utf-8")

    code = run_lint(["a.hbs"], root=template_project)

    captured = capsys.readouterr()
    assert code is ExitCode.FAILURE
    assert captured.out == ""
    assert "extension" in captured.err


def test_debug_traces_go_to_stderr(
    template_project: Path, fake_engine_cls, plain_settings, capsys: pytest.CaptureFixture[str]
) -> None:
    run_lint(["--debug", "a.hbs"], root=template_project, services=_services(fake_engine_cls(), plain_settings))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[debug] resolved=1" in captured.err


def test_cli_app_runs_registered_engine(
    template_project: Path, fake_engine_cls, mixed_results, monkeypatch: pytest.MonkeyPatch
) -> None:
    (template_project / "pyproject.toml").write_text(
        '[tool.hbslint]\nengine = "fake"\nrespect_gitignore = false\n', encoding="utf-8"
    )
    selected: list[str | None] = []

    def _resolve(name: str | None):
        selected.append(name)
        return name, lambda *, config_path: fake_engine_cls(mixed_results, config_path=config_path)

    monkeypatch.chdir(template_project)
    monkeypatch.setattr(command_module, "resolve_engine_factory", _resolve)

    result = CliRunner().invoke(app, ["--quiet", "--unknown-flag", "a.hbs", "b.hbs"])

    assert selected == ["fake"]
    assert result.exit_code == 1
    assert "✖ 1 problems (1 errors, 0 warnings)" in result.stdout


def test_module_entry_point_uses_cli_main() -> None:
    from hbslint import __main__ as module_entry
    from hbslint.cli import app as app_module

    assert module_entry.main is app_module.main
