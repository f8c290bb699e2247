# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint command implementation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..config import ConfigError, LintSettings, load_settings
from ..discovery import FileResolver, GlobExpander, PathGlobExpander
from ..engine import (
    EngineConstructionError,
    EngineFactory,
    VerificationEngine,
    construct_engine,
    resolve_engine_factory,
)
from ..exit_status import ExitCode, decide_exit_status
from ..logging import CLILogger, build_cli_logger
from ..models import RunOptions
from ..orchestration import LintOrchestrator
from ..reporting import ReportWriter, filter_by_severity
from ..sources import SourceReader
from .options import parse_arguments


@dataclass(slots=True)
class LintServices:
    """Collaborators a run may have injected instead of the defaults."""

    engine_factory: EngineFactory | None = None
    expander: GlobExpander | None = None
    reader: SourceReader | None = None
    settings: LintSettings | None = None


def run_lint(
    argv: Sequence[str],
    *,
    root: Path | None = None,
    services: LintServices | None = None,
) -> ExitCode:
    """Execute one lint run for the raw arguments ``argv``.

    Args:
        argv: Raw arguments, excluding the program name.
        root: Working directory for settings and glob expansion.
        services: Optional collaborators overriding the defaults.

    Returns:
        ExitCode: Process exit status for the run.
    """

    parsed = parse_arguments(argv)
    options = parsed.options
    logger = build_cli_logger(debug=options.debug, no_color=options.no_color)
    workdir = Path.cwd() if root is None else root
    provided = services or LintServices()

    try:
        settings = provided.settings if provided.settings is not None else load_settings(workdir)
        engine = _build_engine(options, settings, provided, logger)
    except (ConfigError, EngineConstructionError) as exc:
        logger.fail(str(exc))
        return ExitCode.FAILURE
    logger.debug(
        f"extension={settings.extension} respect_gitignore={settings.respect_gitignore} "
        f"quiet={options.quiet} json={options.json}"
    )

    expander = provided.expander or PathGlobExpander(workdir)
    sources = FileResolver(expander, settings, root=workdir).resolve(parsed.patterns)
    logger.debug(f"resolved={len(sources)}")

    orchestrator = LintOrchestrator(engine, provided.reader or SourceReader(), logger=logger)
    run = orchestrator.run(sources)
    exit_code = decide_exit_status(run)

    if run.diagnostics:
        counts = filter_by_severity(run.diagnostics, quiet=options.quiet)
        ReportWriter(options).write(run.diagnostics, counts, engine)
    logger.debug(f"files_with_diagnostics={len(run.diagnostics)} exit={int(exit_code)}")
    return exit_code


def _build_engine(
    options: RunOptions,
    settings: LintSettings,
    services: LintServices,
    logger: CLILogger,
) -> VerificationEngine:
    """Return the single engine instance for the run.

    Raises:
        EngineConstructionError: If the engine cannot be located or built.
    """

    factory = services.engine_factory
    if factory is None:
        name, factory = resolve_engine_factory(settings.engine)
        logger.debug(f"engine={name}")
    return construct_engine(factory, config_path=options.config_path)


__all__ = ["LintServices", "run_lint"]
