# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from .command import run_lint

app = typer.Typer(
    add_completion=False,
    help="Lint Handlebars templates through a pluggable verification engine.",
)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": ["-h"],
    },
)
def lint(ctx: typer.Context) -> None:
    """Lint PATTERN... (or standard input) and report the diagnostics.

    Recognised flags: --quiet, --json, --verbose, --config-path PATH,
    --debug and --no-color. Unknown flags are ignored.
    """

    raise typer.Exit(code=int(run_lint(ctx.args)))


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
