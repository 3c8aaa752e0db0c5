# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .lint import lint_command

app = typer.Typer(help="Lint result orchestration and remediation.", add_completion=False)


@app.callback()
def main() -> None:
    """Lint result orchestration and remediation."""


app.command("lint")(lint_command)

__all__ = ["app"]
