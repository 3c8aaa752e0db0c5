# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint command implementation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, LintConfig, load_config
from ..console import detect_tty
from ..errors import LintUsageError
from ..process import SubprocessExecutionError
from ..renderers import OUTPUT_FORMATS
from ..severity import parse_severity
from ..vcs import GitRepository
from ..workflow import LintFlags, LintWorkflow, ScopeRequest, load_engine
from .shared import CLIError, CLILogger, build_cli_logger


def _typer_confirm(prompt: str, default: bool) -> bool:
    return typer.confirm(prompt, default=default)


def lint_command(
    paths: Annotated[list[str] | None, typer.Argument(help="Paths to lint. Defaults to changed files.")] = None,
    rev: Annotated[
        str | None,
        typer.Option("--rev", metavar="REVISION", help="Lint changes since a specific revision."),
    ] = None,
    everything: Annotated[bool, typer.Option("--everything", help="Lint all files in the project.")] = False,
    lintall: Annotated[
        bool,
        typer.Option(
            "--lintall",
            help="Show all lint warnings, not just those on changed lines. Default when paths are given.",
        ),
    ] = False,
    severity: Annotated[
        str | None,
        typer.Option("--severity", help="Minimum message severity: disabled, advice, warning or error."),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option("--output", metavar="FORMAT", help=f"Output format: {', '.join(OUTPUT_FORMATS)}."),
    ] = None,
    outfile: Annotated[
        Path | None,
        typer.Option("--outfile", help="Write linter results to this file instead of stdout."),
    ] = None,
    apply_patches: Annotated[
        bool,
        typer.Option("--apply-patches", help="Apply patches suggested by lint without prompting."),
    ] = False,
    never_apply_patches: Annotated[
        bool,
        typer.Option("--never-apply-patches", help="Never apply patches suggested by lint."),
    ] = False,
    amend_all: Annotated[
        bool,
        typer.Option("--amend-all", help="Amend HEAD with all patches suggested by lint without prompting."),
    ] = False,
    amend_autofixes: Annotated[
        bool,
        typer.Option("--amend-autofixes", help="Amend HEAD with autofix patches suggested by lint without prompting."),
    ] = False,
    engine: Annotated[
        str | None,
        typer.Option("--engine", metavar="MODULE:ATTR", help="Override the configured lint engine."),
    ] = None,
    root: Annotated[Path, typer.Option("--root", help="Project root.")] = Path(),
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in log messages.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Emit debug diagnostics.")] = False,
) -> None:
    """Run static analysis on changes, apply suggested patches and report a status."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    if debug:
        _ensure_debug_logging()
    _validate_cli_combinations(
        apply_patches=apply_patches,
        never_apply_patches=never_apply_patches,
        output=output,
    )
    try:
        min_severity = parse_severity(severity) if severity is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--severity") from exc

    try:
        config = load_config(root)
        flags = LintFlags(
            scope=ScopeRequest(paths=tuple(paths or ()), everything=everything, rev=rev, lintall=lintall),
            severity=min_severity or config.severity,
            output=output or config.output,
            outfile=outfile,
            apply_patches=apply_patches,
            never_apply_patches=never_apply_patches,
            amend_all=amend_all,
            amend_autofixes=amend_autofixes,
            amend_changes=config.amend,
            color=outfile is None and not no_color and detect_tty(),
        )
        workflow = _build_workflow(config, root=root, engine_ref=engine, logger=logger)
        outcome = workflow.run(flags)
    except (LintUsageError, ConfigError, CLIError, SubprocessExecutionError, OSError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=getattr(exc, "exit_code", 1)) from exc

    logger.debug(f"result={outcome.result_code.name} unresolved={len(outcome.unresolved_findings)}")
    raise typer.Exit(code=outcome.exit_status)


def _ensure_debug_logging() -> None:
    """Stream debug records from every ``lintgate`` module to stderr."""

    package_logger = logging.getLogger("lintgate")
    if getattr(package_logger, "_lintgate_debug_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False
    setattr(package_logger, "_lintgate_debug_configured", True)


def _validate_cli_combinations(*, apply_patches: bool, never_apply_patches: bool, output: str | None) -> None:
    """Guard against unsupported flag combinations before any work starts.

    Raises:
        typer.BadParameter: If incompatible flags are combined or a value is unknown.
    """

    if apply_patches and never_apply_patches:
        raise typer.BadParameter("--apply-patches and --never-apply-patches are mutually exclusive")
    if output is not None and output not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"--output must be one of: {', '.join(OUTPUT_FORMATS)}")


def _build_workflow(config: LintConfig, *, root: Path, engine_ref: str | None, logger: CLILogger) -> LintWorkflow:
    """Wire the engine, repository and console collaborators for a run.

    Raises:
        CLIError: If no engine is configured.
        ConfigError: If the configured engine cannot be loaded.
    """

    reference = engine_ref or config.engine
    if not reference:
        raise CLIError("No lint engine configured. Pass --engine or set 'engine' under [tool.lintgate].")
    logger.debug(f"engine={reference} root={root}")
    repository = GitRepository(root, diff_ref=config.diff_ref, history_immutable=config.history_immutable)
    return LintWorkflow(
        engine=load_engine(reference),
        repository=repository,
        confirm=_typer_confirm,
        writer=logger.echo,
        notice=logger.warn,
    )


__all__ = ["lint_command"]
