# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Derive the immutable per-run policy from command-line flags."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..errors import LintUsageError
from ..renderers import OUTPUT_FORMATS, is_machine_readable
from ..severity import DEFAULT_SEVERITY, LintSeverity
from .scope import ScopeRequest, decide_lint_all


class PatchMode(str, Enum):
    """How suggested patches are handled."""

    NEVER = "never"
    ALWAYS_SILENT = "always_silent"
    PROMPT_ALL = "prompt_all"
    PROMPT_AUTOFIX_ONLY = "prompt_autofix_only"


class AmendMode(str, Enum):
    """How working-tree changes written by patches are folded into HEAD."""

    OFF = "off"
    ALL_SILENT = "all_silent"
    AUTOFIX_SILENT = "autofix_silent"
    PROMPT_ALL = "prompt_all"


class LintFlags(BaseModel):
    """Flags that shape a single lint run, before validation."""

    model_config = ConfigDict(frozen=True)

    scope: ScopeRequest = ScopeRequest()
    severity: LintSeverity = DEFAULT_SEVERITY
    output: str = "default"
    outfile: Path | None = None
    apply_patches: bool = False
    never_apply_patches: bool = False
    amend_all: bool = False
    amend_autofixes: bool = False
    amend_changes: bool = False
    standalone: bool = True
    color: bool = False


class RunPolicy(BaseModel):
    """Every decision input for one run, computed once and never mutated."""

    model_config = ConfigDict(frozen=True)

    min_severity: LintSeverity
    lint_all: bool
    patch_mode: PatchMode
    amend_mode: AmendMode
    output_format: str
    outfile: Path | None = None
    standalone: bool = True
    color: bool = False

    @property
    def machine_readable(self) -> bool:
        return is_machine_readable(self.output_format)

    @property
    def show_autofix_patches(self) -> bool:
        """Return ``False`` when autofixes are applied without asking, so listing them is noise."""

        return self.patch_mode is not PatchMode.PROMPT_AUTOFIX_ONLY


def _patch_mode(flags: LintFlags) -> PatchMode:
    if is_machine_readable(flags.output):
        return PatchMode.ALWAYS_SILENT if flags.apply_patches else PatchMode.NEVER
    if flags.never_apply_patches:
        return PatchMode.NEVER
    if flags.apply_patches:
        return PatchMode.ALWAYS_SILENT
    if flags.amend_autofixes:
        return PatchMode.PROMPT_AUTOFIX_ONLY
    return PatchMode.PROMPT_ALL


def _amend_mode(flags: LintFlags) -> AmendMode:
    if flags.amend_all:
        return AmendMode.ALL_SILENT
    if flags.amend_autofixes:
        return AmendMode.AUTOFIX_SILENT
    if flags.amend_changes:
        return AmendMode.PROMPT_ALL
    return AmendMode.OFF


def build_run_policy(flags: LintFlags) -> RunPolicy:
    """Validate ``flags`` and derive the :class:`RunPolicy` for the run.

    Args:
        flags: Flags collected from the command line and configuration.

    Returns:
        RunPolicy: Frozen policy passed to every workflow component.

    Raises:
        LintUsageError: If flags conflict or name an unknown output format.
    """

    if flags.apply_patches and flags.never_apply_patches:
        raise LintUsageError("--apply-patches and --never-apply-patches are mutually exclusive")
    if flags.output not in OUTPUT_FORMATS:
        choices = ", ".join(OUTPUT_FORMATS)
        raise LintUsageError(f"Unknown output format '{flags.output}'; expected one of: {choices}")
    return RunPolicy(
        min_severity=flags.severity,
        lint_all=decide_lint_all(flags.scope),
        patch_mode=_patch_mode(flags),
        amend_mode=_amend_mode(flags),
        output_format=flags.output,
        outfile=flags.outfile,
        standalone=flags.standalone,
        color=flags.color,
    )


__all__ = ["AmendMode", "LintFlags", "PatchMode", "RunPolicy", "build_run_policy"]
