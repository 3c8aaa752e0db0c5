# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint workflow components."""

from __future__ import annotations

from .amend import AmendCoordinator, effective_amend_mode
from .classify import Classification, classify_results
from .engine import EngineOutcome, invoke_engine, load_engine
from .output import OutputRouter, should_render
from .patching import LintPatcher, PatchCoordinator, PatchDecision
from .policy import AmendMode, LintFlags, PatchMode, RunPolicy, build_run_policy
from .runner import LintWorkflow
from .scope import LintScope, ScopeRequest, decide_lint_all, resolve_scope

__all__ = [
    "AmendCoordinator",
    "AmendMode",
    "Classification",
    "EngineOutcome",
    "LintFlags",
    "LintPatcher",
    "LintScope",
    "LintWorkflow",
    "OutputRouter",
    "PatchCoordinator",
    "PatchDecision",
    "PatchMode",
    "RunPolicy",
    "ScopeRequest",
    "build_run_policy",
    "classify_results",
    "decide_lint_all",
    "effective_amend_mode",
    "invoke_engine",
    "load_engine",
    "resolve_scope",
    "should_render",
]
