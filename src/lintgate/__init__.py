# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint result orchestration: surface findings, apply patches, amend commits."""

from __future__ import annotations

from .models import FileResult, Finding, LintMessage, LintResult, ResultCode, RunOutcome
from .severity import LintSeverity

__version__ = "0.1.0"

__all__ = [
    "FileResult",
    "Finding",
    "LintMessage",
    "LintResult",
    "LintSeverity",
    "ResultCode",
    "RunOutcome",
    "__version__",
]
