# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for status classification of unresolved findings."""

from __future__ import annotations

from lintgate.models import LintResult, ResultCode
from lintgate.severity import LintSeverity
from lintgate.workflow.classify import classify_results


def test_error_and_warning_yield_errors(make_message) -> None:
    result = LintResult(
        path="a.txt",
        findings=[make_message(severity=LintSeverity.ERROR), make_message(severity=LintSeverity.WARNING)],
    )
    classification = classify_results([result])
    assert classification.result_code is ResultCode.ERRORS
    assert len(classification.unresolved) == 2


def test_warning_only_yields_warnings(make_message) -> None:
    result = LintResult(path="a.txt", findings=[make_message(severity=LintSeverity.WARNING)])
    assert classify_results([result]).result_code is ResultCode.WARNINGS


def test_advice_only_is_okay_but_unresolved(make_message) -> None:
    advice = make_message(severity=LintSeverity.ADVICE)
    classification = classify_results([LintResult(path="a.txt", findings=[advice])])
    assert classification.result_code is ResultCode.OKAY
    assert classification.unresolved == (advice,)


def test_no_findings_is_okay() -> None:
    classification = classify_results([LintResult(path="a.txt")])
    assert classification.result_code is ResultCode.OKAY
    assert classification.unresolved == ()


def test_applied_patches_are_resolved(make_message) -> None:
    error = make_message(severity=LintSeverity.ERROR, original_text="x", replacement_text="y")
    error.patch_applied = True
    warning = make_message("b.txt", severity=LintSeverity.WARNING)
    classification = classify_results(
        [LintResult(path="a.txt", findings=[error]), LintResult(path="b.txt", findings=[warning])],
    )
    assert classification.result_code is ResultCode.WARNINGS
    assert classification.unresolved == (warning,)
