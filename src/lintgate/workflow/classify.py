# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reduce lint results to a status code and the list of unresolved findings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..models import LintMessage, LintResult, ResultCode


@dataclass(slots=True, frozen=True)
class Classification:
    result_code: ResultCode
    unresolved: tuple[LintMessage, ...]


def classify_results(results: Iterable[LintResult]) -> Classification:
    """Return the most severe status among findings whose patch was not applied.

    Args:
        results: Results after patching.

    Returns:
        Classification: ``ERRORS`` if any unresolved error remains, else
        ``WARNINGS`` if any unresolved warning remains, else ``OKAY``.
    """

    unresolved: list[LintMessage] = []
    has_errors = False
    has_warnings = False
    for result in results:
        for message in result.findings:
            if message.patch_applied:
                continue
            if message.is_error():
                has_errors = True
            elif message.is_warning():
                has_warnings = True
            unresolved.append(message)

    if has_errors:
        code = ResultCode.ERRORS
    elif has_warnings:
        code = ResultCode.WARNINGS
    else:
        code = ResultCode.OKAY
    return Classification(result_code=code, unresolved=tuple(unresolved))


__all__ = ["Classification", "classify_results"]
