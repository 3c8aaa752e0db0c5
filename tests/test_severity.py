# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for severity ordering and parsing."""

from __future__ import annotations

import pytest

from lintgate.severity import DEFAULT_SEVERITY, LintSeverity, parse_severity


def test_severities_are_ordered_from_disabled_to_error() -> None:
    ordered = sorted(LintSeverity, key=lambda severity: severity.rank)
    assert ordered == [
        LintSeverity.DISABLED,
        LintSeverity.ADVICE,
        LintSeverity.WARNING,
        LintSeverity.ERROR,
    ]


def test_at_least_compares_against_floor() -> None:
    assert LintSeverity.ERROR.at_least(LintSeverity.WARNING)
    assert LintSeverity.WARNING.at_least(LintSeverity.WARNING)
    assert not LintSeverity.ADVICE.at_least(LintSeverity.WARNING)


def test_default_severity_is_advice() -> None:
    assert DEFAULT_SEVERITY is LintSeverity.ADVICE


@pytest.mark.parametrize("raw", ["warning", "WARNING", " Warning "])
def test_parse_severity_is_case_insensitive(raw: str) -> None:
    assert parse_severity(raw) is LintSeverity.WARNING


def test_parse_severity_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="invalid severity 'fatal'"):
        parse_severity("fatal")
