# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class LintSeverity(str, Enum):
    """Severity levels attached to lint findings, ordered from least to most severe."""

    DISABLED = "disabled"
    ADVICE = "advice"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Return the ordinal used when comparing severities.

        Returns:
            int: Larger values denote more severe findings.
        """

        return _SEVERITY_RANK[self]

    def is_error(self) -> bool:
        """Return ``True`` for error-severity findings."""

        return self is LintSeverity.ERROR

    def is_warning(self) -> bool:
        """Return ``True`` for warning-severity findings."""

        return self is LintSeverity.WARNING

    def at_least(self, floor: LintSeverity) -> bool:
        """Return ``True`` when this severity meets ``floor``.

        Args:
            floor: Minimum severity a finding must reach to be reported.

        Returns:
            bool: ``True`` when ``self`` is at or above ``floor``.
        """

        return self.rank >= floor.rank


_SEVERITY_RANK: Final[dict[LintSeverity, int]] = {
    LintSeverity.DISABLED: 0,
    LintSeverity.ADVICE: 1,
    LintSeverity.WARNING: 2,
    LintSeverity.ERROR: 3,
}

DEFAULT_SEVERITY: Final[LintSeverity] = LintSeverity.ADVICE


def parse_severity(value: str | LintSeverity) -> LintSeverity:
    """Return the :class:`LintSeverity` named by ``value``.

    Args:
        value: Severity name (case-insensitive) or an existing severity.

    Returns:
        LintSeverity: Matching severity member.

    Raises:
        ValueError: If ``value`` does not name a known severity.
    """

    if isinstance(value, LintSeverity):
        return value
    normalised = value.strip().lower()
    try:
        return LintSeverity(normalised)
    except ValueError as exc:
        choices = ", ".join(f"'{member.value}'" for member in LintSeverity)
        raise ValueError(f"invalid severity '{value}': expected one of {choices}") from exc


__all__ = ["DEFAULT_SEVERITY", "LintSeverity", "parse_severity"]
