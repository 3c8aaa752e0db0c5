# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised by the lint workflow."""

from __future__ import annotations


class LintUsageError(Exception):
    """Raised when the requested run is ambiguous or left in an inconsistent state.

    The CLI reports the message verbatim and exits with a non-zero status.
    """


class LintNoEffectError(Exception):
    """Raised by an engine when linting had nothing to act upon."""


__all__ = ["LintNoEffectError", "LintUsageError"]
