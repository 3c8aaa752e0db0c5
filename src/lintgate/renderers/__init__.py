# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Renderer selection for the supported output formats."""

from __future__ import annotations

from typing import Final

from ..errors import LintUsageError
from ..interfaces import LintRenderer
from .console import ConsoleLintRenderer, SummaryLintRenderer
from .machine import CheckstyleXMLLintRenderer, CompilerLintRenderer, JSONLintRenderer, NoneLintRenderer

OUTPUT_FORMATS: Final[tuple[str, ...]] = ("default", "summary", "json", "none", "compiler", "xml")

# Formats consumed by tools rather than people; these runs never prompt.
MACHINE_READABLE_FORMATS: Final[frozenset[str]] = frozenset({"json", "none", "compiler", "xml"})


def is_machine_readable(output_format: str) -> bool:
    return output_format in MACHINE_READABLE_FORMATS


def select_renderer(output_format: str, *, show_autofix_patches: bool = True, color: bool = False) -> LintRenderer:
    """Return the renderer for ``output_format``.

    Args:
        output_format: One of :data:`OUTPUT_FORMATS`.
        show_autofix_patches: Whether the console renderer lists autofix findings.
        color: Whether the console renderer may emit ANSI styling.

    Returns:
        LintRenderer: Renderer instance.

    Raises:
        LintUsageError: If ``output_format`` is not recognised.
    """

    match output_format:
        case "default":
            return ConsoleLintRenderer(show_autofix_patches=show_autofix_patches, color=color)
        case "summary":
            return SummaryLintRenderer()
        case "json":
            return JSONLintRenderer()
        case "none":
            return NoneLintRenderer()
        case "compiler":
            return CompilerLintRenderer()
        case "xml":
            return CheckstyleXMLLintRenderer()
    choices = ", ".join(OUTPUT_FORMATS)
    raise LintUsageError(f"Unknown output format '{output_format}'; expected one of: {choices}")


__all__ = [
    "MACHINE_READABLE_FORMATS",
    "OUTPUT_FORMATS",
    "CheckstyleXMLLintRenderer",
    "CompilerLintRenderer",
    "ConsoleLintRenderer",
    "JSONLintRenderer",
    "NoneLintRenderer",
    "SummaryLintRenderer",
    "is_machine_readable",
    "select_renderer",
]
