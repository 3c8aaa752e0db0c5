# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Renderers intended for automated consumers (JSON, compiler, Checkstyle XML, none)."""

from __future__ import annotations

import json
from typing import Final
from xml.sax.saxutils import quoteattr

from ..models import LintMessage, LintResult
from ..severity import LintSeverity

CHECKSTYLE_VERSION: Final[str] = "4.3"

_CHECKSTYLE_SEVERITY: Final[dict[LintSeverity, str]] = {
    LintSeverity.ERROR: "error",
    LintSeverity.WARNING: "warning",
    LintSeverity.ADVICE: "info",
    LintSeverity.DISABLED: "ignore",
}


def serialize_message(message: LintMessage) -> dict[str, object]:
    """Return a JSON-compatible mapping describing ``message``."""

    return {
        "line": message.line,
        "char": message.char,
        "code": message.code,
        "severity": message.severity.value,
        "name": message.name,
        "description": message.description,
        "original": message.original_text,
        "replacement": message.replacement_text,
        "autofix": message.is_autofix,
        "patchApplied": message.patch_applied,
    }


class JSONLintRenderer:
    """Emit one JSON object per result, keyed by path, one object per line."""

    def render_preamble(self) -> str:
        return ""

    def render_lint_result(self, result: LintResult) -> str:
        payload = {result.path: [serialize_message(message) for message in result.findings]}
        return json.dumps(payload, sort_keys=True) + "\n"

    def render_postamble(self) -> str:
        return ""

    def render_okay_result(self) -> str:
        return ""


class CompilerLintRenderer:
    """Emit ``path:line:severity (code) name: description`` lines for editors."""

    def render_preamble(self) -> str:
        return ""

    def render_lint_result(self, result: LintResult) -> str:
        lines = []
        for message in result.findings:
            line = message.line if message.line is not None else ""
            description = " ".join(message.description.split())
            lines.append(
                f"{result.path}:{line}:{message.severity.value} ({message.code}) {message.name}: {description}\n",
            )
        return "".join(lines)

    def render_postamble(self) -> str:
        return ""

    def render_okay_result(self) -> str:
        return ""


class CheckstyleXMLLintRenderer:
    """Emit a Checkstyle-compatible XML document."""

    def render_preamble(self) -> str:
        return f'<?xml version="1.0" encoding="UTF-8"?>\n<checkstyle version="{CHECKSTYLE_VERSION}">\n'

    def render_lint_result(self, result: LintResult) -> str:
        rows = [f"  <file name={quoteattr(result.path)}>\n"]
        for message in result.findings:
            attrs = {
                "line": str(message.line) if message.line is not None else None,
                "column": str(message.char) if message.char is not None else None,
                "severity": _CHECKSTYLE_SEVERITY.get(message.severity, "info"),
                "message": message.description or message.name,
                "source": message.code,
            }
            rendered = " ".join(f"{key}={quoteattr(value)}" for key, value in attrs.items() if value is not None)
            rows.append(f"    <error {rendered} />\n")
        rows.append("  </file>\n")
        return "".join(rows)

    def render_postamble(self) -> str:
        return "</checkstyle>\n"

    def render_okay_result(self) -> str:
        return ""


class NoneLintRenderer:
    """Render nothing at all."""

    def render_preamble(self) -> str:
        return ""

    def render_lint_result(self, result: LintResult) -> str:
        return ""

    def render_postamble(self) -> str:
        return ""

    def render_okay_result(self) -> str:
        return ""


__all__ = [
    "CheckstyleXMLLintRenderer",
    "CompilerLintRenderer",
    "JSONLintRenderer",
    "NoneLintRenderer",
    "serialize_message",
]
