# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Human-oriented renderers (full console output and compact summary)."""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.text import Text

from ..models import LintMessage, LintResult
from ..severity import LintSeverity

CONTEXT_LINES: Final[int] = 2
OKAY_TEXT: Final[str] = "No lint messages."


def severity_style(severity: LintSeverity) -> str:
    """Return the rich style associated with a severity level."""

    return {
        LintSeverity.ERROR: "bold white on red",
        LintSeverity.WARNING: "bold black on yellow",
        LintSeverity.ADVICE: "bold white on magenta",
        LintSeverity.DISABLED: "dim",
    }.get(severity, "bold")


def _export(text: Text, *, color: bool) -> str:
    """Render ``text`` to a string, keeping ANSI styling only when ``color`` is set."""

    console = Console(
        file=StringIO(),
        record=True,
        force_terminal=color,
        no_color=not color,
        highlight=False,
        soft_wrap=True,
        width=120,
    )
    console.print(text, end="")
    return console.export_text(styles=color)


def _read_lines(path: Path) -> list[str] | None:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None


class ConsoleLintRenderer:
    """Render findings with a severity badge, message and surrounding source lines."""

    def __init__(self, *, show_autofix_patches: bool = True, color: bool = False) -> None:
        self.show_autofix_patches = show_autofix_patches
        self.color = color

    def render_preamble(self) -> str:
        return ""

    def render_postamble(self) -> str:
        return ""

    def render_lint_result(self, result: LintResult) -> str:
        messages = [
            message for message in result.findings if self.show_autofix_patches or not message.is_autofix
        ]
        if not messages:
            return ""
        source = _read_lines(result.file_path_on_disk)
        text = Text()
        text.append(">>> Lint for ", style="bold")
        text.append(result.path, style="bold underline")
        text.append(":\n\n")
        for message in messages:
            text.append_text(self._render_message(message, source))
            text.append("\n")
        return _export(text, color=self.color)

    def _render_message(self, message: LintMessage, source: list[str] | None) -> Text:
        text = Text("   ")
        text.append(f" {message.severity.value.capitalize()} ", style=severity_style(message.severity))
        text.append(f" ({message.code}) ", style="bold")
        text.append(message.name or message.code, style="bold")
        text.append("\n")
        if message.description:
            for line in message.description.splitlines():
                text.append(f"    {line}\n")
        if message.is_autofix:
            text.append("    (autofix available)\n", style="dim")
        if source is not None and message.line is not None:
            text.append("\n")
            text.append_text(self._render_context(message.line, source))
        return text

    @staticmethod
    def _render_context(line: int, source: list[str]) -> Text:
        text = Text()
        first = max(1, line - CONTEXT_LINES)
        last = min(len(source), line + CONTEXT_LINES)
        width = len(str(last))
        for number in range(first, last + 1):
            marker = ">>>" if number == line else "   "
            row = f"    {marker} {number:>{width}} {source[number - 1]}\n"
            text.append(row, style="bold" if number == line else "dim")
        return text

    def render_okay_result(self) -> str:
        text = Text()
        text.append(" OKAY ", style="bold white on green")
        text.append(f" {OKAY_TEXT}\n")
        return _export(text, color=self.color)


class SummaryLintRenderer:
    """Render one line per finding grouped under its path."""

    def render_preamble(self) -> str:
        return ""

    def render_postamble(self) -> str:
        return ""

    def render_lint_result(self, result: LintResult) -> str:
        if not result.findings:
            return ""
        rows = [f"{result.path}:"]
        for message in result.findings:
            location = f"Line {message.line}" if message.line is not None else "File"
            label = message.name or message.description or message.code
            rows.append(f"    {location}: {message.severity.value} ({message.code}) {label}")
        return "\n".join(rows) + "\n"

    def render_okay_result(self) -> str:
        return f"OKAY {OKAY_TEXT}\n"


__all__ = ["ConsoleLintRenderer", "SummaryLintRenderer", "severity_style"]
