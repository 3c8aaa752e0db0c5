# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide, preview and apply patches suggested by lint findings."""

from __future__ import annotations

import difflib
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

from ..interfaces import Confirmer
from ..models import LintMessage, LintResult
from .policy import PatchMode, RunPolicy

LOGGER = logging.getLogger(__name__)

MISSING_FILE_LABEL: Final[str] = "/dev/null"


@dataclass(slots=True, frozen=True)
class _Edit:
    offset: int
    message: LintMessage

    @property
    def end(self) -> int:
        return self.offset + len(self.message.original_text or "")


class LintPatcher:
    """Compute and write the patched content for one :class:`LintResult`.

    Edits are ``original_text`` → ``replacement_text`` substitutions anchored at
    the 1-based ``(line, char)`` of each message; a message without a line is
    anchored at the start of the file. Edits that overlap an earlier one, or
    whose original text no longer matches, are left out.
    """

    def __init__(self, result: LintResult) -> None:
        self.result = result

    @property
    def path(self) -> Path:
        return self.result.file_path_on_disk

    def original_content(self) -> str:
        """Return the on-disk content, or an empty string when the file is missing.

        Line endings are preserved as stored.

        Raises:
            UnicodeDecodeError: If the file is not valid UTF-8.
        """

        if not self.path.exists():
            return ""
        with self.path.open(encoding="utf-8", newline="") as handle:
            return handle.read()

    def _plan(self, content: str) -> list[_Edit]:
        line_starts = [0]
        for index, char in enumerate(content):
            if char == "\n":
                line_starts.append(index + 1)

        candidates: list[_Edit] = []
        for message in self.result.patches:
            if not message.needs_patch:
                continue
            offset = _offset_for(message, line_starts)
            if offset is None:
                LOGGER.debug("patch for %s:%s is out of range", message.path, message.line)
                continue
            original = message.original_text or ""
            if content[offset : offset + len(original)] != original:
                LOGGER.debug("patch for %s:%s no longer matches", message.path, message.line)
                continue
            candidates.append(_Edit(offset=offset, message=message))

        planned: list[_Edit] = []
        cursor = 0
        for edit in sorted(candidates, key=lambda item: item.offset):
            if edit.offset < cursor:
                continue
            planned.append(edit)
            cursor = edit.end
        return planned

    def modified_content(self) -> str:
        """Return the file content with every applicable patch applied."""

        content = self.original_content()
        return _apply(content, self._plan(content))

    def write_patch_to_disk(self) -> list[LintMessage]:
        """Write the patched content and mark the applied messages.

        Returns:
            list[LintMessage]: Messages whose patches were written; empty when
            nothing was left to apply, in which case the file is not touched.
        """

        content = self.original_content()
        plan = self._plan(content)
        if not plan:
            return []
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(_apply(content, plan))
        for edit in plan:
            edit.message.patch_applied = True
        return [edit.message for edit in plan]


def _offset_for(message: LintMessage, line_starts: Sequence[int]) -> int | None:
    if message.line is None:
        return 0
    if message.line < 1 or message.line > len(line_starts):
        return None
    return line_starts[message.line - 1] + max((message.char or 1) - 1, 0)


def _apply(content: str, plan: Sequence[_Edit]) -> str:
    pieces: list[str] = []
    cursor = 0
    for edit in plan:
        pieces.append(content[cursor : edit.offset])
        pieces.append(edit.message.replacement_text or "")
        cursor = edit.end
    pieces.append(content[cursor:])
    return "".join(pieces)


def render_patch_preview(patcher: LintPatcher) -> str:
    """Return a unified diff between the on-disk file and its patched content."""

    old_label = str(patcher.path) if patcher.path.exists() else MISSING_FILE_LABEL
    diff = difflib.unified_diff(
        patcher.original_content().splitlines(keepends=True),
        patcher.modified_content().splitlines(keepends=True),
        fromfile=old_label,
        tofile=str(patcher.path),
    )
    return "".join(line if line.endswith("\n") else f"{line}\n" for line in diff)


class PatchDecision(str, Enum):
    """Terminal state reached for one result."""

    NOT_ELIGIBLE = "not_eligible"
    SKIPPED = "skipped"
    APPLIED = "applied"


@dataclass(slots=True)
class PatchCoordinator:
    """Apply patches result by result according to the run's patch mode."""

    policy: RunPolicy
    confirm: Confirmer
    echo: Callable[[str], None]
    wrote_to_disk: bool = False
    all_patches_were_autofix: bool = True
    decisions: list[tuple[str, PatchDecision]] = field(default_factory=list)

    def observe_rendered(self, result: LintResult) -> None:
        """Record that ``result`` reached the renderer."""

        if not result.is_all_autofix:
            self.all_patches_were_autofix = False

    def is_eligible(self, result: LintResult) -> bool:
        return self.policy.patch_mode is not PatchMode.NEVER and result.is_patchable

    def needs_confirmation(self, result: LintResult) -> bool:
        if self.policy.patch_mode is PatchMode.ALWAYS_SILENT:
            return False
        if self.policy.patch_mode is PatchMode.PROMPT_AUTOFIX_ONLY and result.is_all_autofix:
            return False
        return True

    def handle(self, result: LintResult) -> PatchDecision:
        """Run ``result`` through the eligible → confirm → apply state machine.

        Args:
            result: Result whose patches may be applied.

        Returns:
            PatchDecision: The terminal state reached.
        """

        decision = self._decide(result)
        self.decisions.append((result.path, decision))
        return decision

    def _decide(self, result: LintResult) -> PatchDecision:
        if not self.is_eligible(result):
            return PatchDecision.NOT_ELIGIBLE
        patcher = LintPatcher(result)
        try:
            patcher.original_content()
        except UnicodeDecodeError as exc:
            LOGGER.warning("not patching %s: %s", patcher.path, exc)
            return PatchDecision.NOT_ELIGIBLE
        if self.needs_confirmation(result):
            self.echo(render_patch_preview(patcher))
            if not self.confirm(f"Apply this patch to {result.path}?", True):
                return PatchDecision.SKIPPED
        return self.apply(patcher)

    def apply(self, patcher: LintPatcher) -> PatchDecision:
        if patcher.write_patch_to_disk():
            self.wrote_to_disk = True
            return PatchDecision.APPLIED
        return PatchDecision.NOT_ELIGIBLE


__all__ = [
    "LintPatcher",
    "PatchCoordinator",
    "PatchDecision",
    "render_patch_preview",
]
