# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintgate package."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .severity import LintSeverity


class LintMessage(BaseModel):
    """A single finding reported by the analysis engine.

    Only ``patch_applied`` changes after the engine produces the message; the
    patch coordinator flips it once the replacement has been written to disk.
    """

    model_config = ConfigDict(validate_assignment=True)

    path: str
    line: int | None = None
    char: int | None = None
    severity: LintSeverity
    code: str
    name: str = ""
    description: str = ""
    original_text: str | None = None
    replacement_text: str | None = None
    is_autofix: bool = False
    patch_applied: bool = False

    @property
    def is_patchable(self) -> bool:
        """Return ``True`` when the message carries a replacement."""

        return self.replacement_text is not None

    @property
    def needs_patch(self) -> bool:
        """Return ``True`` when the message still has a patch waiting to be applied."""

        return self.is_patchable and not self.patch_applied

    def is_error(self) -> bool:
        return self.severity.is_error()

    def is_warning(self) -> bool:
        return self.severity.is_warning()


Finding = LintMessage


class LintResult(BaseModel):
    """All findings reported for one scanned path."""

    model_config = ConfigDict(validate_assignment=True)

    path: str
    path_on_disk: Path | None = None
    findings: list[LintMessage] = Field(default_factory=list)
    silent_fixes: list[LintMessage] = Field(default_factory=list)

    @property
    def file_path_on_disk(self) -> Path:
        """Return the file a patch for this result would be written to."""

        return self.path_on_disk if self.path_on_disk is not None else Path(self.path)

    @property
    def has_findings(self) -> bool:
        return bool(self.findings)

    @property
    def patches(self) -> list[LintMessage]:
        """Return every patch-carrying message, reported or silent, in order."""

        return [message for message in (*self.findings, *self.silent_fixes) if message.is_patchable]

    @property
    def is_all_autofix(self) -> bool:
        """Return ``True`` when every reported finding is an autofix patch.

        A result with no reported findings only qualifies when it still carries
        a silent fix, so "nothing to report" and "a fix with nothing to report"
        stay distinguishable.
        """

        if not self.patches:
            return False
        return all(message.is_patchable and message.is_autofix for message in self.findings)

    @property
    def is_patchable(self) -> bool:
        """Return ``True`` while at least one patch remains unapplied."""

        return any(message.needs_patch for message in self.patches)


FileResult = LintResult


class ResultCode(IntEnum):
    """Overall status of a lint run; values double as process exit statuses."""

    OKAY = 0
    WARNINGS = 1
    ERRORS = 2
    SKIP = 3


class RunOutcome(BaseModel):
    """Aggregate outcome for a full lint workflow run."""

    model_config = ConfigDict(frozen=True)

    result_code: ResultCode
    unresolved_findings: tuple[LintMessage, ...] = Field(default_factory=tuple)
    wrote_to_disk: bool = False
    all_patches_were_autofix: bool = True
    exit_status: int = 0


__all__ = [
    "FileResult",
    "Finding",
    "LintMessage",
    "LintResult",
    "ResultCode",
    "RunOutcome",
]
