# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve user-supplied paths and flags into a concrete lint scope."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..errors import LintUsageError
from ..interfaces import RepositoryAPI
from ..models import LintMessage
from ..severity import LintSeverity


class ScopeRequest(BaseModel):
    """Raw scope-related input as supplied on the command line."""

    model_config = ConfigDict(frozen=True)

    paths: tuple[str, ...] = ()
    everything: bool = False
    rev: str | None = None
    lintall: bool = False


class LintScope(BaseModel):
    """Target paths plus the changed lines used to hide pre-existing findings.

    ``changed_lines`` only holds entries when ``lint_all`` is false. A ``None``
    entry marks a path (binary file, directory) for which line ranges do not
    apply, so every finding on it is reported.
    """

    model_config = ConfigDict(frozen=True)

    paths: tuple[str, ...]
    lint_all: bool
    changed_lines: Mapping[str, frozenset[int] | None] = Field(default_factory=dict)

    def should_report(self, message: LintMessage, min_severity: LintSeverity) -> bool:
        """Return ``True`` when ``message`` belongs in the output for this scope.

        Args:
            message: Finding produced by the engine.
            min_severity: Lowest severity to report.

        Returns:
            bool: ``False`` for findings below the floor, and for non-error
            findings on unchanged lines when not linting everything.
        """

        if not message.severity.at_least(min_severity):
            return False
        if self.lint_all or message.line is None or message.is_error():
            return True
        if message.path not in self.changed_lines:
            return True
        changed = self.changed_lines[message.path]
        if changed is None:
            return True
        return message.line in changed


def decide_lint_all(request: ScopeRequest) -> bool:
    """Return whether every finding (not only changed-line ones) should be shown.

    Asking for specific files implies wanting full detail on them, while a
    revision diff only cares about the lines it touched.
    """

    if request.lintall:
        return True
    if request.rev is not None:
        return False
    if request.paths or request.everything:
        return True
    return False


def validate_request(request: ScopeRequest) -> None:
    """Reject ambiguous scope requests before any engine work begins.

    Raises:
        LintUsageError: If ``--everything`` is combined with paths or ``--rev``.
    """

    if request.everything and request.paths:
        raise LintUsageError(
            "You can not specify paths with --everything. The --everything flag lints every file.",
        )
    if request.everything and request.rev is not None:
        raise LintUsageError("--everything lints all files; it can not be combined with --rev.")


def resolve_scope(request: ScopeRequest, repository: RepositoryAPI) -> LintScope:
    """Turn ``request`` into a :class:`LintScope`.

    Args:
        request: Scope input from the command line.
        repository: Repository used to enumerate files and changed lines.

    Returns:
        LintScope: Target paths, lint-all flag and per-path changed lines.

    Raises:
        LintUsageError: If the request is ambiguous.
    """

    validate_request(request)
    lint_all = decide_lint_all(request)
    if request.rev is not None:
        repository.set_base_revision(request.rev)

    if request.everything:
        paths = tuple(repository.all_files())
    elif request.paths:
        paths = tuple(request.paths)
    else:
        paths = tuple(repository.changed_paths())

    changed: dict[str, frozenset[int] | None] = {}
    if not lint_all:
        for path in paths:
            changed[path] = repository.changed_lines(path, "new")
    return LintScope(paths=paths, lint_all=lint_all, changed_lines=changed)


__all__ = ["LintScope", "ScopeRequest", "decide_lint_all", "resolve_scope", "validate_request"]
