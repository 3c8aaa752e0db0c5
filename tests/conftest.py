# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures: scripted engine, in-memory repository, scripted prompts."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence

import pytest

from lintgate.models import LintMessage, LintResult
from lintgate.severity import LintSeverity
from lintgate.workflow.scope import LintScope


class ScriptedEngine:
    """Engine returning pre-built results, optionally failing after producing them."""

    def __init__(self, results: Sequence[LintResult] = (), *, failure: Exception | None = None) -> None:
        self._planned = list(results)
        self._results: list[LintResult] = []
        self.failure = failure
        self.calls: list[tuple[LintScope, LintSeverity]] = []

    @property
    def results(self) -> Sequence[LintResult]:
        return list(self._results)

    def run(self, scope: LintScope, min_severity: LintSeverity) -> Sequence[LintResult]:
        self.calls.append((scope, min_severity))
        self._results = list(self._planned)
        if self.failure is not None:
            raise self.failure
        return list(self._results)


class FakeRepository:
    """In-memory repository recording every mutating call."""

    def __init__(
        self,
        *,
        files: Iterable[str] = (),
        changed: Iterable[str] = (),
        changed_lines: Mapping[str, frozenset[int] | None] | None = None,
        amendable: bool = True,
        immutable: bool = False,
        staging: bool = True,
    ) -> None:
        self.files = list(files)
        self.changed = list(changed)
        self.lines = dict(changed_lines or {})
        self.amendable = amendable
        self.immutable = immutable
        self.staging = staging
        self.base: str | None = None
        self.operations: list[str] = []

    @property
    def uses_staging(self) -> bool:
        return self.staging

    def supports_amend(self) -> bool:
        return self.amendable

    def is_history_immutable(self) -> bool:
        return self.immutable

    def stage_all_modified(self) -> None:
        self.operations.append("stage")

    def amend_commit(self) -> None:
        self.operations.append("amend")

    def changed_lines(self, path: str, side: str) -> frozenset[int] | None:
        self.operations.append(f"changed_lines:{path}:{side}")
        return self.lines.get(path, frozenset())

    def all_files(self) -> Iterable[str]:
        return list(self.files)

    def set_base_revision(self, rev: str) -> None:
        self.base = rev

    def changed_paths(self) -> Sequence[str]:
        return list(self.changed)


class ScriptedConfirm:
    """Answer prompts from a fixed script, failing on any unexpected question."""

    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str, default: bool) -> bool:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {prompt}")
        return self.answers.pop(0)


@pytest.fixture
def make_message() -> Callable[..., LintMessage]:
    def _factory(
        path: str = "a.txt",
        *,
        line: int | None = 1,
        severity: LintSeverity = LintSeverity.WARNING,
        code: str = "TEST1",
        **extra: object,
    ) -> LintMessage:
        return LintMessage(path=path, line=line, severity=severity, code=code, name=f"{code} name", **extra)

    return _factory


@pytest.fixture
def engine_factory() -> type[ScriptedEngine]:
    return ScriptedEngine


@pytest.fixture
def repository_factory() -> type[FakeRepository]:
    return FakeRepository


@pytest.fixture
def confirm_factory() -> type[ScriptedConfirm]:
    return ScriptedConfirm


@pytest.fixture
def console_output() -> tuple[list[str], Callable[[str], None]]:
    chunks: list[str] = []
    return chunks, chunks.append
