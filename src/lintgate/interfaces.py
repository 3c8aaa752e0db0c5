# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols describing the collaborators the lint workflow drives."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

from .models import LintResult
from .severity import LintSeverity

if TYPE_CHECKING:
    from .workflow.scope import LintScope

DiffSide = Literal["old", "new"]


@runtime_checkable
class LintEngine(Protocol):
    """Analysis engine producing one :class:`LintResult` per scanned path."""

    @property
    @abstractmethod
    def results(self) -> Sequence[LintResult]:
        """Return the results accumulated so far, including after a failed run.

        Returns:
            Sequence[LintResult]: Results produced before the engine stopped.
        """

        ...

    @abstractmethod
    def run(self, scope: LintScope, min_severity: LintSeverity) -> Sequence[LintResult]:
        """Lint every path in ``scope``.

        Args:
            scope: Target paths and changed-line metadata.
            min_severity: Lowest severity the caller is interested in.

        Returns:
            Sequence[LintResult]: Results in scan order.
        """

        ...


@runtime_checkable
class RepositoryAPI(Protocol):
    """Version-control operations consumed by scope resolution and amending."""

    @property
    @abstractmethod
    def uses_staging(self) -> bool:
        """Return ``True`` when modifications must be staged before amending."""

        ...

    @abstractmethod
    def supports_amend(self) -> bool:
        """Return ``True`` when the backend can amend the current commit."""

        ...

    @abstractmethod
    def is_history_immutable(self) -> bool:
        """Return ``True`` when history at the current position must not be rewritten."""

        ...

    @abstractmethod
    def stage_all_modified(self) -> None:
        """Stage every tracked modification in the working tree."""

        ...

    @abstractmethod
    def amend_commit(self) -> None:
        """Fold staged changes into the current commit."""

        ...

    @abstractmethod
    def changed_lines(self, path: str, side: DiffSide) -> frozenset[int] | None:
        """Return line numbers changed in ``path``.

        Args:
            path: Repository-relative path.
            side: Which side of the diff the line numbers refer to.

        Returns:
            frozenset[int] | None: Changed lines, or ``None`` when line ranges do
            not apply (binary files, directories, newly added files).
        """

        ...

    @abstractmethod
    def all_files(self) -> Iterable[str]:
        """Return every tracked path in the repository."""

        ...

    @abstractmethod
    def set_base_revision(self, rev: str) -> None:
        """Diff against ``rev`` instead of the configured default base."""

        ...

    @abstractmethod
    def changed_paths(self) -> Sequence[str]:
        """Return paths modified since the base revision."""

        ...


@runtime_checkable
class LintRenderer(Protocol):
    """Turn lint results into output text."""

    @abstractmethod
    def render_preamble(self) -> str: ...

    @abstractmethod
    def render_lint_result(self, result: LintResult) -> str: ...

    @abstractmethod
    def render_postamble(self) -> str: ...

    @abstractmethod
    def render_okay_result(self) -> str: ...


@runtime_checkable
class Confirmer(Protocol):
    """Ask the user a yes/no question and block until answered."""

    def __call__(self, prompt: str, default: bool) -> bool: ...


__all__ = ["Confirmer", "DiffSide", "LintEngine", "LintRenderer", "RepositoryAPI"]
