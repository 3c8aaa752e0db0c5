# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-backed repository API."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Final

from ..interfaces import DiffSide
from ..process import CommandOptions, run_command

LOGGER = logging.getLogger(__name__)

GitRunner = Callable[[Sequence[str], Path], list[str]]

_HUNK_RE: Final[re.Pattern[str]] = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_BINARY_MARKER: Final[str] = "Binary files "


class GitRepository:
    """Repository operations implemented with the ``git`` command line."""

    def __init__(
        self,
        root: Path,
        *,
        diff_ref: str = "HEAD",
        history_immutable: bool = False,
        runner: GitRunner | None = None,
    ) -> None:
        """Create a repository bound to ``root``.

        Args:
            root: Working tree root.
            diff_ref: Reference diffed against when no revision is supplied.
            history_immutable: ``True`` when the project forbids rewriting history.
            runner: Optional command runner returning stdout lines; failures must raise.
        """

        self._root = root
        self._diff_ref = diff_ref
        self._history_immutable = history_immutable
        self._runner = runner or self._default_runner
        self._base_ref: str | None = None

    @property
    def root(self) -> Path:
        return self._root

    @property
    def uses_staging(self) -> bool:
        return True

    def supports_amend(self) -> bool:
        return True

    def is_history_immutable(self) -> bool:
        return self._history_immutable

    def set_base_revision(self, rev: str) -> None:
        """Diff against ``rev`` instead of the configured reference."""

        self._base_ref = rev

    @property
    def base_ref(self) -> str:
        return self._base_ref or self._diff_ref

    def stage_all_modified(self) -> None:
        self._git("add", "-u")

    def amend_commit(self) -> None:
        self._git("commit", "--amend", "--no-edit")

    def all_files(self) -> Iterable[str]:
        return [line.strip() for line in self._git("ls-files") if line.strip()]

    def changed_paths(self) -> Sequence[str]:
        """Return modified and untracked paths relative to the base reference.

        Returns:
            Sequence[str]: Sorted repository-relative paths that still exist.
        """

        candidates: set[str] = set()
        candidates.update(self._git("diff", "--name-only", "--diff-filter=d", self.base_ref, "--"))
        candidates.update(self._git("ls-files", "--others", "--exclude-standard"))
        return sorted(path.strip() for path in candidates if path.strip())

    def changed_lines(self, path: str, side: DiffSide) -> frozenset[int] | None:
        """Return line numbers touched in ``path`` since the base reference.

        Args:
            path: Repository-relative path.
            side: ``"new"`` for working-tree line numbers, ``"old"`` for base ones.

        Returns:
            frozenset[int] | None: Changed lines, or ``None`` for directories,
            binary files and files git does not track yet.
        """

        if (self._root / path).is_dir():
            return None
        if not self._git("ls-files", "--", path):
            return None
        diff = self._git("diff", "--no-color", "--no-ext-diff", "-U0", self.base_ref, "--", path)
        lines: set[int] = set()
        for raw in diff:
            if raw.startswith(_BINARY_MARKER):
                return None
            match = _HUNK_RE.match(raw)
            if match is None:
                continue
            start_group, count_group = (1, 2) if side == "old" else (3, 4)
            start = int(match.group(start_group))
            count = int(match.group(count_group)) if match.group(count_group) is not None else 1
            lines.update(range(start, start + count))
        LOGGER.debug("changed lines for %s: %d", path, len(lines))
        return frozenset(lines)

    def _git(self, *args: str) -> list[str]:
        return self._runner(["git", *args], self._root)

    @staticmethod
    def _default_runner(cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` in ``root`` and return its stdout lines.

        Raises:
            SubprocessExecutionError: When git exits with a non-zero status.
        """

        completed = run_command(cmd, options=CommandOptions(cwd=root))
        return (completed.stdout or "").splitlines()


__all__ = ["GitRepository", "GitRunner"]
