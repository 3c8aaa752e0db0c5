# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fold lint patches written to the working tree into the current commit."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from ..errors import LintUsageError
from ..interfaces import Confirmer, RepositoryAPI
from .policy import AmendMode

LOGGER = logging.getLogger(__name__)

AMEND_PROMPT: Final[str] = "Amend HEAD with lint patches?"
AMEND_NOTICE: Final[str] = "LINT NOTICE: Automatically amending HEAD with lint patches."
AMEND_DECLINED: Final[str] = "Sort out the lint changes that were applied to the working copy and relint."


def effective_amend_mode(mode: AmendMode, repository: RepositoryAPI) -> AmendMode:
    """Return ``mode``, or :attr:`AmendMode.OFF` when the repository cannot be amended."""

    if mode is AmendMode.OFF:
        return mode
    if not repository.supports_amend() or repository.is_history_immutable():
        LOGGER.debug("amend disabled: repository does not allow amending HEAD")
        return AmendMode.OFF
    return mode


@dataclass(slots=True)
class AmendCoordinator:
    """Decide whether, and how, to amend HEAD after patches were written."""

    repository: RepositoryAPI
    confirm: Confirmer
    notice: Callable[[str], None]

    def should_prompt(self, mode: AmendMode, *, all_autofix: bool) -> bool:
        if mode is AmendMode.ALL_SILENT:
            return False
        if mode is AmendMode.AUTOFIX_SILENT and all_autofix:
            return False
        return True

    def run(self, mode: AmendMode, *, wrote_to_disk: bool, all_autofix: bool) -> bool:
        """Amend HEAD when the policy and repository allow it.

        Args:
            mode: Amend mode from the run policy.
            wrote_to_disk: Whether any patch was written during the run.
            all_autofix: Whether every rendered result was an autofix result.

        Returns:
            bool: ``True`` when HEAD was amended.

        Raises:
            LintUsageError: If the user declines an amend the policy asked for.
        """

        if not wrote_to_disk:
            return False
        mode = effective_amend_mode(mode, self.repository)
        if mode is AmendMode.OFF:
            return False

        if self.should_prompt(mode, all_autofix=all_autofix):
            if not self.confirm(AMEND_PROMPT, True):
                raise LintUsageError(AMEND_DECLINED)
        else:
            self.notice(AMEND_NOTICE)

        if self.repository.uses_staging:
            self.repository.stage_all_modified()
        self.repository.amend_commit()
        return True


__all__ = ["AMEND_DECLINED", "AMEND_PROMPT", "AmendCoordinator", "effective_amend_mode"]
