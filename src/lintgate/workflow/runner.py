# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end lint workflow: scope, engine, output, patches, amend, status."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from ..interfaces import Confirmer, LintEngine, RepositoryAPI
from ..models import LintMessage, ResultCode, RunOutcome
from ..renderers import select_renderer
from ..renderers.machine import NoneLintRenderer
from .amend import AmendCoordinator
from .classify import classify_results
from .engine import EngineOutcome, invoke_engine
from .output import OutputRouter, Writer, stdout_writer
from .patching import PatchCoordinator
from .policy import LintFlags, RunPolicy, build_run_policy
from .scope import resolve_scope

LOGGER = logging.getLogger(__name__)

# Consumers of the JSON stream treat any non-zero status as a crash.
ALWAYS_ZERO_EXIT_FORMATS: Final[frozenset[str]] = frozenset({"json"})


@dataclass(slots=True)
class LintWorkflow:
    """Coordinate one lint run against injected collaborators.

    Attributes:
        engine: Analysis engine producing results.
        repository: Repository used for scope resolution and amending.
        confirm: Yes/no prompt used for patch and amend confirmation.
        writer: Sink for console output (rendered chunks, previews).
        notice: Sink for informational notices; defaults to ``writer``.
    """

    engine: LintEngine
    repository: RepositoryAPI
    confirm: Confirmer
    writer: Writer = stdout_writer
    notice: Callable[[str], None] | None = None
    unresolved_findings: tuple[LintMessage, ...] = field(default_factory=tuple)

    def run(self, flags: LintFlags) -> RunOutcome:
        """Execute the workflow described by ``flags``.

        Args:
            flags: Validated command-line flags.

        Returns:
            RunOutcome: Status code, unresolved findings and side-effect summary.

        Raises:
            LintUsageError: On conflicting flags or a declined amend.
            Exception: Any engine failure, re-raised once output, patching and
                amending have completed, unless the output format
                always exits zero.
        """

        policy = build_run_policy(flags)
        scope = resolve_scope(flags.scope, self.repository)
        LOGGER.debug("linting %d path(s), lint_all=%s", len(scope.paths), scope.lint_all)
        engine_outcome = invoke_engine(self.engine, scope, policy.min_severity)
        return self._process(policy, engine_outcome)

    def _process(self, policy: RunPolicy, engine_outcome: EngineOutcome) -> RunOutcome:
        renderer = select_renderer(
            policy.output_format,
            show_autofix_patches=policy.show_autofix_patches,
            color=policy.color,
        )
        router = OutputRouter(renderer, outfile=policy.outfile, writer=self.writer)
        patches = PatchCoordinator(policy=policy, confirm=self.confirm, echo=self.writer)
        try:
            router.begin()
            for result in engine_outcome.results:
                if not router.render_result(result):
                    continue
                patches.observe_rendered(result)
                patches.handle(result)
            router.finish()
        except BaseException:
            router.abort()
            raise

        amend = AmendCoordinator(
            repository=self.repository,
            confirm=self.confirm,
            notice=self.notice or (lambda message: self.writer(f"{message}\n")),
        )
        amend.run(
            policy.amend_mode,
            wrote_to_disk=patches.wrote_to_disk,
            all_autofix=patches.all_patches_were_autofix,
        )

        if policy.output_format in ALWAYS_ZERO_EXIT_FORMATS:
            if engine_outcome.failure is not None:
                LOGGER.debug("engine failure ignored for %s output: %s", policy.output_format, engine_outcome.failure)
            classification = classify_results(engine_outcome.results)
            self.unresolved_findings = classification.unresolved
            return self._outcome(classification.result_code, classification.unresolved, patches, exit_status=0)

        if engine_outcome.failure is not None:
            if engine_outcome.had_no_effect and isinstance(renderer, NoneLintRenderer):
                return self._outcome(ResultCode.OKAY, (), patches, exit_status=0)
            raise engine_outcome.failure

        classification = classify_results(engine_outcome.results)
        self.unresolved_findings = classification.unresolved
        if policy.standalone and classification.result_code is ResultCode.OKAY:
            router.okay()
        return self._outcome(
            classification.result_code,
            classification.unresolved,
            patches,
            exit_status=int(classification.result_code),
        )

    @staticmethod
    def _outcome(
        result_code: ResultCode,
        unresolved: tuple[LintMessage, ...],
        patches: PatchCoordinator,
        *,
        exit_status: int,
    ) -> RunOutcome:
        return RunOutcome(
            result_code=result_code,
            unresolved_findings=unresolved,
            wrote_to_disk=patches.wrote_to_disk,
            all_patches_were_autofix=patches.all_patches_were_autofix,
            exit_status=exit_status,
        )


__all__ = ["ALWAYS_ZERO_EXIT_FORMATS", "LintWorkflow"]
