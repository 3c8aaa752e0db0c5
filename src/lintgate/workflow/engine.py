# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the analysis engine and capture its outcome without losing partial results."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..config import ConfigError
from ..errors import LintNoEffectError
from ..interfaces import LintEngine
from ..models import LintResult
from ..severity import LintSeverity
from .scope import LintScope

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class EngineOutcome:
    """Results of an engine run together with any failure it raised.

    The failure is carried rather than raised so output, patching and amending
    can still act on the results computed before it.
    """

    results: tuple[LintResult, ...]
    failure: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    @property
    def had_no_effect(self) -> bool:
        """Return ``True`` when the engine reported that linting changed nothing."""

        return isinstance(self.failure, LintNoEffectError)


def invoke_engine(engine: LintEngine, scope: LintScope, min_severity: LintSeverity) -> EngineOutcome:
    """Run ``engine`` over ``scope`` and filter its findings.

    Args:
        engine: Analysis engine to run.
        scope: Resolved lint scope.
        min_severity: Severity floor passed to the engine and enforced on its output.

    Returns:
        EngineOutcome: Filtered results plus the captured failure, if any.
    """

    failure: Exception | None = None
    raw: Sequence[LintResult]
    try:
        raw = engine.run(scope, min_severity)
    except Exception as exc:  # re-raised by the workflow once output is complete
        LOGGER.debug("lint engine failed: %s", exc)
        failure = exc
        raw = engine.results
    return EngineOutcome(results=tuple(_filter_result(result, scope, min_severity) for result in raw), failure=failure)


def _filter_result(result: LintResult, scope: LintScope, min_severity: LintSeverity) -> LintResult:
    kept = [message for message in result.findings if scope.should_report(message, min_severity)]
    if len(kept) == len(result.findings):
        return result
    return result.model_copy(update={"findings": kept})


def load_engine(reference: str) -> LintEngine:
    """Import and instantiate the engine named by ``reference``.

    Args:
        reference: ``package.module:attribute`` naming an engine class, a
            zero-argument factory, or an engine instance.

    Returns:
        LintEngine: Engine ready to run.

    Raises:
        ConfigError: If the reference is malformed, cannot be imported, or does
            not produce a :class:`LintEngine`.
    """

    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise ConfigError(f"Engine reference '{reference}' must look like 'package.module:attribute'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Could not import engine module '{module_name}': {exc}") from exc
    try:
        target = getattr(module, attribute)
    except AttributeError as exc:
        raise ConfigError(f"Module '{module_name}' has no attribute '{attribute}'") from exc

    if isinstance(target, type) or (callable(target) and not isinstance(target, LintEngine)):
        engine = target()
    else:
        engine = target
    if isinstance(engine, type) or not isinstance(engine, LintEngine):
        raise ConfigError(f"'{reference}' does not provide a lint engine")
    return engine


__all__ = ["EngineOutcome", "invoke_engine", "load_engine"]
