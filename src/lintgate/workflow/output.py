# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Route rendered output to the console or atomically into an output file."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import IO

from ..interfaces import LintRenderer
from ..models import LintResult

Writer = Callable[[str], None]


def stdout_writer(chunk: str) -> None:
    sys.stdout.write(chunk)
    sys.stdout.flush()


def should_render(result: LintResult) -> bool:
    """Return ``False`` only for results with nothing to show and no silent fix to offer."""

    return result.has_findings or result.is_all_autofix


class OutputRouter:
    """Drive a renderer and send each chunk to its destination.

    With an ``outfile`` every chunk is appended to a temporary file beside the
    destination, which is renamed into place by :meth:`finish`. Until then the
    destination path is never touched.
    """

    def __init__(self, renderer: LintRenderer, *, outfile: Path | None = None, writer: Writer | None = None) -> None:
        self.renderer = renderer
        self.outfile = outfile
        self._writer = writer or stdout_writer
        self._handle: IO[str] | None = None
        self._tmp_path: Path | None = None
        if outfile is not None:
            fd, name = tempfile.mkstemp(prefix=f".{outfile.name}.", suffix=".tmp", dir=outfile.parent)
            self._handle = os.fdopen(fd, "w", encoding="utf-8")
            self._tmp_path = Path(name)

    @property
    def temporary_path(self) -> Path | None:
        return self._tmp_path

    def _emit(self, chunk: str) -> None:
        if not chunk:
            return
        if self._handle is not None:
            self._handle.write(chunk)
            self._handle.flush()
        else:
            self._writer(chunk)

    def begin(self) -> None:
        self._emit(self.renderer.render_preamble())

    def render_result(self, result: LintResult) -> bool:
        """Render ``result`` unless it has nothing to show.

        Returns:
            bool: ``True`` when the result was passed to the renderer.
        """

        if not should_render(result):
            return False
        self._emit(self.renderer.render_lint_result(result))
        return True

    def finish(self) -> None:
        """Emit the postamble and move the buffered output into place."""

        self._emit(self.renderer.render_postamble())
        if self._handle is None or self._tmp_path is None or self.outfile is None:
            return
        self._handle.close()
        self._handle = None
        os.replace(self._tmp_path, self.outfile)

    def abort(self) -> None:
        """Close the buffer without publishing it; the destination stays untouched."""

        if self._handle is not None:
            self._handle.close()
            self._handle = None
        if self._tmp_path is not None:
            self._tmp_path.unlink(missing_ok=True)

    def okay(self) -> None:
        """Write the renderer's all-clear message to the console."""

        chunk = self.renderer.render_okay_result()
        if chunk:
            self._writer(chunk)


__all__ = ["OutputRouter", "Writer", "should_render", "stdout_writer"]
