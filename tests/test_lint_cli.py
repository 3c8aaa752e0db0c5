# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Smoke tests for the lint command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from types import ModuleType

import pytest
from typer.testing import CliRunner

from lintgate.cli.app import app
from lintgate.models import LintMessage, LintResult
from lintgate.severity import LintSeverity

ENGINE_MODULE = "lintgate_cli_test_engine"
ENGINE_REF = f"{ENGINE_MODULE}:Engine"

runner = CliRunner()


@pytest.fixture
def engine_module(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> ModuleType:
    module = ModuleType(ENGINE_MODULE)
    target = tmp_path / "a.txt"
    target.write_text("one\ntwo\n", encoding="utf-8")

    class Engine:
        planned: list[LintResult] = []

        def __init__(self) -> None:
            self._results: list[LintResult] = []

        @property
        def results(self) -> list[LintResult]:
            return self._results

        def run(self, scope, min_severity):
            self._results = [
                result.model_copy(update={"path_on_disk": target})
                for result in self.planned
                if result.path in scope.paths
            ]
            return self._results

    module.Engine = Engine
    monkeypatch.setitem(sys.modules, ENGINE_MODULE, module)
    return module


def _plan(module: ModuleType, severity: LintSeverity) -> None:
    module.Engine.planned = [
        LintResult(
            path="a.txt",
            findings=[LintMessage(path="a.txt", line=2, severity=severity, code="CLI1", name="cli finding")],
        ),
    ]


def _invoke(tmp_path: Path, *args: str):
    return runner.invoke(app, ["lint", "--root", str(tmp_path), "--no-emoji", "--no-color", *args])


def test_missing_engine_is_reported(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "a.txt")
    assert result.exit_code == 1
    assert "No lint engine configured" in result.output


def test_conflicting_patch_flags_are_rejected(tmp_path: Path, engine_module: ModuleType) -> None:
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--apply-patches", "--never-apply-patches", "a.txt")
    assert result.exit_code == 2


def test_invalid_severity_is_rejected(tmp_path: Path, engine_module: ModuleType) -> None:
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--severity", "fatal", "a.txt")
    assert result.exit_code == 2


def test_everything_with_paths_is_a_usage_error(tmp_path: Path, engine_module: ModuleType) -> None:
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--everything", "a.txt")
    assert result.exit_code == 1
    assert "--everything" in result.output


def test_errors_exit_with_status_two(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.ERROR)
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--output", "summary", "a.txt")
    assert result.exit_code == 2
    assert "Line 2: error (CLI1) cli finding" in result.output


def test_warnings_exit_with_status_one(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.WARNING)
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "a.txt")
    assert result.exit_code == 1
    assert ">>> Lint for a.txt:" in result.output


def test_severity_floor_hides_warnings(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.WARNING)
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--severity", "error", "a.txt")
    assert result.exit_code == 0
    assert "No lint messages." in result.output


def test_json_output_exits_zero(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.ERROR)
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--output", "json", "a.txt")
    assert result.exit_code == 0
    payloads = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    assert payloads[0]["a.txt"][0]["code"] == "CLI1"


def test_engine_from_configuration(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.ERROR)
    (tmp_path / ".lintgate.toml").write_text(f'engine = "{ENGINE_REF}"\noutput = "compiler"\n', encoding="utf-8")
    result = _invoke(tmp_path, "a.txt")
    assert result.exit_code == 2
    assert "a.txt:2:error (CLI1) cli finding: " in result.output


def test_outfile_receives_report(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.WARNING)
    report = tmp_path / "report.xml"
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--output", "xml", "--outfile", str(report), "a.txt")
    assert result.exit_code == 1
    assert 'source="CLI1"' in report.read_text(encoding="utf-8")


def test_outfile_never_receives_ansi_styling(
    tmp_path: Path, engine_module: ModuleType, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("lintgate.cli.lint.detect_tty", lambda: True)
    _plan(engine_module, LintSeverity.ERROR)
    report = tmp_path / "report.txt"
    result = runner.invoke(
        app,
        ["lint", "--root", str(tmp_path), "--no-emoji", "--engine", ENGINE_REF, "--outfile", str(report), "a.txt"],
    )
    assert result.exit_code == 2
    content = report.read_text(encoding="utf-8")
    assert ">>> Lint for a.txt:" in content
    assert "\x1b[" not in content


def test_missing_outfile_directory_is_reported(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.WARNING)
    report = tmp_path / "missing" / "report.txt"
    result = _invoke(tmp_path, "--engine", ENGINE_REF, "--outfile", str(report), "a.txt")
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert not report.exists()


def test_repository_failures_are_reported(tmp_path: Path, engine_module: ModuleType) -> None:
    _plan(engine_module, LintSeverity.WARNING)
    result = _invoke(tmp_path, "--engine", ENGINE_REF)
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
