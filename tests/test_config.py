# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for project configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintgate.config import ConfigError, LintConfig, load_config
from lintgate.severity import LintSeverity


def test_defaults_without_configuration(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config == LintConfig()
    assert config.engine is None
    assert config.severity is LintSeverity.ADVICE
    assert config.output == "default"
    assert config.diff_ref == "HEAD"
    assert not config.amend


def test_pyproject_without_section_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_config(tmp_path) == LintConfig()


def test_pyproject_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "\n".join(
            [
                "[tool.lintgate]",
                'engine = "demo.lint:Engine"',
                'severity = "Warning"',
                'output = "summary"',
                'diff_ref = "origin/main"',
                "history_immutable = true",
                "amend = true",
            ],
        ),
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.engine == "demo.lint:Engine"
    assert config.severity is LintSeverity.WARNING
    assert config.output == "summary"
    assert config.diff_ref == "origin/main"
    assert config.history_immutable
    assert config.amend


def test_standalone_file_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.lintgate]\noutput = "json"\n', encoding="utf-8")
    (tmp_path / ".lintgate.toml").write_text('output = "xml"\n', encoding="utf-8")
    assert load_config(tmp_path).output == "xml"


@pytest.mark.parametrize(
    "content",
    [
        'severity = "fatal"\n',
        'output = "html"\n',
        'unknown_key = "value"\n',
        "amend = [\n",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".lintgate.toml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_section_must_be_a_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool]\nlintgate = "yes"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(tmp_path)
