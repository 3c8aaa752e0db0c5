# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for lintgate."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .severity import DEFAULT_SEVERITY, LintSeverity, parse_severity

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
STANDALONE_FILENAME: Final[str] = ".lintgate.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintgate"

OutputFormat = Literal["default", "summary", "json", "none", "compiler", "xml"]


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintConfig(BaseModel):
    """Project-level defaults for the lint workflow."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    engine: str | None = None
    severity: LintSeverity = DEFAULT_SEVERITY
    output: OutputFormat = "default"
    diff_ref: str = "HEAD"
    history_immutable: bool = False
    amend: bool = False

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_severity(value)
        return value


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc


def _pyproject_section(path: Path) -> Mapping[str, Any] | None:
    """Return the ``[tool.lintgate]`` table of ``path`` when present."""

    tool_section = _read_toml(path).get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return None
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return None
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def load_config(root: Path) -> LintConfig:
    """Load configuration for the project rooted at ``root``.

    ``.lintgate.toml`` takes precedence over ``[tool.lintgate]`` in
    ``pyproject.toml``. Missing files yield the built-in defaults.

    Args:
        root: Project root directory.

    Returns:
        LintConfig: Validated configuration.

    Raises:
        ConfigError: If a configuration file is malformed or holds invalid values.
    """

    payload: Mapping[str, Any] | None = None
    source: Path | None = None
    standalone = root / STANDALONE_FILENAME
    pyproject = root / PYPROJECT_FILENAME
    if standalone.is_file():
        payload, source = _read_toml(standalone), standalone
    elif pyproject.is_file():
        payload, source = _pyproject_section(pyproject), pyproject

    if payload is None:
        return LintConfig()
    try:
        return LintConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


__all__ = ["ConfigError", "LintConfig", "OutputFormat", "load_config"]
