# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version-control backends."""

from __future__ import annotations

from .git import GitRepository

__all__ = ["GitRepository"]
