# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels attached to annotation diagnostics."""

    ERROR = "error"
    WARNING = "warning"


_SEVERITY_RANK: Final[dict[Severity, int]] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
}


def severity_rank(severity: Severity) -> int:
    """Return the sort rank for ``severity`` where lower values are more severe.

    Args:
        severity: Severity to rank.

    Returns:
        int: Rank used when ordering or thresholding diagnostics.
    """
    return _SEVERITY_RANK.get(severity, 99)


def meets_threshold(severity: Severity, threshold: Severity) -> bool:
    """Return ``True`` when ``severity`` is at least as severe as ``threshold``."""
    return severity_rank(severity) <= severity_rank(threshold)


_SEVERITY_TO_SARIF_LEVEL: Final[dict[Severity, str]] = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
}


def severity_to_sarif(severity: Severity) -> str:
    """Map :class:`Severity` to a SARIF reporting level.

    Args:
        severity: Severity to convert.

    Returns:
        str: SARIF ``level`` value.
    """
    return _SEVERITY_TO_SARIF_LEVEL.get(severity, "warning")
