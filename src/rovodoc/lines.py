# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify individual source lines around ``#[rovo]`` markers."""

from __future__ import annotations

from enum import Enum
from typing import Final

DOC_PREFIX: Final[str] = "///"
MARKER_TOKEN: Final[str] = "#[rovo]"
MARKER_OPENING: Final[str] = "#["
MARKER_NAME: Final[str] = "rovo"
MARKER_LOOKAHEAD: Final[int] = 20


class LineKind(str, Enum):
    """Categories a single source line can fall into."""

    DOC_COMMENT = "doc_comment"
    MARKER = "marker"
    BLANK = "blank"
    OTHER = "other"


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines only, keeping line numbers editor-aligned.

    Unlike :meth:`str.splitlines`, form feeds and Unicode separators do not
    start a new line. A trailing carriage return is dropped from each line.
    """
    return [line.removesuffix("\r") for line in text.split("\n")]


def is_doc_comment(line: str) -> bool:
    """Return ``True`` when the trimmed ``line`` starts with ``///``."""
    return line.strip().startswith(DOC_PREFIX)


def is_marker_line(line: str, *, loose: bool = False) -> bool:
    """Return ``True`` when ``line`` is a marker line.

    Args:
        line: Raw source line.
        loose: Also accept any line containing both the attribute opening and
            the marker name. Only suitable for detection, never for block
            extraction.

    Returns:
        bool: ``True`` when the line anchors an annotated declaration.
    """
    if line.strip() == MARKER_TOKEN:
        return True
    return loose and MARKER_OPENING in line and MARKER_NAME in line


def classify_line(line: str) -> LineKind:
    """Return the :class:`LineKind` of ``line``."""
    trimmed = line.strip()
    if not trimmed:
        return LineKind.BLANK
    if trimmed.startswith(DOC_PREFIX):
        return LineKind.DOC_COMMENT
    if trimmed == MARKER_TOKEN:
        return LineKind.MARKER
    return LineKind.OTHER


def strip_doc_prefix(line: str) -> str:
    """Return the content of a documentation line without its ``///`` prefix.

    Repeated prefixes (``//////``) are removed as well.
    """
    content = line.strip()
    while content.startswith(DOC_PREFIX):
        content = content[len(DOC_PREFIX) :]
    return content.strip()


def is_near_marker(text: str, target_line: int) -> bool:
    """Return ``True`` when ``target_line`` sits in a block leading to a marker.

    Looks ahead at most :data:`MARKER_LOOKAHEAD` lines and stops at the first
    line that is neither a doc comment, an attribute nor blank.

    Args:
        text: Full document text.
        target_line: Zero-based line to start looking from.

    Returns:
        bool: ``True`` when a marker is found before the block ends.
    """
    if target_line < 0:
        return False
    lines = split_lines(text)
    for line in lines[target_line : target_line + MARKER_LOOKAHEAD]:
        if is_marker_line(line, loose=True):
            return True
        trimmed = line.strip()
        if trimmed and not trimmed.startswith(DOC_PREFIX) and not trimmed.startswith(MARKER_OPENING):
            break
    return False


__all__ = [
    "DOC_PREFIX",
    "MARKER_LOOKAHEAD",
    "MARKER_NAME",
    "MARKER_OPENING",
    "MARKER_TOKEN",
    "LineKind",
    "classify_line",
    "is_doc_comment",
    "is_marker_line",
    "is_near_marker",
    "split_lines",
    "strip_doc_prefix",
]
