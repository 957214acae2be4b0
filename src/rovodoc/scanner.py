# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate ``#[rovo]`` markers and collect the annotations documenting them.

For every marker the scanner walks upward from the line above it: blank lines
are skipped, documentation lines are parsed, and the first other line ends
the block.  The walk runs backward, so parsed annotations are prepended to
keep the block in source order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .grammar import parse_annotation
from .lines import LineKind, classify_line, split_lines, strip_doc_prefix
from .models import AnnotatedBlock, Annotation


def find_markers(text: str) -> list[int]:
    """Return the zero-based indices of every exact marker line in ``text``."""
    return [index for index, line in enumerate(split_lines(text)) if classify_line(line) is LineKind.MARKER]


def _collect_block(lines: Sequence[str], marker_index: int) -> AnnotatedBlock:
    """Walk upward from ``marker_index`` and build the block above it.

    Args:
        lines: Document lines.
        marker_index: Index of the marker line anchoring the block.

    Returns:
        AnnotatedBlock: Annotations in source order plus the first
        documentation line of the block (the marker line when empty).
    """
    collected: deque[Annotation] = deque()
    start_line = marker_index
    index = marker_index
    while index > 0:
        index -= 1
        line = lines[index]
        kind = classify_line(line)
        if kind is LineKind.BLANK:
            continue
        if kind is not LineKind.DOC_COMMENT:
            break
        start_line = index
        annotation = parse_annotation(strip_doc_prefix(line), index)
        if annotation is not None:
            collected.appendleft(annotation)
    return AnnotatedBlock(marker_line=marker_index, start_line=start_line, annotations=tuple(collected))


def scan_blocks(text: str) -> list[AnnotatedBlock]:
    """Return one :class:`AnnotatedBlock` per marker, in marker order."""
    lines = split_lines(text)
    return [_collect_block(lines, marker) for marker in find_markers(text)]


def scan_annotations(text: str) -> list[Annotation]:
    """Return every annotation attached to a marker in ``text``.

    Args:
        text: Full source document.

    Returns:
        list[Annotation]: Annotations in ascending line order. Markers without
        a documentation block contribute nothing.
    """
    return [annotation for block in scan_blocks(text) for annotation in block.annotations]


__all__ = ["find_markers", "scan_annotations", "scan_blocks"]
