# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scan and validate ``#[rovo]`` documentation annotations."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("rovodoc")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

from .diagnostics import (
    DEFAULT_RULES,
    DiagnosticRule,
    SequenceRule,
    StatusCodeRangeRule,
    validate_annotations,
    validate_text,
)
from .grammar import parse_annotation, parse_doc_line
from .lines import LineKind, classify_line, is_marker_line, is_near_marker, strip_doc_prefix
from .models import (
    AnnotatedBlock,
    Annotation,
    AnnotationKind,
    Diagnostic,
    ExampleAnnotation,
    HiddenAnnotation,
    IdAnnotation,
    ResponseAnnotation,
    SecurityAnnotation,
    TagAnnotation,
)
from .scanner import find_markers, scan_annotations, scan_blocks
from .severity import Severity

__all__ = [
    "DEFAULT_RULES",
    "AnnotatedBlock",
    "Annotation",
    "AnnotationKind",
    "Diagnostic",
    "DiagnosticRule",
    "ExampleAnnotation",
    "HiddenAnnotation",
    "IdAnnotation",
    "LineKind",
    "ResponseAnnotation",
    "SecurityAnnotation",
    "SequenceRule",
    "Severity",
    "StatusCodeRangeRule",
    "TagAnnotation",
    "__version__",
    "classify_line",
    "find_markers",
    "is_marker_line",
    "is_near_marker",
    "parse_annotation",
    "parse_doc_line",
    "scan_annotations",
    "scan_blocks",
    "strip_doc_prefix",
    "validate_annotations",
    "validate_text",
]
