# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line grammar turning documentation content into typed annotations.

Each recogniser receives the content of one documentation line (prefix
stripped and trimmed) together with its zero-based line number.  Lines that
do not match their recogniser are treated as prose and yield ``None``; the
grammar never raises.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from .lines import is_doc_comment, strip_doc_prefix
from .models import (
    Annotation,
    AnnotationKind,
    ExampleAnnotation,
    HiddenAnnotation,
    IdAnnotation,
    ResponseAnnotation,
    SecurityAnnotation,
    TagAnnotation,
)

AnnotationParser = Callable[[str, int], Annotation | None]

ANNOTATION_SIGIL: Final[str] = "@"
MAX_STATUS_CODE: Final[int] = 0xFFFF

_RESPONSE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"@response\s+(?P<status>[0-9]+)\s+(?P<type>\S+)\s*(?P<description>.*)",
)
_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"@tag\s+(?P<name>\S+)")
_SECURITY_PATTERN: Final[re.Pattern[str]] = re.compile(r"@security\s+(?P<scheme>\S+)")
_EXAMPLE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"@example\s+(?P<status>[0-9]+)\s+(?P<value>.+)",
)
_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"@id\s+(?P<operation_id>\S+)")


def _parse_status(digits: str) -> int | None:
    """Return ``digits`` as a status code when it fits an unsigned 16-bit integer."""
    significant = digits.lstrip("0")
    if len(significant) > len(str(MAX_STATUS_CODE)):
        return None
    status = int(significant or "0")
    if status > MAX_STATUS_CODE:
        return None
    return status


def parse_response(content: str, line: int) -> ResponseAnnotation | None:
    """Parse ``@response STATUS TYPE DESCRIPTION``."""
    match = _RESPONSE_PATTERN.match(content)
    if match is None:
        return None
    status = _parse_status(match.group("status"))
    if status is None:
        return None
    return ResponseAnnotation(
        line=line,
        status=status,
        response_type=match.group("type"),
        description=match.group("description").strip(),
    )


def parse_tag(content: str, line: int) -> TagAnnotation | None:
    """Parse ``@tag NAME``."""
    match = _TAG_PATTERN.match(content)
    if match is None:
        return None
    return TagAnnotation(line=line, tag_name=match.group("name"))


def parse_security(content: str, line: int) -> SecurityAnnotation | None:
    """Parse ``@security SCHEME``."""
    match = _SECURITY_PATTERN.match(content)
    if match is None:
        return None
    return SecurityAnnotation(line=line, security_scheme=match.group("scheme"))


def parse_example(content: str, line: int) -> ExampleAnnotation | None:
    """Parse ``@example STATUS VALUE``.

    The value is stored verbatim; its structure is validated elsewhere if at
    all.
    """
    match = _EXAMPLE_PATTERN.match(content)
    if match is None:
        return None
    status = _parse_status(match.group("status"))
    if status is None:
        return None
    return ExampleAnnotation(line=line, status=status, example_value=match.group("value"))


def parse_id(content: str, line: int) -> IdAnnotation | None:
    """Parse ``@id OPERATION_ID``."""
    match = _ID_PATTERN.match(content)
    if match is None:
        return None
    return IdAnnotation(line=line, operation_id=match.group("operation_id"))


def parse_hidden(content: str, line: int) -> HiddenAnnotation | None:
    """Parse ``@hidden``; trailing text is ignored."""
    del content
    return HiddenAnnotation(line=line)


# Priority order matters: the first matching prefix owns the line.
ANNOTATION_PARSERS: Final[tuple[tuple[str, AnnotationParser], ...]] = (
    (ANNOTATION_SIGIL + AnnotationKind.RESPONSE.value, parse_response),
    (ANNOTATION_SIGIL + AnnotationKind.TAG.value, parse_tag),
    (ANNOTATION_SIGIL + AnnotationKind.SECURITY.value, parse_security),
    (ANNOTATION_SIGIL + AnnotationKind.EXAMPLE.value, parse_example),
    (ANNOTATION_SIGIL + AnnotationKind.ID.value, parse_id),
    (ANNOTATION_SIGIL + AnnotationKind.HIDDEN.value, parse_hidden),
)


def parse_annotation(content: str, line: int) -> Annotation | None:
    """Return the annotation encoded in ``content`` or ``None``.

    Args:
        content: Documentation line content with the ``///`` prefix removed
            and surrounding whitespace trimmed.
        line: Zero-based source line the content came from.

    Returns:
        Annotation | None: Parsed annotation, or ``None`` for prose, unknown
        ``@`` words and malformed annotation lines.
    """
    if not content.startswith(ANNOTATION_SIGIL):
        return None
    for prefix, parser in ANNOTATION_PARSERS:
        if content.startswith(prefix):
            return parser(content, line)
    return None


def parse_doc_line(raw_line: str, line: int) -> Annotation | None:
    """Strip the documentation prefix from ``raw_line`` and parse it.

    Returns ``None`` when ``raw_line`` is not a documentation comment.
    """
    if not is_doc_comment(raw_line):
        return None
    return parse_annotation(strip_doc_prefix(raw_line), line)


__all__ = [
    "ANNOTATION_PARSERS",
    "AnnotationParser",
    "parse_annotation",
    "parse_doc_line",
    "parse_example",
    "parse_hidden",
    "parse_id",
    "parse_response",
    "parse_security",
    "parse_tag",
]
