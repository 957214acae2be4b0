# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation rules that turn parsed annotations into diagnostics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final, Protocol, Union, runtime_checkable

from .models import Annotation, Diagnostic, ResponseAnnotation
from .scanner import scan_annotations
from .severity import Severity

MIN_HTTP_STATUS: Final[int] = 100
MAX_HTTP_STATUS: Final[int] = 599


@runtime_checkable
class DiagnosticRule(Protocol):
    """Pure check applied to one annotation at a time."""

    @property
    def code(self) -> str:  # pragma: no cover - protocol definition
        """Return the stable identifier reported alongside each diagnostic."""
        ...

    def check(self, annotation: Annotation) -> Iterable[Diagnostic]:  # pragma: no cover - protocol definition
        """Yield diagnostics raised by ``annotation``."""
        ...


@runtime_checkable
class SequenceRule(Protocol):
    """Pure check applied to the whole annotation sequence, for cross-annotation rules."""

    @property
    def code(self) -> str:  # pragma: no cover - protocol definition
        """Return the stable identifier reported alongside each diagnostic."""
        ...

    def check_all(
        self, annotations: Sequence[Annotation]
    ) -> Iterable[Diagnostic]:  # pragma: no cover - protocol definition
        """Yield diagnostics raised by ``annotations`` taken together."""
        ...


Rule = Union[DiagnosticRule, SequenceRule]


@dataclass(frozen=True, slots=True)
class StatusCodeRangeRule:
    """Flag ``@response`` status codes outside the HTTP range."""

    minimum: int = MIN_HTTP_STATUS
    maximum: int = MAX_HTTP_STATUS
    code: str = "invalid-status-code"

    def check(self, annotation: Annotation) -> Iterable[Diagnostic]:
        """Yield an error when ``annotation`` is a response with a bad status.

        Args:
            annotation: Annotation under inspection.

        Returns:
            Iterable[Diagnostic]: Zero or one diagnostic.
        """
        if not isinstance(annotation, ResponseAnnotation):
            return ()
        if self.minimum <= annotation.status <= self.maximum:
            return ()
        message = (
            f"Invalid HTTP status code: {annotation.status}. "
            f"Must be between {self.minimum} and {self.maximum}."
        )
        return (
            Diagnostic(
                severity=Severity.ERROR,
                message=message,
                line=annotation.line,
                code=self.code,
            ),
        )


DEFAULT_RULES: Final[tuple[Rule, ...]] = (StatusCodeRangeRule(),)


def validate_annotations(
    annotations: Iterable[Annotation],
    *,
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> list[Diagnostic]:
    """Apply ``rules`` to ``annotations`` and collect their diagnostics.

    Per-annotation rules see each annotation in turn; sequence rules see the
    whole list once. Their diagnostics are merged by the position of the
    annotation on the reported line, then by rule order. Sequence diagnostics
    pointing at a line without an annotation come last.

    Args:
        annotations: Annotations in source order.
        rules: Rules to apply, in order.

    Returns:
        list[Diagnostic]: Diagnostics ordered by annotation, then by rule.
    """
    items = tuple(annotations)
    positions: dict[int, int] = {}
    for index, annotation in enumerate(items):
        positions.setdefault(annotation.line, index)

    keyed: list[tuple[int, int, Diagnostic]] = []
    for rule_index, rule in enumerate(rules):
        if isinstance(rule, SequenceRule):
            for diag in rule.check_all(items):
                keyed.append((positions.get(diag.line, len(items)), rule_index, diag))
            continue
        for index, annotation in enumerate(items):
            keyed.extend((index, rule_index, diag) for diag in rule.check(annotation))
    keyed.sort(key=lambda entry: entry[:2])
    return [diag for _, _, diag in keyed]


def validate_text(text: str, *, rules: Sequence[Rule] = DEFAULT_RULES) -> list[Diagnostic]:
    """Scan ``text`` for annotations and validate them."""
    return validate_annotations(scan_annotations(text), rules=rules)


__all__ = [
    "DEFAULT_RULES",
    "MAX_HTTP_STATUS",
    "MIN_HTTP_STATUS",
    "DiagnosticRule",
    "Rule",
    "SequenceRule",
    "StatusCodeRangeRule",
    "validate_annotations",
    "validate_text",
]
