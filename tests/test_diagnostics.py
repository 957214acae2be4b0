# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for annotation validation rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pytest

from rovodoc.diagnostics import (
    DEFAULT_RULES,
    DiagnosticRule,
    SequenceRule,
    StatusCodeRangeRule,
    validate_annotations,
    validate_text,
)
from rovodoc.models import (
    Annotation,
    Diagnostic,
    ExampleAnnotation,
    ResponseAnnotation,
    TagAnnotation,
)
from rovodoc.scanner import scan_annotations
from rovodoc.severity import Severity


def _handler(*doc_lines: str) -> str:
    return "\n".join([*doc_lines, "#[rovo]", "async fn handler() {}", ""])


@pytest.mark.parametrize("status", [100, 200, 301, 404, 500, 599])
def test_valid_status_codes_produce_no_diagnostics(status: int) -> None:
    assert validate_text(_handler(f"/// @response {status} Json<User> ok")) == []


@pytest.mark.parametrize("status", [0, 99, 600, 999, 65535])
def test_invalid_status_code_is_reported(status: int) -> None:
    diagnostics = validate_text(_handler("/// Handler docs", f"/// @response {status} Json<User> bad"))
    assert len(diagnostics) == 1
    diag = diagnostics[0]
    assert diag.severity is Severity.ERROR
    assert diag.line == 1
    assert "Invalid HTTP status code" in diag.message
    assert str(status) in diag.message
    assert "between 100 and 599" in diag.message
    assert diag.end_line is None
    assert diag.char_start is None
    assert diag.code == "invalid-status-code"


def test_multiple_errors_follow_line_order() -> None:
    text = _handler(
        "/// @response 999 Json<User> Invalid",
        "/// @response 200 Json<User> Fine",
        "/// @response 998 Json<Error> Also invalid",
        "/// @response 42 Json<Error> Too low",
    )
    diagnostics = validate_text(text)
    assert [diag.line for diag in diagnostics] == [0, 2, 3]


def test_duplicate_violations_are_kept() -> None:
    text = _handler("/// @response 700 () dup", "/// @response 700 () dup")
    assert len(validate_text(text)) == 2


def test_non_response_annotations_are_inert() -> None:
    text = _handler(
        "/// @tag users",
        "/// @security bearer",
        "/// @id get_user",
        "/// @hidden",
        "/// @example 999 {\"id\": 1",
    )
    assert len(scan_annotations(text)) == 5
    assert validate_text(text) == []


def test_malformed_response_lines_are_silent() -> None:
    assert validate_text(_handler("/// @response abc Json<User> nope")) == []


def test_validation_is_idempotent() -> None:
    annotations = scan_annotations(_handler("/// @response 600 () high"))
    assert validate_annotations(annotations) == validate_annotations(annotations)


def test_validate_annotations_accepts_parsed_sequence() -> None:
    annotations: list[Annotation] = [
        TagAnnotation(line=0, tag_name="users"),
        ResponseAnnotation(line=1, status=600, response_type="()", description=""),
    ]
    diagnostics = validate_annotations(annotations)
    assert [diag.line for diag in diagnostics] == [1]


class _ExampleStatusRule:
    code = "example-status"

    def check(self, annotation: Annotation) -> Iterable[Diagnostic]:
        if isinstance(annotation, ExampleAnnotation) and annotation.status >= 600:
            yield Diagnostic(
                severity=Severity.WARNING,
                message="Example status out of range",
                line=annotation.line,
                code=self.code,
            )


def test_custom_rules_run_in_rule_order_per_annotation() -> None:
    rule = _ExampleStatusRule()
    assert isinstance(rule, DiagnosticRule)
    annotations: list[Annotation] = [
        ResponseAnnotation(line=0, status=700, response_type="()", description=None),
        ExampleAnnotation(line=1, status=700, example_value="{}"),
    ]
    diagnostics = validate_annotations(annotations, rules=(*DEFAULT_RULES, rule))
    assert [(diag.line, diag.code) for diag in diagnostics] == [
        (0, "invalid-status-code"),
        (1, "example-status"),
    ]


def test_status_rule_bounds_are_configurable() -> None:
    rule = StatusCodeRangeRule(minimum=200, maximum=299)
    annotations: list[Annotation] = [ResponseAnnotation(line=0, status=404, response_type="()")]
    diagnostics = validate_annotations(annotations, rules=(rule,))
    assert len(diagnostics) == 1
    assert "between 200 and 299" in diagnostics[0].message


class _DuplicateResponseRule:
    code = "duplicate-response"

    def check_all(self, annotations: Sequence[Annotation]) -> Iterable[Diagnostic]:
        seen: set[int] = set()
        for annotation in annotations:
            if not isinstance(annotation, ResponseAnnotation):
                continue
            if annotation.status in seen:
                yield Diagnostic(
                    severity=Severity.WARNING,
                    message=f"Duplicate response for status {annotation.status}",
                    line=annotation.line,
                    code=self.code,
                )
            seen.add(annotation.status)


def test_sequence_rule_sees_every_annotation() -> None:
    rule = _DuplicateResponseRule()
    assert isinstance(rule, SequenceRule)
    assert not isinstance(rule, DiagnosticRule)
    text = _handler(
        "/// @response 200 Json<User> Found",
        "/// @tag users",
        "/// @response 200 Json<User> Again",
    )
    diagnostics = validate_text(text, rules=(rule,))
    assert [(diag.line, diag.code) for diag in diagnostics] == [(2, "duplicate-response")]


def test_sequence_and_annotation_rules_merge_by_annotation_then_rule() -> None:
    annotations: list[Annotation] = [
        ResponseAnnotation(line=0, status=700, response_type="()"),
        ResponseAnnotation(line=1, status=700, response_type="()"),
        TagAnnotation(line=2, tag_name="users"),
    ]
    diagnostics = validate_annotations(annotations, rules=(_DuplicateResponseRule(), *DEFAULT_RULES))
    assert [(diag.line, diag.code) for diag in diagnostics] == [
        (0, "invalid-status-code"),
        (1, "duplicate-response"),
        (1, "invalid-status-code"),
    ]


def test_sequence_rule_accepts_one_shot_iterables() -> None:
    annotations = iter(
        [
            ResponseAnnotation(line=3, status=201, response_type="()"),
            ResponseAnnotation(line=4, status=201, response_type="()"),
        ]
    )
    diagnostics = validate_annotations(annotations, rules=(*DEFAULT_RULES, _DuplicateResponseRule()))
    assert [(diag.line, diag.code) for diag in diagnostics] == [(4, "duplicate-response")]
