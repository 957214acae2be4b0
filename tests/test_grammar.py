# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the per-kind annotation recognisers."""

from __future__ import annotations

import pytest

from rovodoc.grammar import parse_annotation, parse_doc_line
from rovodoc.models import (
    AnnotationKind,
    ExampleAnnotation,
    HiddenAnnotation,
    IdAnnotation,
    ResponseAnnotation,
    SecurityAnnotation,
    TagAnnotation,
)


def test_parse_response() -> None:
    ann = parse_doc_line("/// @response 200 Json<User> Success", 0)
    assert isinstance(ann, ResponseAnnotation)
    assert ann.kind == AnnotationKind.RESPONSE
    assert ann.status == 200
    assert ann.response_type == "Json<User>"
    assert ann.description == "Success"
    assert ann.line == 0


def test_parse_response_keeps_multi_word_description() -> None:
    ann = parse_annotation("@response 404   Json<Error>   User was not found", 7)
    assert isinstance(ann, ResponseAnnotation)
    assert ann.description == "User was not found"
    assert ann.line == 7


def test_parse_response_without_description() -> None:
    ann = parse_annotation("@response 204 ()", 3)
    assert isinstance(ann, ResponseAnnotation)
    assert ann.response_type == "()"
    assert ann.description == ""


@pytest.mark.parametrize(
    "content",
    [
        "@response abc Json<User> Oops",
        "@response 200",
        "@response",
        "@response 70000 Json<User> Too big for u16",
        "@response 99999999999999999999999 Json<User> Way too big",
    ],
)
def test_malformed_response_is_dropped(content: str) -> None:
    assert parse_annotation(content, 0) is None


def test_response_status_accepts_leading_zeros() -> None:
    ann = parse_annotation("@response 000200 Json<User> ok", 0)
    assert isinstance(ann, ResponseAnnotation)
    assert ann.status == 200


def test_parse_tag() -> None:
    ann = parse_doc_line("/// @tag users", 1)
    assert isinstance(ann, TagAnnotation)
    assert ann.tag_name == "users"


def test_parse_security() -> None:
    ann = parse_doc_line("/// @security bearer", 2)
    assert isinstance(ann, SecurityAnnotation)
    assert ann.security_scheme == "bearer"


def test_parse_example_keeps_value_verbatim() -> None:
    ann = parse_doc_line('/// @example 200 {"id": 1, "name": "Ada"}', 4)
    assert isinstance(ann, ExampleAnnotation)
    assert ann.status == 200
    assert ann.example_value == '{"id": 1, "name": "Ada"}'


def test_example_requires_a_value() -> None:
    assert parse_annotation("@example 200", 0) is None


def test_parse_id() -> None:
    ann = parse_doc_line("/// @id getUserById", 5)
    assert isinstance(ann, IdAnnotation)
    assert ann.operation_id == "getUserById"


def test_parse_hidden() -> None:
    ann = parse_doc_line("/// @hidden", 6)
    assert isinstance(ann, HiddenAnnotation)
    assert ann.kind == AnnotationKind.HIDDEN


@pytest.mark.parametrize(
    "content",
    [
        "Returns the current user.",
        "# Responses",
        "@unknown something",
        "@tag",
        "@tags users",
        "@identity foo",
        "",
    ],
)
def test_non_annotations_yield_none(content: str) -> None:
    assert parse_annotation(content, 0) is None


def test_parse_doc_line_ignores_non_doc_lines() -> None:
    assert parse_doc_line("// @tag users", 0) is None
    assert parse_doc_line("@tag users", 0) is None


def test_keyword_must_lead_its_payload() -> None:
    assert parse_annotation("@tag@tag users", 0) is None
    assert parse_annotation("@security@security bearer", 0) is None
