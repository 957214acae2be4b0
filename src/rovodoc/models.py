# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the rovodoc package.

Annotations form a closed tagged union: one frozen model per recognised kind,
discriminated by the literal ``kind`` field.  :data:`Annotation` is the union
alias and :data:`ANNOTATION_ADAPTER` rehydrates serialised payloads.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .severity import Severity


class AnnotationKind(str, Enum):
    """Enumerate the annotation kinds understood by the grammar."""

    RESPONSE = "response"
    TAG = "tag"
    SECURITY = "security"
    EXAMPLE = "example"
    ID = "id"
    HIDDEN = "hidden"


class _AnnotationBase(BaseModel):
    """Fields shared by every annotation variant."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)


class ResponseAnnotation(_AnnotationBase):
    """``@response STATUS TYPE DESCRIPTION``."""

    kind: Literal["response"] = "response"
    status: int
    response_type: str
    description: str | None = None


class TagAnnotation(_AnnotationBase):
    """``@tag NAME``."""

    kind: Literal["tag"] = "tag"
    tag_name: str


class SecurityAnnotation(_AnnotationBase):
    """``@security SCHEME``."""

    kind: Literal["security"] = "security"
    security_scheme: str


class ExampleAnnotation(_AnnotationBase):
    """``@example STATUS VALUE``; the value is kept verbatim."""

    kind: Literal["example"] = "example"
    status: int
    example_value: str


class IdAnnotation(_AnnotationBase):
    """``@id OPERATION_ID``."""

    kind: Literal["id"] = "id"
    operation_id: str


class HiddenAnnotation(_AnnotationBase):
    """``@hidden``."""

    kind: Literal["hidden"] = "hidden"


Annotation = Annotated[
    Union[
        ResponseAnnotation,
        TagAnnotation,
        SecurityAnnotation,
        ExampleAnnotation,
        IdAnnotation,
        HiddenAnnotation,
    ],
    Field(discriminator="kind"),
]

ANNOTATION_ADAPTER: TypeAdapter[Annotation] = TypeAdapter(Annotation)


class AnnotatedBlock(BaseModel):
    """Annotations collected from the documentation block above one marker."""

    model_config = ConfigDict(frozen=True)

    marker_line: int
    start_line: int
    annotations: tuple[Annotation, ...] = Field(default_factory=tuple)


class Diagnostic(BaseModel):
    """Line-addressed message describing a violation among annotations.

    ``end_line`` and ``char_start`` are only populated by rules that need
    multi-line or sub-line precision.
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    line: int = Field(ge=0)
    end_line: int | None = None
    char_start: int | None = None
    code: str | None = None
