# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the line classifier."""

from __future__ import annotations

import pytest

from rovodoc.lines import (
    LineKind,
    classify_line,
    is_marker_line,
    is_near_marker,
    split_lines,
    strip_doc_prefix,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("/// @tag users", LineKind.DOC_COMMENT),
        ("    ///", LineKind.DOC_COMMENT),
        ("#[rovo]", LineKind.MARKER),
        ("  #[rovo]  ", LineKind.MARKER),
        ("", LineKind.BLANK),
        ("   \t", LineKind.BLANK),
        ("// plain comment", LineKind.OTHER),
        ("#[rovo(tag = \"x\")]", LineKind.OTHER),
        ("async fn handler() {}", LineKind.OTHER),
    ],
)
def test_classify_line(line: str, expected: LineKind) -> None:
    assert classify_line(line) is expected


def test_loose_marker_detection_only_when_requested() -> None:
    line = "#[rovo::handler]"
    assert not is_marker_line(line)
    assert is_marker_line(line, loose=True)
    assert is_marker_line("#[rovo]")
    assert not is_marker_line("// rovo without attribute", loose=True)


def test_strip_doc_prefix() -> None:
    assert strip_doc_prefix("   ///   @tag users  ") == "@tag users"
    assert strip_doc_prefix("//////@hidden") == "@hidden"
    assert strip_doc_prefix("///") == ""


def test_split_lines_only_breaks_on_newlines() -> None:
    assert split_lines("a\r\nb\x0cc\nd") == ["a", "b\x0cc", "d"]


def test_is_near_marker_through_doc_block() -> None:
    text = "/// @tag users\n///\n\n#[allow(dead_code)]\n#[rovo]\nfn handler() {}\n"
    assert is_near_marker(text, 0)
    assert is_near_marker(text, 3)


def test_is_near_marker_stops_at_code() -> None:
    text = "/// @tag users\nfn other() {}\n#[rovo]\nfn handler() {}\n"
    assert not is_near_marker(text, 0)
    assert not is_near_marker(text, -1)


def test_is_near_marker_respects_lookahead_window() -> None:
    text = "\n".join(["///"] * 25 + ["#[rovo]"])
    assert not is_near_marker(text, 0)
    assert is_near_marker(text, 10)
