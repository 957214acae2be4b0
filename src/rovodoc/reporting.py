# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render scan results as console text, JSON or SARIF.

Internal line numbers are zero-based; every renderer here converts them to
the one-based numbering humans and SARIF consumers expect.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console
from rich.text import Text

from .models import AnnotatedBlock, Annotation, Diagnostic
from .severity import Severity, meets_threshold, severity_to_sarif

SARIF_VERSION: Final[str] = "2.1.0"
SARIF_SCHEMA: Final[str] = "https://schemastore.azurewebsites.net/schemas/json/sarif-2.1.0.json"
TOOL_NAME: Final[str] = "rovodoc"

_SEVERITY_STYLES: Final[dict[Severity, str]] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
}


class FileReport(BaseModel):
    """Annotations and diagnostics produced for one file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    blocks: tuple[AnnotatedBlock, ...] = Field(default_factory=tuple)
    diagnostics: tuple[Diagnostic, ...] = Field(default_factory=tuple)

    @property
    def annotations(self) -> list[Annotation]:
        return [annotation for block in self.blocks for annotation in block.annotations]

    def has_failures(self, threshold: Severity) -> bool:
        """Return ``True`` when any diagnostic reaches ``threshold``."""
        return any(meets_threshold(diag.severity, threshold) for diag in self.diagnostics)


def serialize_annotation(annotation: Annotation) -> dict[str, Any]:
    """Convert an annotation into a JSON-friendly mapping."""

    return annotation.model_dump(mode="json")


def serialize_diagnostic(diag: Diagnostic) -> dict[str, object | None]:
    """Convert a diagnostic into a JSON-friendly mapping."""

    return {
        "line": diag.line,
        "end_line": diag.end_line,
        "char_start": diag.char_start,
        "severity": diag.severity.value,
        "message": diag.message,
        "code": diag.code,
    }


def serialize_block(block: AnnotatedBlock) -> dict[str, object]:
    """Convert an annotated block into a JSON-friendly mapping."""

    return {
        "marker_line": block.marker_line,
        "start_line": block.start_line,
        "annotations": [serialize_annotation(annotation) for annotation in block.annotations],
    }


def build_json_report(reports: Sequence[FileReport]) -> dict[str, object]:
    """Return a JSON document summarising ``reports``."""

    return {
        "files": [
            {
                "path": str(report.path),
                "blocks": [serialize_block(block) for block in report.blocks],
                "diagnostics": [serialize_diagnostic(diag) for diag in report.diagnostics],
            }
            for report in reports
        ],
    }


def build_sarif_report(reports: Sequence[FileReport], *, version: str | None = None) -> dict[str, object]:
    """Return a SARIF document compatible with GitHub and other tools."""

    rules: dict[str, dict[str, object]] = {}
    results: list[dict[str, object]] = []
    for report in reports:
        for diag in report.diagnostics:
            rule_id = diag.code or TOOL_NAME
            if rule_id not in rules:
                rules[rule_id] = {
                    "id": rule_id,
                    "name": rule_id,
                    "shortDescription": {"text": diag.message[:120]},
                }
            region: dict[str, int] = {"startLine": diag.line + 1}
            if diag.end_line is not None:
                region["endLine"] = diag.end_line + 1
            if diag.char_start is not None:
                region["startColumn"] = diag.char_start + 1
            results.append(
                {
                    "ruleId": rule_id,
                    "level": severity_to_sarif(diag.severity),
                    "message": {"text": diag.message},
                    "locations": [
                        {
                            "physicalLocation": {
                                "artifactLocation": {"uri": report.path.as_posix()},
                                "region": region,
                            },
                        },
                    ],
                },
            )

    driver: dict[str, object] = {"name": TOOL_NAME, "version": version or "unknown"}
    if rules:
        driver["rules"] = list(rules.values())
    return {
        "version": SARIF_VERSION,
        "$schema": SARIF_SCHEMA,
        "runs": [{"tool": {"driver": driver}, "results": results}],
    }


def format_location(path: Path, diag: Diagnostic) -> str:
    """Return ``path:line`` (or ``path:line:column``) using one-based numbers."""

    location = f"{path}:{diag.line + 1}"
    if diag.char_start is not None:
        location += f":{diag.char_start + 1}"
    return location


def render_text(reports: Sequence[FileReport], console: Console) -> int:
    """Print every diagnostic in ``reports``, one per line.

    Returns:
        int: Number of diagnostics printed.
    """

    total = 0
    for report in reports:
        for diag in report.diagnostics:
            line = Text(format_location(report.path, diag))
            line.append(": ")
            line.append(diag.severity.value, style=_SEVERITY_STYLES.get(diag.severity))
            line.append(f": {diag.message}")
            if diag.code:
                line.append(f" [{diag.code}]", style="dim")
            console.print(line)
            total += 1
    return total


__all__ = [
    "FileReport",
    "build_json_report",
    "build_sarif_report",
    "format_location",
    "render_text",
    "serialize_annotation",
    "serialize_block",
    "serialize_diagnostic",
]
