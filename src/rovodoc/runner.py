# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the scanner and validator over in-memory text or files on disk."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .diagnostics import DEFAULT_RULES, Rule, validate_annotations
from .reporting import FileReport
from .scanner import scan_blocks

STDIN_PATH = Path("<stdin>")


def check_source(
    text: str,
    path: Path = STDIN_PATH,
    *,
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> FileReport:
    """Scan and validate ``text`` as if it were the contents of ``path``."""
    blocks = scan_blocks(text)
    annotations = [annotation for block in blocks for annotation in block.annotations]
    return FileReport(
        path=path,
        blocks=tuple(blocks),
        diagnostics=tuple(validate_annotations(annotations, rules=rules)),
    )


@dataclass(slots=True)
class CheckRun:
    """Reports for readable files plus the read errors of the others."""

    reports: list[FileReport] = field(default_factory=list)
    errors: dict[Path, str] = field(default_factory=dict)


def check_files(
    paths: Iterable[Path],
    *,
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> CheckRun:
    """Check each file in ``paths``; unreadable files are recorded, not raised.

    Args:
        paths: Files to read as UTF-8 text.
        rules: Validation rules applied to every file.

    Returns:
        CheckRun: Reports in input order and per-file read errors.
    """
    run = CheckRun()
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            run.errors[path] = str(exc)
            continue
        run.reports.append(check_source(text, path, rules=rules))
    return run


__all__ = ["STDIN_PATH", "CheckRun", "check_files", "check_source"]
