# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command dumping the annotation blocks of a single file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from ..reporting import serialize_block
from ..scanner import scan_blocks


def annotations_command(
    path: Annotated[Path, typer.Argument(help="Rust source file to scan.")],
) -> None:
    """Print the annotations attached to each ``#[rovo]`` marker as JSON."""
    file_path = path.expanduser().resolve()
    if not file_path.is_file():
        raise typer.BadParameter(f"File not found or unreadable: {path}")
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc
    payload = {
        "path": str(file_path),
        "blocks": [serialize_block(block) for block in scan_blocks(text)],
    }
    typer.echo(json.dumps(payload, indent=2))


__all__ = ["annotations_command"]
