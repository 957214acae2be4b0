# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .annotations import annotations_command
from .check import check_command
from .typer_ext import create_typer

app = create_typer(
    name="rovodoc",
    help="Validate #[rovo] documentation annotations.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rovodoc {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Validate #[rovo] documentation annotations."""
    del version


app.command("check", help="Validate annotations and report diagnostics.")(check_command)
app.command("annotations", help="Print the annotation blocks of one file as JSON.")(annotations_command)

__all__ = ["app"]
