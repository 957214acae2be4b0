# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command validating ``#[rovo]`` annotations in Rust sources."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..config import Config, ConfigError, OutputFormat, load_config
from ..discovery import discover_files
from ..logging import Tone, announce, get_console, section
from ..reporting import build_json_report, build_sarif_report, render_text
from ..runner import CheckRun, check_files, check_source
from ..severity import Severity


def _resolve_config(
    root: Path,
    config_path: Path | None,
    *,
    output: OutputFormat | None,
    fail_on: Severity | None,
    no_color: bool,
    no_emoji: bool,
) -> Config:
    try:
        config = load_config(root, path=config_path)
        return config.with_overrides(
            output=output,
            fail_on=fail_on,
            color=False if no_color else None,
            emoji=False if no_emoji else None,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _emit(run: CheckRun, config: Config) -> None:
    if config.output is not OutputFormat.TEXT:
        # stdout carries the machine-readable document only
        for path, message in run.errors.items():
            typer.echo(f"{path}: {message}", err=True)
        if config.output is OutputFormat.SARIF:
            payload = build_sarif_report(run.reports, version=__version__)
        else:
            payload = build_json_report(run.reports)
        typer.echo(json.dumps(payload, indent=2))
        return

    for path, message in run.errors.items():
        announce(Tone.FAIL, f"Unable to read {path}: {message}", config)
    total = render_text(run.reports, get_console(config))
    section("Summary", config)
    checked = len(run.reports)
    if total:
        announce(Tone.FAIL, f"{total} diagnostic(s) across {checked} file(s)", config)
    else:
        announce(Tone.OK, f"No annotation problems in {checked} file(s)", config)


def check_command(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Files or directories to check (defaults to --root)."),
    ] = None,
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root holding configuration.")] = Path("."),
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Explicit configuration file replacing .rovodoc.toml."),
    ] = None,
    output: Annotated[
        OutputFormat | None,
        typer.Option("--output", "-o", help="Report format.", case_sensitive=False),
    ] = None,
    fail_on: Annotated[
        Severity | None,
        typer.Option("--fail-on", help="Lowest severity that fails the run.", case_sensitive=False),
    ] = None,
    stdin: Annotated[bool, typer.Option("--stdin", help="Read a single document from stdin.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
) -> None:
    """Validate annotations and report diagnostics.

    Exits with status 1 when diagnostics reach ``--fail-on`` or a file could
    not be read; bad parameters exit with status 2.
    """
    root = root.resolve()
    config = _resolve_config(
        root,
        config_path,
        output=output,
        fail_on=fail_on,
        no_color=no_color,
        no_emoji=no_emoji,
    )

    if stdin:
        if paths:
            raise typer.BadParameter("Paths cannot be combined with --stdin.")
        text = sys.stdin.read()
        if not text.strip() and config.output is OutputFormat.TEXT:
            announce(Tone.WARN, "No input received on stdin", config)
        run = CheckRun(reports=[check_source(text)])
    else:
        targets = [path if path.is_absolute() else Path.cwd() / path for path in paths or [root]]
        missing = [str(path) for path in targets if not path.exists()]
        if missing:
            raise typer.BadParameter(f"Path(s) not found: {', '.join(missing)}")
        files = discover_files(targets, config)
        if not files:
            if config.output is OutputFormat.TEXT:
                announce(Tone.INFO, "No source files found", config)
            else:
                _emit(CheckRun(), config)
            raise typer.Exit(code=0)
        run = check_files(files)

    _emit(run, config)
    failed = bool(run.errors) or any(report.has_failures(config.fail_on) for report in run.reports)
    raise typer.Exit(code=1 if failed else 0)


__all__ = ["check_command"]
