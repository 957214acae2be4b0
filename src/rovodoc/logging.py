# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for ``rovodoc check`` honouring the colour and emoji settings."""

from __future__ import annotations

import sys
from enum import Enum
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from .config import Config


class Tone(str, Enum):
    """Kinds of status line printed by the CLI."""

    INFO = "info"
    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


_TONE_STYLES: Final[dict[Tone, tuple[str, str]]] = {
    Tone.INFO: ("ℹ️ ", "cyan"),
    Tone.OK: ("✅ ", "green"),
    Tone.WARN: ("⚠️ ", "yellow"),
    Tone.FAIL: ("❌ ", "red"),
}


def detect_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _console(colored: bool, emoji: bool, tty: bool) -> Console:
    return Console(
        color_system="auto" if colored else None,
        force_terminal=tty,
        no_color=not colored,
        emoji=emoji,
        soft_wrap=True,
    )


def get_console(config: Config) -> Console:
    """Return the shared console matching ``config``; colour needs a terminal."""

    tty = detect_tty()
    return _console(config.color and tty, config.emoji, tty)


def announce(tone: Tone, message: str, config: Config) -> None:
    """Print a one-line status ``message`` prefixed by the emoji for ``tone``."""

    symbol, style = _TONE_STYLES[tone]
    text = Text(f"{symbol if config.emoji else ''}{message}")
    if config.color:
        text.stylize(style)
    get_console(config).print(text)


def section(title: str, config: Config) -> None:
    console = get_console(config)
    console.print()
    if config.color:
        console.print(Rule(title))
    else:
        console.print(f"--- {title} ---")


__all__ = ["Tone", "announce", "detect_tty", "get_console", "section"]
