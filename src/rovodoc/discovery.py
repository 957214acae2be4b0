# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem discovery of source files to scan."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path

from .config import Config


@dataclass(frozen=True, slots=True)
class WalkContext:
    """Parameters required to walk the filesystem hierarchy."""

    base: Path
    include: tuple[str, ...]
    exclude: frozenset[str]


def _matches(path: Path, patterns: Sequence[str]) -> bool:
    return any(fnmatch(path.name, pattern) for pattern in patterns)


def _walk(context: WalkContext) -> Iterator[Path]:
    """Yield files under ``context.base`` matching the include globs."""
    for dirpath, dirnames, filenames in os.walk(context.base):
        dirnames[:] = sorted(name for name in dirnames if name not in context.exclude)
        current = Path(dirpath)
        for filename in sorted(filenames):
            candidate = current / filename
            if _matches(candidate, context.include):
                yield candidate.resolve()


def discover_files(paths: Iterable[Path], config: Config) -> list[Path]:
    """Return the files to scan for ``paths``.

    Explicit files are kept whatever their name; directories are walked
    recursively, skipping excluded directory names.

    Args:
        paths: Files or directories supplied by the caller.
        config: Active configuration providing include and exclude rules.

    Returns:
        list[Path]: Sorted, de-duplicated, resolved file paths. Missing paths
        are dropped.
    """
    discovered: set[Path] = set()
    exclude = frozenset(config.exclude)
    for entry in paths:
        if entry.is_file():
            discovered.add(entry.resolve())
            continue
        if not entry.is_dir():
            continue
        discovered.update(_walk(WalkContext(base=entry, include=config.include, exclude=exclude)))
    return sorted(discovered)


__all__ = ["WalkContext", "discover_files"]
