# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer app whose command help lists options alphabetically."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import typer
from click import Context, HelpFormatter, Option, Parameter
from typer.core import TyperCommand, TyperGroup

CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


def _option_sort_key(param: Parameter) -> str:
    """Return the long option name of ``param`` without dashes, lowercased."""

    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_names = [name for name in names if name.startswith("--")]
    return (long_names or names or [param.name or ""])[0].lstrip("-").lower()


class SortedHelpCommand(TyperCommand):
    """Command rendering arguments in declaration order and options sorted."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if isinstance(param, Option):
                options.append((_option_sort_key(param), record))
            else:
                arguments.append(record)

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            options.sort(key=lambda item: item[0])
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in options])


class SortedHelpGroup(TyperGroup):
    command_class = SortedHelpCommand


class SortedTyper(typer.Typer):
    """Typer app registering :class:`SortedHelpCommand` commands.

    Rich help rendering bypasses ``format_options``, so the plain click
    formatter is selected.
    """

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("cls", SortedHelpGroup)
        kwargs.setdefault("rich_markup_mode", None)
        super().__init__(**kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        return super().command(name, cls=cls or SortedHelpCommand, **kwargs)


def create_typer(**kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` built from ``kwargs``."""

    return SortedTyper(**kwargs)


__all__ = ["SortedHelpCommand", "SortedHelpGroup", "SortedTyper", "create_typer"]
