# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and layered loading for the rovodoc CLI."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .severity import Severity

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = ".rovodoc.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "rovodoc"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class OutputFormat(str, Enum):
    """Report formats supported by ``rovodoc check``."""

    TEXT = "text"
    JSON = "json"
    SARIF = "sarif"


class Config(BaseModel):
    """Settings controlling discovery, reporting and exit status."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    include: tuple[str, ...] = Field(default=("*.rs",))
    exclude: tuple[str, ...] = Field(default=("target", ".git"))
    output: OutputFormat = OutputFormat.TEXT
    fail_on: Severity = Severity.ERROR
    color: bool = True
    emoji: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the configuration."""
        return self.model_dump(mode="json")

    def with_overrides(self, **overrides: Any) -> Config:
        """Return a copy with every non-``None`` override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return _build_config(_deep_merge(self.to_dict(), values), source="command line")


class ConfigSource(Protocol):
    """Provide a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the raw fragment contributed by this source."""
        ...

    def describe(self) -> str:
        """Return a human readable description of the source."""
        ...


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return Config().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        return _read_toml(self._path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.rovodoc]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def _read_toml(path: Path) -> dict[str, Any]:
    """Return the parsed TOML document at ``path`` or ``{}`` when absent."""
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _build_config(data: Mapping[str, Any], *, source: str) -> Config:
    try:
        return Config.model_validate(dict(data))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration from {source}: {problems}") from exc


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = tuple(sources)

    @classmethod
    def for_root(cls, root: Path, *, path: Path | None = None) -> ConfigLoader:
        """Return a loader for ``root``.

        Args:
            root: Project directory holding ``pyproject.toml``.
            path: Explicit configuration file replacing ``.rovodoc.toml``.

        Returns:
            ConfigLoader: Loader applying defaults, pyproject and TOML layers.
        """
        explicit = path if path is not None else root / CONFIG_FILENAME
        return cls(
            [
                DefaultConfigSource(),
                PyProjectConfigSource(root / PYPROJECT_FILENAME),
                TomlConfigSource(explicit),
            ]
        )

    def load(self) -> Config:
        """Merge every source in order and validate the result.

        Raises:
            ConfigError: When a source is unreadable or the merged data is
                invalid.
        """
        merged: dict[str, Any] = {}
        config = Config()
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged = _deep_merge(merged, fragment)
            config = _build_config(merged, source=source.describe())
        return config


def load_config(root: Path, *, path: Path | None = None) -> Config:
    """Load the configuration for ``root``.

    Raises:
        ConfigError: When ``path`` is given but missing, or any layer is invalid.
    """
    if path is not None and not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    return ConfigLoader.for_root(root, path=path).load()


__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "OutputFormat",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
