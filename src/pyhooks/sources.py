# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration sources (TOML, pyproject) and the upward file search."""

from __future__ import annotations

import tomllib
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pyhooks"
CONFIG_FILENAMES: Final[tuple[str, ...]] = (".py_hooks.toml", "py_hooks.toml")


class ConfigSource(ABC):
    """A single place a configuration fragment may be read from."""

    name: str

    @abstractmethod
    def load(self) -> Mapping[str, Any] | None:
        """Return the configuration fragment, or ``None`` when the source is absent."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of the source."""


class TomlConfigSource(ConfigSource):
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self.path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any] | None:
        if not self.path.is_file():
            return None
        return _read_toml(self.path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.pyhooks]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any] | None:
        data = super().load()
        if data is None:
            return None
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping) or PYPROJECT_SECTION_KEY not in tool_section:
            return None
        section = tool_section[PYPROJECT_SECTION_KEY]
        if not isinstance(section, Mapping):
            raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {self.path} must be a table")
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


@dataclass(frozen=True, slots=True)
class DiscoveredConfig:
    """Configuration fragment paired with the source it was read from."""

    source: ConfigSource
    data: Mapping[str, Any]


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Unable to parse {path}: {exc}") from exc


def sources_for_directory(directory: Path) -> tuple[ConfigSource, ...]:
    """Return candidate sources inside ``directory`` in priority order.

    Args:
        directory: Directory to inspect.

    Returns:
        tuple[ConfigSource, ...]: ``pyproject.toml`` first, then dedicated files.
    """

    return (
        PyProjectConfigSource(directory / PYPROJECT_FILENAME),
        *(TomlConfigSource(directory / filename) for filename in CONFIG_FILENAMES),
    )


def search_directories(start: Path, *, stop: Path | None = None) -> Iterator[Path]:
    """Yield ``start`` and its ancestors, ending at ``stop`` when it is an ancestor.

    Args:
        start: Directory where the search begins.
        stop: Last directory to visit. Defaults to the user's home directory.

    Yields:
        Path: Directories from nearest to farthest.
    """

    origin = start.resolve()
    boundary = (stop or Path.home()).resolve()
    for directory in (origin, *origin.parents):
        yield directory
        if directory == boundary:
            return


def find_user_config(start: Path | None = None, *, stop: Path | None = None) -> DiscoveredConfig | None:
    """Return the first configuration found searching upward from ``start``.

    Args:
        start: Directory where the search begins; defaults to the working directory.
        stop: Optional last directory to visit.

    Returns:
        DiscoveredConfig | None: The winning source and its data, or ``None``.

    Raises:
        ConfigError: If a candidate file exists but cannot be parsed.
    """

    for directory in search_directories(start or Path.cwd(), stop=stop):
        for source in sources_for_directory(directory):
            data = source.load()
            if data is not None:
                return DiscoveredConfig(source=source, data=data)
    return None


def load_user_config(start: Path | None = None, *, stop: Path | None = None) -> dict[str, Any]:
    """Return the raw user configuration, or an empty mapping when none exists."""

    discovered = find_user_config(start, stop=stop)
    return dict(discovered.data) if discovered is not None else {}


__all__ = [
    "CONFIG_FILENAMES",
    "ConfigSource",
    "DiscoveredConfig",
    "PYPROJECT_FILENAME",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "find_user_config",
    "load_user_config",
    "search_directories",
    "sources_for_directory",
]
