# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing user input and resolved hook settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import AmbiguousHookSource, ConfigError

DEFAULT_SCRIPT_RUNNER: Final[str] = "uv run"


@dataclass(frozen=True, slots=True)
class ExplicitCommand:
    """Hook source backed by a literal shell command."""

    command: str


@dataclass(frozen=True, slots=True)
class ScriptFile:
    """Hook source backed by a script path executed through the script runner."""

    path: str


@dataclass(frozen=True, slots=True)
class Discover:
    """Hook source located by naming convention under the repository root."""


HookSource: TypeAlias = ExplicitCommand | ScriptFile | Discover


class HookOptions(BaseModel):
    """Per-hook settings declared in the ``hooks`` table."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid")

    command: str | None = None
    file: str | None = None
    no_ci: bool | None = None
    ci_only: bool | None = None

    @classmethod
    def parse(cls, raw: object, *, hook: str) -> HookOptions | None:
        """Return options parsed from a raw ``hooks`` table entry.

        ``true`` and an empty table both declare the hook without options.

        Args:
            raw: Value stored under ``hook`` in the configuration.
            hook: Hook name used for error reporting.

        Returns:
            HookOptions | None: Parsed options, or ``None`` when nothing was declared.

        Raises:
            ConfigError: If the entry is neither a table nor ``true``.
        """

        if raw is None or raw is True:
            return None
        if not isinstance(raw, Mapping):
            raise ConfigError(f"Options for hook {hook!r} must be a table, got {raw!r}")
        if not raw:
            return None
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            raise ConfigError(f"Invalid options for hook {hook!r}: {exc}") from exc

    def source(self, hook: str | None = None) -> HookSource:
        """Return the tagged source variant these options describe.

        Raises:
            AmbiguousHookSource: If both ``command`` and ``file`` are set.
        """

        if self.command is not None and self.file is not None:
            raise AmbiguousHookSource(hook)
        if self.command is not None:
            return ExplicitCommand(self.command)
        if self.file is not None:
            return ScriptFile(self.file)
        return Discover()

    def overrides(self) -> dict[str, bool]:
        """Return the CI flags explicitly set for this hook."""

        values = {"no_ci": self.no_ci, "ci_only": self.ci_only}
        return {key: value for key, value in values.items() if value is not None}


class UserConfig(BaseModel):
    """Partially populated configuration read from disk and caller overrides."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    hooks: dict[str, Any] | None = None
    project_path: Path | None = None
    preserve_unused: bool | None = None
    no_ci: bool | None = None
    ci_only: bool | None = None
    script_runner: str | None = None

    def declared_hooks(self) -> tuple[str, ...]:
        """Return hook names in declaration order."""

        return tuple(self.hooks or ())

    def raw_hook(self, hook: str) -> object:
        """Return the raw ``hooks`` entry for ``hook`` or ``None``."""

        return (self.hooks or {}).get(hook)


class ResolvedHookConfig(BaseModel):
    """Fully resolved settings for one hook."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    command: str
    no_ci: bool = True
    ci_only: bool = False


HookEntry: TypeAlias = ResolvedHookConfig | bool


class NormalizedConfig(BaseModel):
    """Merged configuration consumed by the validator and the installer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    no_ci: bool
    ci_only: bool
    preserve_unused: bool
    project_path: Path
    script_runner: str = DEFAULT_SCRIPT_RUNNER
    hooks: dict[str, HookEntry] = Field(default_factory=dict)

    def resolved_hooks(self) -> dict[str, ResolvedHookConfig]:
        """Return only the hook entries, skipping non-hook options."""

        return {name: entry for name, entry in self.hooks.items() if isinstance(entry, ResolvedHookConfig)}


__all__ = [
    "DEFAULT_SCRIPT_RUNNER",
    "Discover",
    "ExplicitCommand",
    "HookEntry",
    "HookOptions",
    "HookSource",
    "NormalizedConfig",
    "ResolvedHookConfig",
    "ScriptFile",
    "UserConfig",
]
