# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading utilities with layered precedence."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import DEFAULT_SCRIPT_RUNNER, HookEntry, NormalizedConfig, UserConfig
from .registry import is_option
from .resolver import HookResolver
from .sources import ConfigSource, find_user_config

HOOKS_KEY = "hooks"

ConfigLayer = Mapping[str, Any] | UserConfig | None


@dataclass(frozen=True, slots=True)
class ConfigLoadResult:
    """Normalized configuration together with the file it was read from."""

    config: NormalizedConfig
    source: ConfigSource | None


def default_layer() -> dict[str, Any]:
    """Return the defaults laid underneath every other configuration layer."""

    return {
        "no_ci": True,
        "ci_only": False,
        "preserve_unused": False,
        "project_path": Path.cwd(),
        "script_runner": DEFAULT_SCRIPT_RUNNER,
    }


def layer_config(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow-merge ordered partial configurations, rightmost winning.

    ``None`` values never override an earlier layer. The ``hooks`` table is
    taken whole from the last layer that declares it; its entries are never
    merged key by key.

    Args:
        *layers: Partial configurations using snake_case keys, lowest priority first.

    Returns:
        dict[str, Any]: Combined configuration mapping.
    """

    result: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            if value is None:
                continue
            result[key] = dict(value) if key == HOOKS_KEY else value
    return result


def resolve_hooks(config: UserConfig, *, resolver: HookResolver | None = None) -> dict[str, HookEntry]:
    """Resolve every entry of the ``hooks`` table.

    Hooks that resolve to nothing are omitted. Non-hook options such as
    ``preserveUnused`` are carried through unchanged.

    Args:
        config: Merged user configuration.
        resolver: Optional resolver; one bound to ``config`` is built when omitted.

    Returns:
        dict[str, HookEntry]: Resolved hooks keyed by name, in declaration order.

    Raises:
        ConfigError: If any hook fails to resolve or an option has the wrong type.
    """

    active = resolver or HookResolver(config)
    resolved: dict[str, HookEntry] = {}
    for name in config.declared_hooks():
        if is_option(name):
            value = config.raw_hook(name)
            if not isinstance(value, bool):
                raise ConfigError(f"Option {name!r} in the hooks table must be a boolean")
            resolved[name] = value
            continue
        if (hook := active.resolve(name)) is not None:
            resolved[name] = hook
    return resolved


def load_config(overrides: ConfigLayer = None) -> ConfigLoadResult:
    """Return the normalized configuration and the source it was read from.

    Args:
        overrides: Caller-supplied values applied on top of the discovered
            configuration. ``project_path`` also selects where discovery starts.

    Returns:
        ConfigLoadResult: Normalized configuration plus provenance.

    Raises:
        ConfigError: If a file is malformed or a hook cannot be resolved.
    """

    override_layer = _as_layer(overrides, origin="overrides")
    start = override_layer.get("project_path")
    discovered = find_user_config(Path(start) if start is not None else None)
    user_layer = _as_layer(discovered.data if discovered else None, origin="user configuration")

    user_config = _parse_user_config(layer_config(user_layer, override_layer), origin="merged configuration")
    hooks = resolve_hooks(user_config)
    merged = layer_config(
        default_layer(),
        user_config.model_dump(exclude={HOOKS_KEY}, exclude_none=True),
    )
    merged[HOOKS_KEY] = hooks
    config = NormalizedConfig.model_validate(merged)
    return ConfigLoadResult(config=config, source=discovered.source if discovered else None)


def get_config(overrides: ConfigLayer = None) -> NormalizedConfig:
    """Merge defaults, discovered user configuration, and ``overrides``."""

    return load_config(overrides).config


def _as_layer(layer: ConfigLayer, *, origin: str) -> dict[str, Any]:
    if layer is None:
        return {}
    model = layer if isinstance(layer, UserConfig) else _parse_user_config(layer, origin=origin)
    return model.model_dump(exclude_none=True)


def _parse_user_config(data: Mapping[str, Any], *, origin: str) -> UserConfig:
    try:
        return UserConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid {origin}: {exc}") from exc


__all__ = [
    "ConfigLoadResult",
    "default_layer",
    "get_config",
    "layer_config",
    "load_config",
    "resolve_hooks",
]
