# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation of hook names and options in a normalized configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .models import NormalizedConfig
from .registry import is_option, is_supported


def _hook_keys(config: NormalizedConfig | Mapping[str, Any]) -> Iterable[str]:
    if isinstance(config, NormalizedConfig):
        return config.hooks.keys()
    return (config.get("hooks") or {}).keys()


def _is_recognised(key: str) -> bool:
    return is_supported(key) or is_option(key)


def validate_config(config: NormalizedConfig | Mapping[str, Any]) -> bool:
    """Return whether every ``hooks`` key is a git hook or a known option.

    The check stops at the first unrecognised key; use :func:`invalid_keys`
    when every offender is needed.

    Args:
        config: Normalized configuration, or a mapping with a ``hooks`` table.

    Returns:
        bool: ``True`` when all keys are recognised.
    """

    return all(_is_recognised(key) for key in _hook_keys(config))


def invalid_keys(config: NormalizedConfig | Mapping[str, Any]) -> list[str]:
    """Return every unrecognised ``hooks`` key in declaration order."""

    return [key for key in _hook_keys(config) if not _is_recognised(key)]


__all__ = ["invalid_keys", "validate_config"]
