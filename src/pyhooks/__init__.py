# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve, validate, and install git hooks declared in project configuration."""

from __future__ import annotations

from .config_loader import get_config, layer_config, load_config, resolve_hooks
from .errors import AmbiguousHookSource, ConfigError, HookFileNotFound, RepositoryRootNotFound
from .installer import InstallResult, set_hooks_from_config
from .models import HookOptions, NormalizedConfig, ResolvedHookConfig, UserConfig
from .repository import find_repository_root
from .resolver import HookResolver, resolve_hook
from .validation import validate_config

__all__ = [
    "AmbiguousHookSource",
    "ConfigError",
    "HookFileNotFound",
    "HookOptions",
    "HookResolver",
    "InstallResult",
    "NormalizedConfig",
    "RepositoryRootNotFound",
    "ResolvedHookConfig",
    "UserConfig",
    "find_repository_root",
    "get_config",
    "layer_config",
    "load_config",
    "resolve_hook",
    "resolve_hooks",
    "set_hooks_from_config",
    "validate_config",
]
