# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while loading and resolving hook configuration."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class AmbiguousHookSource(ConfigError):
    """Raised when a hook declares both ``command`` and ``file``."""

    def __init__(self, hook: str | None = None) -> None:
        """Initialise the error for the offending hook.

        Args:
            hook: Name of the hook whose options are ambiguous, when known.
        """

        subject = f"hook {hook!r}" if hook else "hook options"
        super().__init__(f"Only one of `file` or `command` can be provided in the {subject}.")
        self.hook = hook


class HookFileNotFound(ConfigError):
    """Raised when a configured hook has no command, file, or discoverable script."""

    def __init__(self, hook: str) -> None:
        super().__init__(f"file for hook {hook} was not found.")
        self.hook = hook


class RepositoryRootNotFound(ConfigError):
    """Raised when no git repository encloses the starting directory."""

    def __init__(self, start: Path) -> None:
        super().__init__(f"Not a git repository (no .git found from {start})")
        self.start = start


__all__ = [
    "AmbiguousHookSource",
    "ConfigError",
    "HookFileNotFound",
    "RepositoryRootNotFound",
]
