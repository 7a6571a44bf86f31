# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve declared hooks into concrete shell commands."""

from __future__ import annotations

import shlex
from pathlib import Path

from .discovery import PathSearch, first_match, hook_patterns
from .errors import HookFileNotFound
from .models import (
    DEFAULT_SCRIPT_RUNNER,
    Discover,
    ExplicitCommand,
    HookOptions,
    HookSource,
    ResolvedHookConfig,
    ScriptFile,
    UserConfig,
)
from .repository import find_repository_root


def script_command(path: str | Path, *, runner: str = DEFAULT_SCRIPT_RUNNER) -> str:
    """Return a command running ``path`` through ``runner`` with hook arguments forwarded.

    Args:
        path: Script path, quoted so spaces and shell metacharacters survive.
        runner: Command prefix used to execute project scripts.

    Returns:
        str: Shell command forwarding the hook's positional arguments.
    """

    return f'{runner} {shlex.quote(str(path))} "$@"'


class HookResolver:
    """Turn the ``hooks`` table of a :class:`UserConfig` into resolved hook settings."""

    def __init__(
        self,
        config: UserConfig,
        *,
        repository_root: Path | None = None,
        search: PathSearch = first_match,
    ) -> None:
        """Initialise the resolver.

        Args:
            config: Merged user configuration whose hooks should be resolved.
            repository_root: Optional pre-computed repository root. When omitted
                the root is located on first use and reused afterwards.
            search: Callable returning the first path matching ordered glob patterns.
        """

        self._config = config
        self._repository_root = repository_root
        self._search = search

    @property
    def repository_root(self) -> Path:
        """Return the repository root, locating it once on first access."""

        if self._repository_root is None:
            self._repository_root = find_repository_root(self._config)
        return self._repository_root

    @property
    def script_runner(self) -> str:
        return self._config.script_runner or DEFAULT_SCRIPT_RUNNER

    def resolve(self, hook: str) -> ResolvedHookConfig | None:
        """Return the resolved configuration for ``hook``.

        Args:
            hook: Hook name declared in the configuration.

        Returns:
            ResolvedHookConfig | None: Resolved settings, or ``None`` when the hook
            was not configured and no script exists for it.

        Raises:
            AmbiguousHookSource: If the hook declares both ``command`` and ``file``.
            HookFileNotFound: If the hook declares options but nothing runnable was found.
            RepositoryRootNotFound: If discovery is required outside a repository.
        """

        options = HookOptions.parse(self._config.raw_hook(hook), hook=hook)
        source = options.source(hook) if options is not None else Discover()
        command = self._command_for(hook, source)
        if command is None:
            if options is None:
                return None
            raise HookFileNotFound(hook)
        overrides = options.overrides() if options is not None else {}
        return ResolvedHookConfig(command=command, **overrides)

    def _command_for(self, hook: str, source: HookSource) -> str | None:
        if isinstance(source, ExplicitCommand):
            return source.command
        if isinstance(source, ScriptFile):
            return script_command(source.path, runner=self.script_runner)
        match = self._search(hook_patterns(hook), self.repository_root)
        if match is None:
            return None
        return script_command(match, runner=self.script_runner)


def resolve_hook(config: UserConfig, hook: str) -> ResolvedHookConfig | None:
    """Resolve a single ``hook`` from ``config``; see :meth:`HookResolver.resolve`."""

    return HookResolver(config).resolve(hook)


__all__ = ["HookResolver", "resolve_hook", "script_command"]
