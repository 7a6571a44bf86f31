# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing legal git hooks and non-hook options."""

from __future__ import annotations

from functools import cache

_GIT_HOOKS: tuple[str, ...] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "p4-changelist",
    "p4-prepare-changelist",
    "p4-post-changelist",
    "p4-pre-submit",
    "post-index-change",
)

# Both spellings are accepted because configuration keys may be camelCase.
_NON_HOOK_OPTIONS: tuple[str, ...] = ("preserveUnused", "preserve_unused")


def available_hooks() -> tuple[str, ...]:
    """Return every git hook name in git's documentation order.

    Returns:
        tuple[str, ...]: Supported git hook identifiers.
    """

    return _GIT_HOOKS


@cache
def valid_git_hooks() -> frozenset[str]:
    """Return the memoized set of legal git hook names."""

    return frozenset(_GIT_HOOKS)


@cache
def valid_options() -> frozenset[str]:
    """Return the memoized set of option names allowed beside hooks."""

    return frozenset(_NON_HOOK_OPTIONS)


def is_supported(name: str) -> bool:
    """Return whether ``name`` identifies a git hook.

    Args:
        name: Hook name supplied by the caller.

    Returns:
        bool: ``True`` when git recognises the hook.
    """

    return name in valid_git_hooks()


def is_option(name: str) -> bool:
    """Return whether ``name`` is a non-hook option permitted in the hooks table."""

    return name in valid_options()


__all__ = [
    "available_hooks",
    "is_option",
    "is_supported",
    "valid_git_hooks",
    "valid_options",
]
