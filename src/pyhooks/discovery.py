# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convention-based search for hook scripts under the repository root."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Final

SEARCH_DIRECTORIES: Final[tuple[str, ...]] = (
    "scripts/hooks",
    "scripts/src/hooks",
    "packages/scripts/src/hooks",
)

PathSearch = Callable[[Sequence[str], Path], Path | None]


def hook_patterns(hook: str) -> tuple[str, ...]:
    """Return the ordered glob patterns that may hold a script for ``hook``.

    Args:
        hook: Git hook name such as ``pre-commit``.

    Returns:
        tuple[str, ...]: Patterns relative to the repository root, highest priority first.
    """

    return tuple(f"{directory}/{hook}.*" for directory in SEARCH_DIRECTORIES)


def iter_matches(patterns: Sequence[str], root: Path) -> Iterator[Path]:
    """Yield files matching ``patterns`` under ``root``.

    Pattern order is preserved. Matches within one pattern are sorted so the
    result does not depend on directory listing order.

    Args:
        patterns: Glob patterns relative to ``root``.
        root: Directory anchoring the search.

    Yields:
        Path: Absolute paths of matching files.
    """

    base = root.resolve()
    for pattern in patterns:
        for match in sorted(base.glob(pattern)):
            if match.is_file():
                yield match


def first_match(patterns: Sequence[str], root: Path) -> Path | None:
    """Return the first file matched by the first productive pattern, if any."""

    return next(iter_matches(patterns, root), None)


__all__ = ["PathSearch", "SEARCH_DIRECTORIES", "first_match", "hook_patterns", "iter_matches"]
