# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the git repository root used as the base for hook discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from .errors import RepositoryRootNotFound
from .models import NormalizedConfig, UserConfig

GIT_METADATA_DIR: Final[str] = ".git"


def find_repository_root(start: UserConfig | NormalizedConfig | Path | str | None = None) -> Path:
    """Return the absolute root of the repository enclosing ``start``.

    The search ascends from ``start`` until a directory holding a ``.git``
    entry is found. Worktrees and submodules use a ``.git`` file rather than a
    directory; both count as a repository marker.

    Args:
        start: Configuration carrying ``project_path``, an explicit path, or
            ``None`` to begin at the current working directory.

    Returns:
        Path: Absolute repository root directory.

    Raises:
        RepositoryRootNotFound: If no ancestor contains a ``.git`` entry.
    """

    origin = _starting_directory(start)
    for candidate in (origin, *origin.parents):
        if (candidate / GIT_METADATA_DIR).exists():
            return candidate
    raise RepositoryRootNotFound(origin)


def _starting_directory(start: UserConfig | NormalizedConfig | Path | str | None) -> Path:
    if isinstance(start, (UserConfig, NormalizedConfig)):
        start = start.project_path
    base = Path.cwd() if start is None else Path(start).expanduser()
    resolved = base.resolve()
    return resolved if resolved.is_dir() else resolved.parent


__all__ = ["GIT_METADATA_DIR", "find_repository_root"]
