# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for repository root discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyhooks.errors import RepositoryRootNotFound
from pyhooks.models import UserConfig
from pyhooks.repository import find_repository_root


def test_finds_root_from_working_directory(repo: Path) -> None:
    assert find_repository_root() == repo.resolve()


def test_finds_root_from_nested_project_path(repo: Path) -> None:
    nested = repo / "packages" / "app"
    nested.mkdir(parents=True)
    assert find_repository_root(UserConfig(project_path=nested)) == repo.resolve()
    assert find_repository_root(nested) == repo.resolve()


def test_accepts_git_file_used_by_worktrees(tmp_path: Path) -> None:
    worktree = tmp_path / "worktree"
    worktree.mkdir()
    (worktree / ".git").write_text("gitdir: /elsewhere/.git/worktrees/worktree\n", encoding="utf-8")
    assert find_repository_root(worktree / "src") == worktree.resolve()


def test_missing_repository_raises(tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    outside.mkdir()
    with pytest.raises(RepositoryRootNotFound) as excinfo:
        find_repository_root(outside)
    assert excinfo.value.start == outside.resolve()
