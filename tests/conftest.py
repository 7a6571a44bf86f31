# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pyhooks.environment import CI_MARKERS


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear CI markers and pin the home directory so discovery stays inside ``tmp_path``."""

    for name in (*CI_MARKERS, "DYNO", "HEROKU_APP_ID"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a bare-bones git working tree and make it the working directory."""

    root = tmp_path / "project"
    (root / ".git" / "hooks").mkdir(parents=True)
    monkeypatch.chdir(root)
    return root


def _write_file(root: Path, relative: str, content: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


FileWriter = Callable[..., Path]


@pytest.fixture
def write_file() -> FileWriter:
    """Return a helper writing ``content`` to ``root / relative``, creating parents."""

    return _write_file
