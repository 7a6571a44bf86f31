# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect continuous-integration and PaaS build environments."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

CI_MARKERS: Final[tuple[str, ...]] = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "BUILD_NUMBER",
    "RUN_ID",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "BUILDKITE",
    "CIRCLECI",
    "TRAVIS",
    "JENKINS_URL",
    "TF_BUILD",
)
FALSEY_VALUES: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


def _flag(env: Mapping[str, str], name: str) -> bool:
    value = env.get(name)
    return value is not None and value.strip().lower() not in FALSEY_VALUES


def is_ci(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when the environment looks like a CI runner.

    Args:
        env: Environment mapping to inspect; defaults to ``os.environ``.

    Returns:
        bool: ``True`` when any well-known CI marker is set to a truthy value.
    """

    source = os.environ if env is None else env
    return any(_flag(source, marker) for marker in CI_MARKERS)


def is_heroku(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when running on a Heroku dyno or build."""

    source = os.environ if env is None else env
    return "DYNO" in source or "HEROKU_APP_ID" in source


def is_paas(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` on platforms where hooks should never be installed."""

    return is_heroku(env)


__all__ = ["CI_MARKERS", "FALSEY_VALUES", "is_ci", "is_heroku", "is_paas"]
