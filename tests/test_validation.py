# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for configuration validation."""

from __future__ import annotations

from pathlib import Path

from pyhooks.models import NormalizedConfig, ResolvedHookConfig
from pyhooks.validation import invalid_keys, validate_config


def _config(hooks: dict[str, ResolvedHookConfig | bool]) -> NormalizedConfig:
    return NormalizedConfig(
        no_ci=True,
        ci_only=False,
        preserve_unused=False,
        project_path=Path("/repo"),
        hooks=hooks,
    )


def test_unknown_hook_name_is_invalid() -> None:
    config = {"hooks": {"pre-commit": {"command": "lint"}, "not-a-real-hook": {"command": "x"}}}
    assert validate_config(config) is False
    assert invalid_keys(config) == ["not-a-real-hook"]


def test_preserve_unused_is_a_legal_key() -> None:
    config = {"hooks": {"pre-commit": {"command": "lint"}, "preserveUnused": True}}
    assert validate_config(config) is True
    assert invalid_keys(config) == []


def test_normalized_config_is_validated() -> None:
    valid = _config({"pre-push": ResolvedHookConfig(command="pytest"), "preserve_unused": True})
    invalid = _config({"pre-push": ResolvedHookConfig(command="pytest"), "prepush": ResolvedHookConfig(command="x")})
    assert validate_config(valid) is True
    assert validate_config(invalid) is False


def test_missing_or_empty_hooks_are_valid() -> None:
    assert validate_config({}) is True
    assert validate_config({"hooks": None}) is True
    assert validate_config(_config({})) is True


class _RecordingHooks(dict[str, object]):
    """Hooks table remembering which keys validation looked at."""

    def __init__(self, *args: object, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)
        self.visited: list[str] = []

    def keys(self):  # type: ignore[override]
        for key in super().keys():
            self.visited.append(key)
            yield key


def test_validation_stops_at_first_unknown_key() -> None:
    hooks = _RecordingHooks({"pre-commit": {}, "bogus": {}, "also-bogus": {}, "pre-push": {}})
    assert validate_config({"hooks": hooks}) is False
    assert hooks.visited == ["pre-commit", "bogus"]


def test_invalid_keys_reports_every_offender() -> None:
    config = {"hooks": {"bogus": {}, "pre-commit": {}, "also-bogus": {}}}
    assert invalid_keys(config) == ["bogus", "also-bogus"]
