# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for resolving hook options into commands."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from pyhooks.errors import AmbiguousHookSource, ConfigError, HookFileNotFound
from pyhooks.models import ResolvedHookConfig, UserConfig
from pyhooks.resolver import HookResolver, resolve_hook, script_command


@pytest.mark.parametrize(
    "extra",
    [{}, {"noCi": False}, {"ciOnly": True}, {"noCi": True, "ciOnly": False}],
)
def test_command_and_file_are_mutually_exclusive(repo: Path, extra: dict[str, bool]) -> None:
    config = UserConfig(hooks={"pre-commit": {"command": "make lint", "file": "hook.sh", **extra}})
    with pytest.raises(AmbiguousHookSource) as excinfo:
        resolve_hook(config, "pre-commit")
    assert excinfo.value.hook == "pre-commit"


@pytest.mark.parametrize("command", ["make lint", "npx lint-staged && echo 'done'", "  spaced  "])
def test_explicit_command_is_used_verbatim(repo: Path, command: str) -> None:
    config = UserConfig(hooks={"pre-commit": {"command": command}})
    assert resolve_hook(config, "pre-commit") == ResolvedHookConfig(command=command)


def test_explicit_command_does_not_need_a_repository(tmp_path: Path) -> None:
    config = UserConfig(project_path=tmp_path, hooks={"pre-push": {"command": "pytest"}})
    resolved = resolve_hook(config, "pre-push")
    assert resolved is not None
    assert resolved.command == "pytest"


def test_file_runs_through_script_runner(repo: Path) -> None:
    config = UserConfig(hooks={"pre-commit": {"file": "scripts/hooks/pre-commit.ts"}})
    resolved = resolve_hook(config, "pre-commit")
    assert resolved is not None
    assert resolved.command == 'uv run scripts/hooks/pre-commit.ts "$@"'


def test_file_path_with_spaces_is_quoted(repo: Path) -> None:
    config = UserConfig(hooks={"pre-commit": {"file": "scripts/my hooks/pre commit.py"}})
    resolved = resolve_hook(config, "pre-commit")
    assert resolved is not None
    assert resolved.command == "uv run 'scripts/my hooks/pre commit.py' \"$@\""


def test_custom_script_runner(repo: Path) -> None:
    config = UserConfig(scriptRunner="pnpm exec tsx", hooks={"commit-msg": {"file": "hooks/msg.ts"}})
    resolved = resolve_hook(config, "commit-msg")
    assert resolved is not None
    assert resolved.command == 'pnpm exec tsx hooks/msg.ts "$@"'


def test_script_command_escapes_shell_metacharacters() -> None:
    assert script_command("a;b$c.sh") == "uv run 'a;b$c.sh' \"$@\""


def test_discovery_prefers_first_pattern(repo: Path, write_file: Callable[..., Path]) -> None:
    first = write_file(repo, "scripts/hooks/pre-commit.js")
    write_file(repo, "scripts/src/hooks/pre-commit.js")
    config = UserConfig(hooks={"pre-commit": True})
    resolved = resolve_hook(config, "pre-commit")
    assert resolved == ResolvedHookConfig(command=script_command(first.resolve()))


def test_discovery_falls_back_to_later_patterns(repo: Path, write_file: Callable[..., Path]) -> None:
    script = write_file(repo, "packages/scripts/src/hooks/pre-push.ts")
    resolved = resolve_hook(UserConfig(hooks={"pre-push": {}}), "pre-push")
    assert resolved is not None
    assert resolved.command == script_command(script.resolve())


def test_discovery_is_deterministic_within_a_pattern(repo: Path, write_file: Callable[..., Path]) -> None:
    write_file(repo, "scripts/hooks/pre-commit.ts")
    expected = write_file(repo, "scripts/hooks/pre-commit.js")
    config = UserConfig(hooks={"pre-commit": True})
    for _ in range(3):
        resolved = resolve_hook(config, "pre-commit")
        assert resolved is not None
        assert resolved.command == script_command(expected.resolve())


def test_discovery_searches_from_repository_root(repo: Path, write_file: Callable[..., Path]) -> None:
    script = write_file(repo, "scripts/hooks/pre-commit.sh")
    nested = repo / "packages" / "web"
    nested.mkdir(parents=True)
    config = UserConfig(project_path=nested, hooks={"pre-commit": {"noCi": False}})
    resolved = resolve_hook(config, "pre-commit")
    assert resolved == ResolvedHookConfig(command=script_command(script.resolve()), no_ci=False)


@pytest.mark.parametrize("entry", [None, True, {}])
def test_undeclared_and_undiscoverable_hook_is_absent(repo: Path, entry: object) -> None:
    hooks = {} if entry is None else {"pre-commit": entry}
    assert resolve_hook(UserConfig(hooks=hooks), "pre-commit") is None


def test_options_without_source_require_a_script(repo: Path) -> None:
    config = UserConfig(hooks={"pre-commit": {"noCi": False}})
    with pytest.raises(HookFileNotFound, match="pre-commit"):
        resolve_hook(config, "pre-commit")


def test_per_hook_overrides_apply_over_defaults(repo: Path) -> None:
    config = UserConfig(hooks={"pre-push": {"command": "pytest", "noCi": False, "ciOnly": True}})
    assert resolve_hook(config, "pre-push") == ResolvedHookConfig(command="pytest", no_ci=False, ci_only=True)


def test_defaults_apply_when_no_overrides(repo: Path) -> None:
    resolved = resolve_hook(UserConfig(hooks={"pre-push": {"command": "pytest"}}), "pre-push")
    assert resolved is not None
    assert resolved.no_ci is True
    assert resolved.ci_only is False


def test_snake_case_option_names_are_accepted(repo: Path) -> None:
    config = UserConfig(hooks={"pre-push": {"command": "pytest", "no_ci": False}})
    resolved = resolve_hook(config, "pre-push")
    assert resolved is not None
    assert resolved.no_ci is False


@pytest.mark.parametrize("entry", ["npm test", 3, ["a"]])
def test_non_table_entries_are_rejected(repo: Path, entry: object) -> None:
    with pytest.raises(ConfigError):
        resolve_hook(UserConfig(hooks={"pre-commit": entry}), "pre-commit")


@pytest.mark.parametrize(
    "options",
    [{"command": "make lint", "flie": "x.sh"}, {"comand": "make lint"}, {"file": "hook.sh", "no-ci": True}],
)
def test_unknown_hook_options_are_rejected(repo: Path, options: dict[str, object]) -> None:
    config = UserConfig(hooks={"pre-commit": options})
    with pytest.raises(ConfigError) as excinfo:
        resolve_hook(config, "pre-commit")
    assert not isinstance(excinfo.value, HookFileNotFound)
    assert "pre-commit" in str(excinfo.value)


def test_resolver_uses_supplied_root_and_search(tmp_path: Path) -> None:
    calls: list[tuple[tuple[str, ...], Path]] = []

    def fake_search(patterns: Sequence[str], root: Path) -> Path | None:
        calls.append((tuple(patterns), root))
        return root / "scripts" / "hooks" / "pre-commit.py"

    resolver = HookResolver(UserConfig(hooks={"pre-commit": True}), repository_root=tmp_path, search=fake_search)
    resolved = resolver.resolve("pre-commit")

    assert resolved is not None
    assert calls == [
        (
            (
                "scripts/hooks/pre-commit.*",
                "scripts/src/hooks/pre-commit.*",
                "packages/scripts/src/hooks/pre-commit.*",
            ),
            tmp_path,
        )
    ]
    assert resolver.repository_root == tmp_path
