# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write resolved hooks into the repository's git hooks directory."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from .environment import CI_MARKERS, FALSEY_VALUES, is_ci
from .logging import info, warn
from .models import NormalizedConfig, ResolvedHookConfig
from .registry import available_hooks, valid_options
from .repository import GIT_METADATA_DIR, find_repository_root
from .validation import invalid_keys, validate_config

HOOK_MARKER: Final[str] = "# Installed by py-hooks. Edit the project configuration instead of this file."
HOOK_MODE: Final[int] = 0o755
_GITDIR_PREFIX: Final[str] = "gitdir:"


def _ci_check() -> str:
    """Return a shell function mirroring :func:`pyhooks.environment.is_ci`."""

    values = " ".join(f'"${{{marker}:-}}"' for marker in CI_MARKERS)
    falsey = "|".join('""' if value == "" else value for value in sorted(FALSEY_VALUES))
    return "\n".join(
        [
            "_in_ci() {",
            f"  for _ci_value in {values}; do",
            "    _ci_value=$(printf '%s' \"$_ci_value\" | tr '[:upper:]' '[:lower:]' "
            "| sed 's/^[[:space:]]*//;s/[[:space:]]*$//')",
            '    case "$_ci_value" in',
            f"      {falsey}) ;;",
            "      *) return 0 ;;",
            "    esac",
            "  done",
            "  return 1",
            "}",
        ]
    )


_CI_CHECK: Final[str] = _ci_check()


@dataclass(slots=True)
class InstallResult:
    """Outcome of applying a configuration to the git hooks directory."""

    hooks_set: bool
    reason: str | None = None
    installed: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    backups: list[Path] = field(default_factory=list)


def render_hook_script(hook: ResolvedHookConfig) -> str:
    """Return the POSIX shell script installed for ``hook``.

    ``ci_only`` takes precedence over ``no_ci`` so that a hook restricted to CI
    is not also disabled there by the ``no_ci`` default.

    Args:
        hook: Resolved hook settings.

    Returns:
        str: Script text ending with a newline.
    """

    lines = ["#!/bin/sh", HOOK_MARKER]
    if hook.ci_only:
        lines.extend([_CI_CHECK, "_in_ci || exit 0"])
    elif hook.no_ci:
        lines.extend([_CI_CHECK, "_in_ci && exit 0"])
    lines.append(hook.command)
    return "\n".join(lines) + "\n"


def hooks_directory(root: Path) -> Path:
    """Return the hooks directory for the repository rooted at ``root``.

    Args:
        root: Working tree root containing a ``.git`` directory or file.

    Returns:
        Path: Directory git reads hooks from.

    Raises:
        FileNotFoundError: If ``root`` has no ``.git`` entry.
    """

    marker = root / GIT_METADATA_DIR
    if marker.is_dir():
        return marker / "hooks"
    if not marker.is_file():
        raise FileNotFoundError(f"Not a git repository (missing {marker})")
    content = marker.read_text(encoding="utf-8").strip()
    if not content.startswith(_GITDIR_PREFIX):
        raise FileNotFoundError(f"Unrecognised .git file at {marker}")
    git_dir = Path(content[len(_GITDIR_PREFIX) :].strip())
    if not git_dir.is_absolute():
        git_dir = (root / git_dir).resolve()
    # Linked worktrees share the hooks of the main repository.
    common = git_dir / "commondir"
    if common.is_file():
        git_dir = (git_dir / common.read_text(encoding="utf-8").strip()).resolve()
    return git_dir / "hooks"


def set_hooks_from_config(
    config: NormalizedConfig,
    *,
    hooks_dir: Path | None = None,
    env: Mapping[str, str] | None = None,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> InstallResult:
    """Install every resolved hook in ``config``.

    Args:
        config: Normalized configuration produced by :func:`pyhooks.get_config`.
        hooks_dir: Optional override for the target hooks directory.
        env: Environment used for CI detection; defaults to ``os.environ``.
        dry_run: When ``True`` report planned changes without touching files.
        use_emoji: Toggle emoji in progress messages.

    Returns:
        InstallResult: Whether hooks were set, with the reason when they were not.

    Raises:
        RepositoryRootNotFound: If no repository encloses ``config.project_path``.
        FileNotFoundError: If the repository's ``.git`` entry is unusable.
    """

    if not validate_config(config):
        unknown = ", ".join(invalid_keys(config))
        return InstallResult(
            hooks_set=False,
            reason=f"Config was not in correct format. Please check git hook or option names: {unknown}",
        )
    skip_reason = _ci_skip_reason(config, in_ci=is_ci(env))
    if skip_reason is not None:
        return InstallResult(hooks_set=False, reason=skip_reason)

    target_dir = hooks_dir or hooks_directory(find_repository_root(config))
    if not dry_run:
        target_dir.mkdir(parents=True, exist_ok=True)

    result = InstallResult(hooks_set=True)
    resolved = config.resolved_hooks()
    for name, hook in resolved.items():
        _install_single_hook(
            name,
            hook,
            target_dir=target_dir,
            result=result,
            dry_run=dry_run,
            use_emoji=use_emoji,
        )
    if not _preserves_unused(config):
        _remove_unused_hooks(
            resolved,
            target_dir=target_dir,
            result=result,
            dry_run=dry_run,
            use_emoji=use_emoji,
        )
    return result


def _install_single_hook(
    name: str,
    hook: ResolvedHookConfig,
    *,
    target_dir: Path,
    result: InstallResult,
    dry_run: bool,
    use_emoji: bool,
) -> None:
    """Write one hook script, backing up a hand-written hook it would replace."""

    destination = target_dir / name
    info(f"Installing {name} hook", use_emoji=use_emoji)
    if (backup := _backup_foreign_hook(destination, dry_run=dry_run, use_emoji=use_emoji)) is not None:
        result.backups.append(backup)
    if not dry_run:
        if destination.is_symlink():
            destination.unlink()
        destination.write_text(render_hook_script(hook), encoding="utf-8")
        destination.chmod(HOOK_MODE)
    result.installed.append(destination)


def _remove_unused_hooks(
    resolved: Mapping[str, ResolvedHookConfig],
    *,
    target_dir: Path,
    result: InstallResult,
    dry_run: bool,
    use_emoji: bool,
) -> None:
    """Delete scripts this installer wrote for hooks no longer configured."""

    for name in available_hooks():
        stale = target_dir / name
        if name in resolved or not is_managed_hook(stale):
            continue
        info(f"Removing unused {name} hook", use_emoji=use_emoji)
        if not dry_run:
            stale.unlink()
        result.removed.append(stale)


def is_managed_hook(path: Path) -> bool:
    """Return whether ``path`` is a hook script written by this installer."""

    if not path.is_file():
        return False
    try:
        head = path.read_text(encoding="utf-8").splitlines()[:2]
    except (OSError, UnicodeDecodeError):
        return False
    return HOOK_MARKER in head


def _backup_foreign_hook(destination: Path, *, dry_run: bool, use_emoji: bool) -> Path | None:
    # Symlinks, dangling ones included, are hand-managed hooks as well.
    present = destination.exists() or destination.is_symlink()
    if not present or is_managed_hook(destination):
        return None
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    backup_path = destination.with_name(f"{destination.name}.backup.{timestamp}")
    warn(f"Backing up existing {destination.name} hook to {backup_path}", use_emoji=use_emoji)
    if not dry_run:
        destination.rename(backup_path)
    return backup_path


def _preserves_unused(config: NormalizedConfig) -> bool:
    if config.preserve_unused:
        return True
    return any(config.hooks.get(option) is True for option in valid_options())


def _ci_skip_reason(config: NormalizedConfig, *, in_ci: bool) -> str | None:
    if config.ci_only:
        return None if in_ci else "Skipped setting hooks: `ciOnly` is set and no CI environment was detected."
    if config.no_ci and in_ci:
        return "Skipped setting hooks in CI because `noCi` is set."
    return None


__all__ = [
    "HOOK_MARKER",
    "InstallResult",
    "hooks_directory",
    "is_managed_hook",
    "render_hook_script",
    "set_hooks_from_config",
]
