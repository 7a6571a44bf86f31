# SPDX-License-Identifier: MIT
"""Helper services used by the hook CLI commands."""

from __future__ import annotations

from ..config_loader import load_config
from ..errors import ConfigError
from ..installer import InstallResult, set_hooks_from_config
from ..models import NormalizedConfig
from ._hooks_cli_models import HookCLIOptions
from .shared import CLIError, CLILogger


def build_config(options: HookCLIOptions, *, logger: CLILogger) -> NormalizedConfig:
    """Return the normalized configuration for the provided options.

    Args:
        options: Normalized CLI options.
        logger: Logger used to emit debug and failure messages.

    Returns:
        NormalizedConfig: Configuration with CLI flags applied as overrides.

    Raises:
        CLIError: Raised when the configuration cannot be loaded or resolved.
    """

    try:
        result = load_config(options.overrides())
    except ConfigError as exc:
        logger.fail(f"Was not able to resolve git hooks. Error: {exc}")
        raise CLIError(str(exc)) from exc
    source = result.source.describe() if result.source is not None else "defaults only"
    logger.debug(f"source={source!r} hooks={','.join(result.config.hooks) or '-'}")
    return result.config


def perform_installation(options: HookCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Build the configuration and install hooks for the provided options.

    Raises:
        CLIError: Raised when resolution fails or the repository cannot be located.
    """

    config = build_config(options, logger=logger)
    try:
        return set_hooks_from_config(config, dry_run=options.dry_run, use_emoji=options.emoji)
    except (ConfigError, FileNotFoundError) as exc:
        logger.fail(f"Was not able to set git hooks. Error: {exc}")
        raise CLIError(str(exc)) from exc


def emit_hooks_summary(result: InstallResult, options: HookCLIOptions, *, logger: CLILogger) -> None:
    """Emit the outcome of an installation attempt.

    Args:
        result: The installation result from :func:`perform_installation`.
        options: CLI options controlling dry-run behaviour.
        logger: Logger used to display the summary.
    """

    if not result.hooks_set:
        logger.info(result.reason or "Hooks were not set.")
        return
    if result.backups:
        logger.warn(f"Backed up existing hooks: {', '.join(str(path) for path in result.backups)}")
    if options.dry_run and result.installed:
        logger.warn(f"DRY RUN: would install {', '.join(str(path) for path in result.installed)}")
    if not options.dry_run:
        logger.ok("Successfully set all git hooks")


__all__ = ["build_config", "emit_hooks_summary", "perform_installation"]
