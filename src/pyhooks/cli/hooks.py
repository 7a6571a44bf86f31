# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for installing git hooks from configuration."""

from __future__ import annotations

import typer

from ..environment import is_paas
from ._hooks_cli_models import (
    CI_ONLY_OPTION,
    DEBUG_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    NO_CI_OPTION,
    PROJECT_PATH_OPTION,
    HookCLIOptions,
)
from ._hooks_cli_services import emit_hooks_summary, perform_installation
from .shared import CLIError, build_cli_logger


def install_command(
    project_path: PROJECT_PATH_OPTION = None,
    no_ci: NO_CI_OPTION = False,
    ci_only: CI_ONLY_OPTION = False,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Install git hooks declared in the project configuration."""

    options = HookCLIOptions.from_cli(
        project_path,
        no_ci=no_ci,
        ci_only=ci_only,
        dry_run=dry_run,
        emoji=emoji,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    if is_paas():
        logger.info("Skipped setting hooks on Heroku.")
        raise typer.Exit(code=0)
    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_hooks_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


__all__ = ["install_command"]
