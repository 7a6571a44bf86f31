# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands for inspecting and validating the resolved configuration."""

from __future__ import annotations

import json

import typer

from ..validation import invalid_keys, validate_config
from ._hooks_cli_models import DEBUG_OPTION, EMOJI_OPTION, PROJECT_PATH_OPTION, HookCLIOptions
from ._hooks_cli_services import build_config
from .shared import CLIError, build_cli_logger


def show_command(
    project_path: PROJECT_PATH_OPTION = None,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Print the normalized configuration as JSON."""

    options = HookCLIOptions.from_cli(project_path, emoji=emoji, debug=debug)
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    try:
        config = build_config(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(json.dumps(config.model_dump(mode="json", by_alias=True), indent=2))
    raise typer.Exit(code=0)


def check_command(
    project_path: PROJECT_PATH_OPTION = None,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Exit non-zero when the configuration names unknown hooks or options."""

    options = HookCLIOptions.from_cli(project_path, emoji=emoji, debug=debug)
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    try:
        config = build_config(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    if not validate_config(config):
        logger.fail(f"Unknown git hook or option names: {', '.join(invalid_keys(config))}")
        raise typer.Exit(code=1)
    logger.ok(f"Configuration is valid ({len(config.resolved_hooks())} hooks)")
    raise typer.Exit(code=0)


__all__ = ["check_command", "show_command"]
