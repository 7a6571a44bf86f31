# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .config_cmd import check_command, show_command
from .hooks import install_command

app = typer.Typer(
    name="pyhooks",
    help="Install git hooks from project configuration.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("install", help="Install git hooks declared in the project configuration.")(install_command)
app.command("show", help="Print the resolved configuration as JSON.")(show_command)
app.command("check", help="Validate hook and option names in the configuration.")(check_command)

__all__ = ["app"]
