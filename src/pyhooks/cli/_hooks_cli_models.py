# SPDX-License-Identifier: MIT
"""Data structures for the hook CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

PROJECT_PATH_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--project-path",
        "-p",
        help="Directory to search for configuration (defaults to the working directory).",
    ),
]
NO_CI_OPTION = Annotated[
    bool,
    typer.Option("--no-ci", help="Do not install hooks when running in CI."),
]
CI_ONLY_OPTION = Annotated[
    bool,
    typer.Option("--ci-only", help="Only install hooks when running in CI."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print where configuration was read from."),
]


@dataclass(slots=True)
class HookCLIOptions:
    """Capture CLI options shared by the hook commands."""

    project_path: Path | None
    no_ci: bool = False
    ci_only: bool = False
    dry_run: bool = False
    emoji: bool = True
    debug: bool = False

    @classmethod
    def from_cli(
        cls,
        project_path: Path | None,
        *,
        no_ci: bool = False,
        ci_only: bool = False,
        dry_run: bool = False,
        emoji: bool = True,
        debug: bool = False,
    ) -> HookCLIOptions:
        """Return options parsed from CLI arguments."""

        return cls(
            project_path=project_path.resolve() if project_path is not None else None,
            no_ci=no_ci,
            ci_only=ci_only,
            dry_run=dry_run,
            emoji=emoji,
            debug=debug,
        )

    def overrides(self) -> dict[str, Any]:
        """Return configuration overrides implied by the flags that were passed."""

        overrides: dict[str, Any] = {}
        if self.project_path is not None:
            overrides["project_path"] = self.project_path
        if self.no_ci:
            overrides["no_ci"] = True
        if self.ci_only:
            overrides["ci_only"] = True
        return overrides


__all__ = [
    "CI_ONLY_OPTION",
    "DEBUG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "HookCLIOptions",
    "NO_CI_OPTION",
    "PROJECT_PATH_OPTION",
]
