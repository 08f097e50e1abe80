# contribkit/cli/commands/cli_usage.py
"""
Regenerate (or verify) the CLI --help output embedded in the docs.

Usage:
    contrib cli-usage           # rewrite stale blocks
    contrib cli-usage --check   # fail if any block is stale
"""

from __future__ import annotations

import typer

from contribkit.cli.ui import ui
from contribkit.cli.utils import display_path, load_config
from contribkit.core.exceptions import DocumentError
from contribkit.workflow.cli_usage import update_cli_usage


def command(check: bool = False) -> None:
    config = load_config()
    try:
        updates = update_cli_usage(config.docs.cli_usage, check=check)
    except DocumentError as e:
        ui.error(str(e))
        raise typer.Exit(1) from e

    stale = False
    for update in updates:
        name = display_path(update.path)
        if update.written:
            ui.success(f"Updated {name}")
        elif update.stale:
            stale = True
            ui.error(f"CLI usage in {name} is out of date. Run `scripts/lint` to fix.")
        else:
            ui.status(name, True, "up to date")

    if stale:
        raise typer.Exit(1)
