# contribkit/cli/commands/version.py
"""
Check that the changelog and the package agree on the version.

Usage:
    contrib sync-version
"""

from __future__ import annotations

import typer

from contribkit.cli.ui import ui
from contribkit.cli.utils import load_config
from contribkit.core.exceptions import ContribError
from contribkit.workflow.version import check_version


def command() -> None:
    config = load_config()
    try:
        ok, message = check_version(config)
    except ContribError as e:
        ui.error(str(e))
        raise typer.Exit(1) from e

    if not ok:
        ui.error(message)
        raise typer.Exit(1)
    ui.success(message)
