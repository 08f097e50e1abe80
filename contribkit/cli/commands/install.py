# contribkit/cli/commands/install.py
"""
Provision the development environment.

Usage:
    contrib install                 # venv with python3, deps + project
    contrib install -p python3.12   # choose the interpreter
    contrib install --recreate      # drop and rebuild the venv
"""

from __future__ import annotations

from typing import Optional

from contribkit.cli.utils import execute, load_config
from contribkit.workflow.install import build_install_steps
from contribkit.workflow.test import is_ci


def command(python: Optional[str] = None, recreate: bool = False) -> None:
    config = load_config()
    interpreter = python or config.install.interpreter
    where = "CI interpreter" if is_ci(config) else f"venv '{config.install.venv}'"

    execute(
        "contrib install",
        build_install_steps(config, interpreter=interpreter, recreate=recreate),
        subtitle=f"{interpreter} -> {where}",
    )
