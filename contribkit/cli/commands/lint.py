# contribkit/cli/commands/lint.py
"""
Auto-format, apply safe lint fixes and regenerate the CLI usage docs.

Usage:
    contrib lint
"""

from __future__ import annotations

from contribkit.cli.utils import execute, load_config
from contribkit.workflow.lint import build_lint_steps


def command() -> None:
    config = load_config()
    execute("contrib lint", build_lint_steps(config), fail_fast=False)
