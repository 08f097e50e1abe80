# contribkit/cli/commands/check.py
"""
Read-only verification: version, formatting, types, lint, CLI usage docs.

Usage:
    contrib check

Stops at the first failing step.
"""

from __future__ import annotations

from contribkit.cli.utils import execute, load_config
from contribkit.workflow.check import build_check_steps


def command() -> None:
    config = load_config()
    execute("contrib check", build_check_steps(config), fail_fast=True)
