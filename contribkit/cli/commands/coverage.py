# contribkit/cli/commands/coverage.py
"""
Report coverage and enforce the threshold.

Usage:
    contrib coverage
    contrib coverage --fail-under 90
"""

from __future__ import annotations

from typing import Optional

from contribkit.cli.utils import execute, load_config
from contribkit.workflow.coverage import build_coverage_steps, format_threshold


def command(fail_under: Optional[float] = None) -> None:
    config = load_config()
    threshold = config.test.coverage_threshold if fail_under is None else fail_under
    execute(
        "contrib coverage",
        build_coverage_steps(config, fail_under=fail_under),
        subtitle=f"fail under {format_threshold(threshold)}%",
    )
