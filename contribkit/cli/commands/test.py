# contribkit/cli/commands/test.py
"""
Run the test suite under coverage.

Usage:
    contrib test                          # check, full suite, coverage report
    contrib test tests/test_x.py -k name  # arguments go to pytest as-is
    contrib test --no-check -x --pdb
"""

from __future__ import annotations

from typing import Sequence

from contribkit.cli.utils import execute, load_config
from contribkit.workflow.coverage import format_threshold
from contribkit.workflow.test import build_test_steps, is_ci


def command(pytest_args: Sequence[str] = (), no_check: bool = False) -> None:
    config = load_config()
    subtitle = (
        "CI mode: pytest only"
        if is_ci(config)
        else f"coverage threshold {format_threshold(config.test.coverage_threshold)}%"
    )
    execute(
        "contrib test",
        build_test_steps(config, pytest_args=list(pytest_args), run_check=not no_check),
        subtitle=subtitle,
    )
