# contribkit/workflow/test.py
"""
`scripts/test [pytest-args...]` - run the suite under coverage.

Locally:  check -> coverage run -m pytest <args> -> coverage report
In CI:    coverage run -m pytest <args>

CI runs check and coverage as separate jobs, so they are skipped there.
Arguments are passed to pytest verbatim (-k, -x, -v, --pdb, paths, ...).
"""

from __future__ import annotations

import os
from typing import Sequence

from contribkit.config.schema import WorkflowConfig
from contribkit.core.runner import Step, command_step, python_module
from contribkit.workflow.check import build_check_steps
from contribkit.workflow.coverage import build_coverage_steps


def is_ci(config: WorkflowConfig) -> bool:
    """True when running under CI (config.test.ci_env_var is set and non-empty)."""
    return bool(os.environ.get(config.test.ci_env_var))


def build_test_steps(
    config: WorkflowConfig,
    pytest_args: Sequence[str] = (),
    run_check: bool = True,
) -> list[Step]:
    """Steps for scripts/test, in execution order."""
    ci = is_ci(config)
    steps: list[Step] = []

    if run_check and config.test.run_check_first and not ci:
        steps += build_check_steps(config)

    steps.append(
        command_step(
            "pytest",
            python_module("coverage", "run", "-m", "pytest", *pytest_args, venv=config.install.venv),
        )
    )

    if not ci:
        steps += build_coverage_steps(config)

    return steps
