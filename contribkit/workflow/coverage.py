# contribkit/workflow/coverage.py
"""
`scripts/coverage` - combine parallel coverage data and enforce the
minimum coverage threshold.
"""

from __future__ import annotations

from typing import Optional

from contribkit.config.schema import WorkflowConfig
from contribkit.core.paths import ProjectPaths
from contribkit.core.runner import Step, StepResult, command_step, python_module, run_command
from contribkit.logging.logger import get_logger

logger = get_logger(__name__)


def has_parallel_data() -> bool:
    """True if `coverage run --parallel-mode` left .coverage.* files behind."""
    return any(ProjectPaths.root().glob(".coverage.*"))


def format_threshold(value: float) -> str:
    """98.35 -> "98.35", 100.0 -> "100"."""
    return f"{value:g}"


def _combine_step(venv: str) -> Step:
    # Parallel data is written by the pytest step, so look for it when the step runs.
    cmd = python_module("coverage", "combine", venv=venv)

    def _run() -> StepResult:
        if not has_parallel_data():
            logger.debug("No parallel coverage data, skipping combine")
            return StepResult(
                name="Coverage Combine",
                success=True,
                returncode=0,
                message="no parallel coverage data",
            )
        return run_command("Coverage Combine", cmd)

    return Step(name="Coverage Combine", run=_run, cmd=cmd)


def build_coverage_steps(config: WorkflowConfig, fail_under: Optional[float] = None) -> list[Step]:
    """
    Steps for scripts/coverage.

    Args:
        fail_under: Override for config.test.coverage_threshold
    """
    venv = config.install.venv
    threshold = config.test.coverage_threshold if fail_under is None else fail_under

    return [
        _combine_step(venv),
        command_step(
            "Coverage Report",
            python_module(
                "coverage",
                "report",
                "--show-missing",
                "--skip-covered",
                f"--fail-under={format_threshold(threshold)}",
                venv=venv,
            ),
        ),
    ]
