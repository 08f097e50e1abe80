# contribkit/cli/utils.py
"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import typer

from contribkit.cli.ui import ui
from contribkit.config.loader import load_workflow_config
from contribkit.config.schema import WorkflowConfig
from contribkit.core.exceptions import ContribError
from contribkit.core.paths import ProjectPaths
from contribkit.core.runner import Step, StepResult, all_passed, run_steps
from contribkit.logging.logger import get_logger

logger = get_logger(__name__)


def load_config() -> WorkflowConfig:
    """Load the workflow config, or exit 1 with a readable error."""
    try:
        return load_workflow_config()
    except ContribError as e:
        ui.error(str(e))
        raise typer.Exit(1) from e


def execute(
    title: str,
    steps: Sequence[Step],
    fail_fast: bool = True,
    subtitle: str = "",
) -> list[StepResult]:
    """
    Run steps with progress output and a summary table.

    Raises:
        typer.Exit(1): If any step failed
    """
    ui.header(title, subtitle)

    results = run_steps(steps, fail_fast=fail_fast, on_start=ui.command, on_result=ui.result)

    ui.summary(results)
    failed = [r for r in results if not r.success and not r.skipped]

    if all_passed(results):
        ui.success("All steps passed")
        return results

    ui.error(f"{len(failed)} step(s) failed: {', '.join(r.name for r in failed)}")
    raise typer.Exit(1)


def display_path(path: Path) -> str:
    """Path relative to the project root when possible."""
    root = ProjectPaths.root()
    return str(path.relative_to(root)) if path.is_relative_to(root) else str(path)
