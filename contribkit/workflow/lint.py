# contribkit/workflow/lint.py
"""
`scripts/lint` - apply formatting and safe lint fixes, then regenerate
the CLI usage docs.

Unlike check, every step runs even if an earlier one fails, so a single
invocation fixes as much as it can.
"""

from __future__ import annotations

from contribkit.config.schema import WorkflowConfig
from contribkit.core.runner import Step, check_step, command_step, python_module
from contribkit.workflow.cli_usage import generate_cli_usage


def build_lint_steps(config: WorkflowConfig) -> list[Step]:
    """Steps for scripts/lint, in execution order."""
    venv = config.install.venv
    paths = config.lint.paths

    steps: list[Step] = []
    if config.lint.isort:
        steps.append(command_step("isort", python_module("isort", *paths, venv=venv)))

    steps += [
        command_step("Ruff Format", python_module("ruff", "format", *paths, venv=venv)),
        command_step("Ruff Fix", python_module("ruff", "check", "--fix", *paths, venv=venv)),
        check_step("CLI Usage", lambda: generate_cli_usage(config.docs.cli_usage)),
    ]
    return steps
