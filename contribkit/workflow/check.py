# contribkit/workflow/check.py
"""
`scripts/check` - read-only verification, in order:

1. Version consistency (changelog vs package)
2. Formatting (isort --check-only, ruff format --check)
3. Static types (mypy)
4. Lint (ruff check)
5. CLI usage docs freshness

The first failure aborts the run with a non-zero exit.
"""

from __future__ import annotations

from contribkit.config.schema import WorkflowConfig
from contribkit.core.runner import Step, check_step, command_step, python_module
from contribkit.workflow.cli_usage import check_cli_usage
from contribkit.workflow.version import check_version


def build_check_steps(config: WorkflowConfig) -> list[Step]:
    """Steps for scripts/check, in execution order."""
    venv = config.install.venv
    lint_paths = config.lint.paths

    steps = [check_step("Version", lambda: check_version(config))]

    if config.lint.isort:
        steps.append(
            command_step(
                "isort",
                python_module("isort", "--check-only", "--diff", *lint_paths, venv=venv),
            )
        )

    steps += [
        command_step(
            "Ruff Format",
            python_module("ruff", "format", "--check", "--diff", *lint_paths, venv=venv),
        ),
        command_step("Mypy", python_module("mypy", *config.typecheck.paths, venv=venv)),
        command_step("Ruff Check", python_module("ruff", "check", *lint_paths, venv=venv)),
        check_step("CLI Usage", lambda: check_cli_usage(config.docs.cli_usage)),
    ]
    return steps
