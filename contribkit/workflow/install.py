# contribkit/workflow/install.py
"""
`scripts/install [-p <interpreter>]` - provision the development environment.

Locally: create a virtualenv with the chosen interpreter, then install the
declared dependencies and the project itself (editable) into it.
In CI: skip the virtualenv and install into the interpreter directly.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from contribkit.config.schema import WorkflowConfig
from contribkit.core.paths import ProjectPaths
from contribkit.core.runner import Step, check_step, command_step
from contribkit.logging.logger import get_logger
from contribkit.workflow.test import is_ci

logger = get_logger(__name__)


def editable_target(extras: list[str]) -> str:
    """"-e" target for the project: "." or ".[dev,docs]"."""
    if not extras:
        return "."
    return f".[{','.join(extras)}]"


def _remove_venv(venv_dir: Path) -> tuple[bool, str]:
    if not venv_dir.exists():
        return True, f"No virtualenv at {venv_dir}"
    try:
        shutil.rmtree(venv_dir)
    except OSError as e:
        return False, f"Could not remove {venv_dir}: {e}"
    return True, f"Removed {venv_dir}"


def build_install_steps(
    config: WorkflowConfig,
    interpreter: Optional[str] = None,
    recreate: bool = False,
) -> list[Step]:
    """Steps for scripts/install, in execution order."""
    interpreter = interpreter or config.install.interpreter
    steps: list[Step] = []

    if is_ci(config):
        logger.debug("CI detected, installing without a virtualenv")
        python = interpreter
    else:
        venv_dir = ProjectPaths.venv_dir(config.install.venv)
        if recreate:
            steps.append(check_step("Remove venv", lambda: _remove_venv(venv_dir)))
        if recreate or not venv_dir.exists():
            steps.append(command_step("Create venv", [interpreter, "-m", "venv", str(venv_dir)]))
        python = str(ProjectPaths.venv_python(config.install.venv))

    steps.append(
        command_step("Upgrade pip", [python, "-m", "pip", "install", "--upgrade", "pip"])
    )

    requirements = ProjectPaths.resolve(config.install.requirements)
    if requirements.exists():
        steps.append(
            command_step("Install requirements", [python, "-m", "pip", "install", "-r", str(requirements)])
        )
    else:
        steps.append(
            command_step(
                "Install project",
                [python, "-m", "pip", "install", "-e", editable_target(config.install.extras)],
            )
        )

    return steps
