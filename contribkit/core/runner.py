# contribkit/core/runner.py
"""
Sequential step runner.

Every workflow (check, lint, test, build, ...) is a list of Steps. A step is
either an external command run through subprocess, or an in-process check.
Both produce a StepResult; tool failures never raise.

Usage:
    from contribkit.core.runner import command_step, run_steps

    steps = [
        command_step("Ruff Format", python_module("ruff", "format", "--check", ".")),
        command_step("Mypy", python_module("mypy", "contribkit")),
    ]
    results = run_steps(steps, fail_fast=True)
"""

from __future__ import annotations

import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Mapping, Optional, Sequence

from contribkit.core.exceptions import ContribError
from contribkit.core.paths import ProjectPaths
from contribkit.logging.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class StepResult:
    """Result of a single step."""

    name: str
    success: bool
    returncode: int
    duration: float = 0.0
    skipped: bool = False
    message: str = ""
    output: str = ""


@dataclass
class Step:
    """A named unit of work."""

    name: str
    run: Callable[[], StepResult]
    cmd: Optional[list[str]] = None

    def describe(self) -> str:
        """Shell-like rendering of the step, for dry runs and headers."""
        if self.cmd:
            return " ".join(self.cmd)
        return f"<{self.name}>"


# =============================================================================
# Commands
# =============================================================================


def python_module(module: str, *args: str, venv: str | Path = "venv") -> list[str]:
    """Build `<env python> -m <module> args...` for the project interpreter."""
    return [ProjectPaths.python(venv), "-m", module, *args]


def run_command(
    name: str,
    cmd: Sequence[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    capture: bool = False,
) -> StepResult:
    """
    Run a command and return the result.

    Output streams straight to the terminal unless capture=True.
    `env` entries are added on top of the current environment.
    """
    cmd = list(cmd)
    cwd = cwd or ProjectPaths.root()
    full_env = {**os.environ, **env} if env else None

    logger.debug(f"[{name}] $ {' '.join(cmd)} (cwd={cwd})")

    start = time.time()
    try:
        if capture:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                env=full_env,
                capture_output=True,
                text=True,
            )
            output = (result.stdout or "") + (result.stderr or "")
        else:
            result = subprocess.run(cmd, cwd=cwd, env=full_env)
            output = ""
    except FileNotFoundError:
        duration = time.time() - start
        logger.debug(f"[{name}] executable not found: {cmd[0]}")
        return StepResult(
            name=name,
            success=False,
            returncode=-1,
            duration=duration,
            message=f"Command not found: {cmd[0]}",
        )

    duration = time.time() - start
    success = result.returncode == 0
    logger.debug(f"[{name}] exit {result.returncode} ({duration:.1f}s)")

    return StepResult(
        name=name,
        success=success,
        returncode=result.returncode,
        duration=duration,
        message="" if success else f"exit code {result.returncode}",
        output=output,
    )


def command_step(
    name: str,
    cmd: Sequence[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Step:
    """Wrap an external command as a Step."""
    cmd = list(cmd)
    return Step(name=name, run=lambda: run_command(name, cmd, cwd=cwd, env=env), cmd=cmd)


def check_step(name: str, func: Callable[[], tuple[bool, str]]) -> Step:
    """
    Wrap an in-process check as a Step.

    `func` returns (ok, message). A ContribError raised by `func` (an
    unreadable version file, a broken docs marker, ...) fails the step.
    """

    def _run() -> StepResult:
        start = time.time()
        try:
            ok, message = func()
        except ContribError as e:
            logger.debug(f"[{name}] {e}")
            ok, message = False, str(e)
        return StepResult(
            name=name,
            success=ok,
            returncode=0 if ok else 1,
            duration=time.time() - start,
            message=message,
        )

    return Step(name=name, run=_run)


# =============================================================================
# Sequencing
# =============================================================================


def run_steps(
    steps: Iterable[Step],
    fail_fast: bool = True,
    on_start: Optional[Callable[[Step], None]] = None,
    on_result: Optional[Callable[[StepResult], None]] = None,
) -> list[StepResult]:
    """
    Run steps in order.

    With fail_fast, the first failure stops the run; the steps that did not
    run are reported as skipped so the summary still lists them.
    """
    results: list[StepResult] = []
    failed = False

    for step in steps:
        if failed and fail_fast:
            result = StepResult(
                name=step.name,
                success=False,
                returncode=0,
                skipped=True,
                message="skipped after earlier failure",
            )
        else:
            if on_start:
                on_start(step)
            result = step.run()
            if not result.success:
                failed = True

        results.append(result)
        if on_result:
            on_result(result)

    return results


def all_passed(results: Iterable[StepResult]) -> bool:
    """True when every step ran and passed. Skipped steps count as not passed."""
    return all(r.success for r in results)


def exit_code(results: Iterable[StepResult]) -> int:
    """0 if every step passed, 1 otherwise."""
    return 0 if all_passed(results) else 1
