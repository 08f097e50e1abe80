# contribkit/core/__init__.py
"""
Core building blocks shared by every workflow: project paths,
the subprocess step runner, and the exception hierarchy.
"""

from contribkit.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ContribError,
    DocumentError,
)
from contribkit.core.paths import ProjectPaths
from contribkit.core.runner import Step, StepResult, run_command, run_steps

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ContribError",
    "DocumentError",
    "ProjectPaths",
    "Step",
    "StepResult",
    "run_command",
    "run_steps",
]
