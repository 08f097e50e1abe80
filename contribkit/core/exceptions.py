# contribkit/core/exceptions.py
"""
Exception hierarchy for contribkit.

External tool failures (ruff, mypy, pytest, ...) are NOT exceptions - they
are reported as failed StepResults. Exceptions are reserved for problems
with contribkit's own inputs: configuration and documents.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ContribError(Exception):
    """Base error for contribkit."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigError(ContribError):
    """Base error for configuration issues."""

    pass


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


class DocumentError(ContribError):
    """Raised when a documentation file can't be read or lacks required markers."""

    pass
