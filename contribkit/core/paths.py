# contribkit/core/paths.py
"""
Central path management for contribkit.

All workflow paths are resolved against the project root. The root is
discovered by walking up from the current directory, and can be overridden
for tests or with `contrib --root`.

Usage:
    from contribkit.core.paths import ProjectPaths

    root = ProjectPaths.root()
    python = ProjectPaths.python()

    # Override for testing
    ProjectPaths.set_root(tmp_path)
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

ROOT_MARKERS = ("pyproject.toml", ".git")
CONFIG_FILENAME = "contribkit.yaml"


class ProjectPaths:
    """
    Central path management for contribkit.

    Relative paths from the workflow config (venv, dist, scripts, ...) are
    always interpreted relative to root().
    """

    _root_override: Optional[Path] = None
    _config_override: Optional[Path] = None

    @classmethod
    def set_root(cls, path: Optional[str | Path]) -> None:
        """
        Override the project root.

        Pass None to go back to discovery from the current directory.
        """
        if path is None:
            cls._root_override = None
        else:
            cls._root_override = Path(path).resolve()

    @classmethod
    def set_config(cls, path: Optional[str | Path]) -> None:
        """Use an explicit config file instead of {root}/contribkit.yaml."""
        cls._config_override = Path(path).resolve() if path is not None else None

    @classmethod
    def config_override(cls) -> Optional[Path]:
        return cls._config_override

    @classmethod
    def reset(cls) -> None:
        """Reset root discovery and config overrides. Useful in tests."""
        cls._root_override = None
        cls._config_override = None

    # =========================================================================
    # Core Paths
    # =========================================================================

    @classmethod
    def root(cls) -> Path:
        """
        The project root.

        First directory, walking up from CWD, that contains pyproject.toml
        or .git. Falls back to CWD.
        """
        if cls._root_override is not None:
            return cls._root_override

        cwd = Path.cwd().resolve()
        for candidate in (cwd, *cwd.parents):
            if any((candidate / marker).exists() for marker in ROOT_MARKERS):
                return candidate
        return cwd

    @classmethod
    def resolve(cls, path: str | Path) -> Path:
        """Resolve a (possibly relative) configured path against the root."""
        p = Path(path)
        if p.is_absolute():
            return p
        return cls.root() / p

    @classmethod
    def config(cls) -> Path:
        """The user config file: {root}/contribkit.yaml unless overridden."""
        if cls._config_override is not None:
            return cls._config_override
        return cls.root() / CONFIG_FILENAME

    @classmethod
    def scripts_dir(cls, name: str = "scripts") -> Path:
        return cls.resolve(name)

    @classmethod
    def venv_dir(cls, name: str = "venv") -> Path:
        return cls.resolve(name)

    @classmethod
    def dist_dir(cls, name: str = "dist") -> Path:
        return cls.resolve(name)

    @classmethod
    def site_dir(cls, name: str = "site") -> Path:
        return cls.resolve(name)

    # =========================================================================
    # Interpreter
    # =========================================================================

    @classmethod
    def venv_python(cls, venv: str | Path = "venv") -> Path:
        """Interpreter path inside a virtualenv (POSIX or Windows layout)."""
        venv_dir = cls.resolve(venv)
        if sys.platform == "win32":
            return venv_dir / "Scripts" / "python.exe"
        return venv_dir / "bin" / "python"

    @classmethod
    def python(cls, venv: str | Path = "venv") -> str:
        """
        The interpreter tools should run under.

        The project virtualenv if it exists, otherwise the interpreter
        running contribkit.
        """
        candidate = cls.venv_python(venv)
        if candidate.exists():
            return str(candidate)
        return sys.executable
