# tests/test_paths.py
"""
Tests for ProjectPaths root discovery and overrides.
"""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from contribkit.core.paths import ProjectPaths

pytestmark = pytest.mark.tier2


class TestRootDiscovery:
    def test_finds_pyproject_in_parent(self, tmp_path, monkeypatch):
        (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert ProjectPaths.root() == tmp_path.resolve()

    def test_finds_git_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".git").mkdir()
        nested = tmp_path / "src"
        nested.mkdir()
        monkeypatch.chdir(nested)

        assert ProjectPaths.root() == tmp_path.resolve()

    def test_override_wins(self, tmp_path, monkeypatch):
        other = tmp_path / "other"
        other.mkdir()
        (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        ProjectPaths.set_root(other)
        assert ProjectPaths.root() == other.resolve()

        ProjectPaths.set_root(None)
        assert ProjectPaths.root() == tmp_path.resolve()


class TestResolve:
    def test_relative_paths_are_under_root(self, project):
        assert ProjectPaths.resolve("docs/index.md") == project / "docs" / "index.md"
        assert ProjectPaths.scripts_dir() == project / "scripts"
        assert ProjectPaths.dist_dir("build/dist") == project / "build" / "dist"

    def test_absolute_paths_are_kept(self, project, tmp_path):
        absolute = tmp_path / "elsewhere"
        assert ProjectPaths.resolve(absolute) == absolute

    def test_config_defaults_to_root(self, project):
        assert ProjectPaths.config() == project / "contribkit.yaml"
        assert ProjectPaths.config_override() is None

    def test_config_override(self, project):
        ProjectPaths.set_config(project / "custom.yaml")
        assert ProjectPaths.config() == project / "custom.yaml"

    def test_reset_clears_overrides(self, project):
        ProjectPaths.set_config(project / "custom.yaml")
        ProjectPaths.reset()
        assert ProjectPaths.config_override() is None


class TestInterpreter:
    def test_posix_venv_layout(self, project):
        with patch("contribkit.core.paths.sys.platform", "linux"):
            assert ProjectPaths.venv_python() == project / "venv" / "bin" / "python"

    def test_windows_venv_layout(self, project):
        with patch("contribkit.core.paths.sys.platform", "win32"):
            assert ProjectPaths.venv_python() == project / "venv" / "Scripts" / "python.exe"

    def test_falls_back_to_running_interpreter(self, project):
        assert ProjectPaths.python() == sys.executable
