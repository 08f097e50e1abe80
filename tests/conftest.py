# tests/conftest.py
"""
Root conftest - shared fixtures for contribkit tests.

Every test gets a clean ProjectPaths (no root/config override).
Tests that touch a project use the `project` fixture: a small flat-layout
repository in tmp_path with scripts/, two contributing guides, a changelog
and a docs page carrying the CLI usage block.

External tools are never run: `mock_run` patches subprocess.run.

Test Tiers:
- tier1: Pure logic, no I/O
- tier2: tmp_path I/O and/or mocked subprocess
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from contribkit.config.loader import load_workflow_config
from contribkit.config.schema import WorkflowConfig
from contribkit.core.paths import ProjectPaths
from helpers import CONFIG, CONTRIBUTING, HELP_OUTPUT, INDEX, SCRIPT_NAMES


@pytest.fixture(autouse=True)
def reset_paths():
    """Ensure no ProjectPaths override leaks between tests."""
    ProjectPaths.reset()
    yield
    ProjectPaths.reset()


@pytest.fixture(autouse=True)
def no_ci(monkeypatch):
    """Tests run in 'local' mode unless they opt into CI."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)


def write_script(scripts_dir: Path, name: str, executable: bool = True) -> Path:
    path = scripts_dir / name
    path.write_text("#!/bin/sh -e\nexec python -m contribkit \"$@\"\n", encoding="utf-8")
    path.chmod(0o755 if executable else 0o644)
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A complete sample project, set as the ProjectPaths root."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    (tmp_path / "contribkit.yaml").write_text(CONFIG, encoding="utf-8")

    package = tmp_path / "demo"
    package.mkdir()
    (package / "__init__.py").write_text('__version__ = "1.2.3"\n', encoding="utf-8")
    (tmp_path / "tests").mkdir()

    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "release-notes.md").write_text(
        "# Release Notes\n\n## 1.2.3 (May 1, 2026)\n\n- Fixed things.\n\n## 1.2.2\n",
        encoding="utf-8",
    )
    (docs / "index.md").write_text(INDEX, encoding="utf-8")
    (docs / "contributing.md").write_text(CONTRIBUTING, encoding="utf-8")
    (tmp_path / "CONTRIBUTING.md").write_text(CONTRIBUTING, encoding="utf-8")

    scripts = tmp_path / "scripts"
    scripts.mkdir()
    for name in SCRIPT_NAMES:
        write_script(scripts, name)

    ProjectPaths.set_root(tmp_path)
    return tmp_path


@pytest.fixture
def config(project: Path) -> WorkflowConfig:
    return load_workflow_config()


@pytest.fixture
def mock_run():
    """
    Patch subprocess.run everywhere (runner and cli_usage share the module).

    Every command succeeds; `--help` commands print HELP_OUTPUT.
    """

    def _run(cmd, *args, **kwargs):
        stdout = HELP_OUTPUT if "--help" in cmd else ""
        return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr="")

    with patch("contribkit.core.runner.subprocess.run", side_effect=_run) as mock:
        yield mock

