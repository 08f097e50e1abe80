# contribkit/cli/commands/build.py
"""
Build distributable packages (and the docs site).

Usage:
    contrib build
"""

from __future__ import annotations

from contribkit.cli.ui import ui
from contribkit.cli.utils import execute, load_config
from contribkit.core.paths import ProjectPaths
from contribkit.workflow.build import build_build_steps, list_artifacts


def command() -> None:
    config = load_config()
    dist_dir = ProjectPaths.dist_dir(config.build.dist_dir)

    execute("contrib build", build_build_steps(config), subtitle=f"output: {dist_dir}")

    ui.section("Artifacts")
    for artifact in list_artifacts(dist_dir):
        ui.info(f"  {artifact.name}")
