# contribkit/cli/commands/publish.py
"""
Maintainer-only release: upload dist/ and deploy the docs.

Usage:
    contrib publish --dry-run
    contrib publish --tag v1.2.3 --yes
"""

from __future__ import annotations

from typing import Optional

import typer

from contribkit.cli.ui import ui
from contribkit.cli.utils import execute, load_config
from contribkit.core.exceptions import ContribError
from contribkit.workflow.publish import prepare_publish


def command(tag: Optional[str] = None, yes: bool = False, dry_run: bool = False) -> None:
    config = load_config()
    try:
        plan = prepare_publish(config, tag=tag)
    except ContribError as e:
        ui.error(str(e))
        raise typer.Exit(1) from e

    ui.header("contrib publish", f"{config.project.name} {plan.version or '(unknown version)'}")

    ui.section("Artifacts")
    for artifact in plan.artifacts:
        ui.info(f"  {artifact.name}")

    if not plan.ready:
        ui.section("Cannot publish")
        for problem in plan.problems:
            ui.error(problem)
        raise typer.Exit(1)

    ui.section("Plan")
    for step in plan.steps:
        ui.info(f"$ {step.describe()}")

    if dry_run:
        ui.success("Dry run - nothing was uploaded")
        return

    if not yes and not ui.prompt_confirm(f"Publish {config.project.name} {plan.version}?"):
        ui.warning("Aborted")
        raise typer.Exit(1)

    execute("Publishing", plan.steps, fail_fast=True)
