# contribkit/workflow/build.py
"""
`scripts/build` - build sdist and wheel into the dist directory, validate
them with twine, then build the docs site.
"""

from __future__ import annotations

from pathlib import Path

from contribkit.config.schema import WorkflowConfig
from contribkit.core.paths import ProjectPaths
from contribkit.core.runner import Step, StepResult, command_step, python_module, run_command
from contribkit.workflow.docs import DocsMode, build_docs_steps

ARTIFACT_SUFFIXES = (".whl", ".tar.gz")


def list_artifacts(dist_dir: Path) -> list[Path]:
    """Wheels and sdists in `dist_dir`, sorted by name."""
    if not dist_dir.is_dir():
        return []
    return sorted(
        p for p in dist_dir.iterdir() if p.is_file() and p.name.endswith(ARTIFACT_SUFFIXES)
    )


def _twine_check_step(config: WorkflowConfig, dist_dir: Path) -> Step:
    # Artifacts only exist once the build step has run, so resolve them lazily.
    def _run() -> StepResult:
        artifacts = list_artifacts(dist_dir)
        if not artifacts:
            return StepResult(
                name="Twine Check",
                success=False,
                returncode=1,
                message=f"No artifacts found in {dist_dir}",
            )
        cmd = python_module(
            "twine", "check", *(str(a) for a in artifacts), venv=config.install.venv
        )
        return run_command("Twine Check", cmd)

    return Step(name="Twine Check", run=_run)


def build_build_steps(config: WorkflowConfig) -> list[Step]:
    """Steps for scripts/build, in execution order."""
    dist_dir = ProjectPaths.dist_dir(config.build.dist_dir)

    steps = [
        command_step(
            "Build",
            python_module("build", "--outdir", str(dist_dir), venv=config.install.venv),
        ),
        _twine_check_step(config, dist_dir),
    ]

    if config.build.build_docs:
        steps += build_docs_steps(config, DocsMode.BUILD)

    return steps
