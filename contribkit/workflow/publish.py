# contribkit/workflow/publish.py
"""
`scripts/publish` - maintainer-only release.

Preconditions (all must hold before anything is uploaded):
- the version check passes
- the dist directory holds artifacts built for the current version
- if a release tag is given, it names the current version ("v" prefix allowed)

Then: twine upload <artifacts>, mkdocs gh-deploy --force.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from contribkit.config.schema import WorkflowConfig
from contribkit.core.paths import ProjectPaths
from contribkit.core.runner import Step, command_step, python_module
from contribkit.logging.logger import get_logger
from contribkit.workflow.build import list_artifacts
from contribkit.workflow.version import check_version, current_version

logger = get_logger(__name__)


@dataclass
class PublishPlan:
    """What a publish run would do, and why it can't (if it can't)."""

    version: Optional[str]
    artifacts: list[Path] = field(default_factory=list)
    problems: list[str] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)

    @property
    def ready(self) -> bool:
        return not self.problems


def artifact_version(artifact: Path) -> Optional[str]:
    """
    The version field of a distribution file name, or None if it isn't one.

        demo-1.2.3-py3-none-any.whl  -> 1.2.3
        demo-1.2.3.tar.gz            -> 1.2.3
    """
    name = artifact.name
    if name.endswith(".whl"):
        # name-version(-build)?-python-abi-platform
        parts = name[: -len(".whl")].split("-")
        return parts[1] if len(parts) in (5, 6) else None
    if name.endswith(".tar.gz"):
        project, sep, version = name[: -len(".tar.gz")].rpartition("-")
        return version if sep and project else None
    return None


def artifact_matches(artifact: Path, version: str) -> bool:
    """
    True if an artifact was built for exactly `version`.

    Build backends drop the "-" of a semver pre-release (1.0.0-rc1 -> 1.0.0rc1),
    so both spellings are accepted.
    """
    return artifact_version(artifact) in {version, version.replace("-", "")}


def normalize_tag(tag: str) -> str:
    """refs/tags/v1.2.3 -> 1.2.3"""
    tag = tag.rsplit("/", 1)[-1]
    return tag[1:] if tag.startswith("v") else tag


def prepare_publish(config: WorkflowConfig, tag: Optional[str] = None) -> PublishPlan:
    """Validate preconditions and build the upload/deploy steps."""
    plan = PublishPlan(version=current_version(config))

    ok, message = check_version(config)
    if not ok:
        plan.problems.append(message)

    if tag is not None and plan.version is not None and normalize_tag(tag) != plan.version:
        plan.problems.append(f"Tag {tag!r} does not match package version {plan.version}")

    dist_dir = ProjectPaths.dist_dir(config.build.dist_dir)
    artifacts = list_artifacts(dist_dir)
    if plan.version is not None:
        stale = [a for a in artifacts if not artifact_matches(a, plan.version)]
        for artifact in stale:
            plan.problems.append(f"{artifact.name} was not built for version {plan.version}")
        artifacts = [a for a in artifacts if a not in stale]

    if not artifacts and not any("was not built" in p for p in plan.problems):
        plan.problems.append(f"No artifacts in {dist_dir} - run `scripts/build` first")

    plan.artifacts = artifacts

    venv = config.install.venv
    upload_args = ["upload"]
    if config.publish.repository:
        upload_args += ["--repository", config.publish.repository]
    upload_args += [str(a) for a in artifacts]

    plan.steps.append(command_step("Twine Upload", python_module("twine", *upload_args, venv=venv)))
    if config.publish.deploy_docs:
        plan.steps.append(
            command_step(
                "MkDocs Deploy",
                python_module(
                    "mkdocs", "gh-deploy", "--force", "--config-file", config.docs.config_file, venv=venv
                ),
            )
        )

    logger.debug(f"Publish plan: version={plan.version} artifacts={len(artifacts)} problems={plan.problems}")
    return plan
