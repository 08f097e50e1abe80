# contribkit/config/schema.py
"""Configuration schema for the contributor workflow."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ProjectConfig(_Section):
    """Identity of the project the workflow runs against."""

    name: str = Field(default="contribkit", description="Distribution name")
    package: str = Field(default="contribkit", description="Import package name")
    version_file: str = Field(
        default="contribkit/__init__.py",
        description="File whose first semantic version is the package version",
    )
    changelog: str = Field(
        default="docs/release-notes.md",
        description="Changelog whose first semantic version must match version_file",
    )


class InstallConfig(_Section):
    """Settings for `scripts/install`."""

    venv: str = Field(default="venv", description="Virtualenv directory")
    interpreter: str = Field(default="python3", description="Interpreter used to create the venv")
    requirements: str = Field(
        default="requirements.txt",
        description="Requirements file; if missing, the project is installed editable",
    )
    extras: list[str] = Field(default_factory=lambda: ["dev"])


class LintConfig(_Section):
    paths: list[str] = Field(default_factory=lambda: ["contribkit", "tests"])
    isort: bool = Field(default=True, description="Run isort before ruff")


class TypecheckConfig(_Section):
    paths: list[str] = Field(default_factory=lambda: ["contribkit", "tests"])


class PytestConfig(_Section):
    """Settings for `scripts/test` and `scripts/coverage`."""

    coverage_threshold: float = Field(
        default=98.35,
        ge=0,
        le=100,
        description="Minimum total coverage percentage (coverage --fail-under)",
    )
    ci_env_var: str = Field(
        default="GITHUB_ACTIONS",
        description="When set, test skips check/coverage and install skips the venv",
    )
    run_check_first: bool = Field(default=True)


class CliUsageConfig(_Section):
    """Where the CLI --help output is embedded in the docs."""

    command: list[str] = Field(default_factory=lambda: ["contrib", "--help"])
    targets: list[str] = Field(default_factory=lambda: ["docs/index.md"])
    marker: str = Field(default="<!-- :cli_usage: -->")
    width: int = Field(default=80, ge=40, le=240)

    @field_validator("command")
    @classmethod
    def _command_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("cli_usage.command must not be empty")
        return v


class DocsConfig(_Section):
    config_file: str = Field(default="mkdocs.yml")
    site_dir: str = Field(default="site")
    cli_usage: CliUsageConfig = Field(default_factory=CliUsageConfig)


class BuildConfig(_Section):
    dist_dir: str = Field(default="dist")
    build_docs: bool = Field(default=True)


class PublishConfig(_Section):
    deploy_docs: bool = Field(default=True, description="Run mkdocs gh-deploy after upload")
    repository: str | None = Field(default=None, description="twine --repository name")


class ContributingConfig(_Section):
    """Documents checked by `contrib verify-docs`."""

    documents: list[str] = Field(
        default_factory=lambda: ["CONTRIBUTING.md", "docs/contributing.md"]
    )
    scripts_dir: str = Field(default="scripts")


class WorkflowConfig(_Section):
    """
    Complete contributor workflow configuration.

    Every field has a default (mirrored in defaults.yaml), so an empty or
    missing contribkit.yaml yields a usable config.
    """

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    install: InstallConfig = Field(default_factory=InstallConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    typecheck: TypecheckConfig = Field(default_factory=TypecheckConfig)
    test: PytestConfig = Field(default_factory=PytestConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    publish: PublishConfig = Field(default_factory=PublishConfig)
    contributing: ContributingConfig = Field(default_factory=ContributingConfig)
