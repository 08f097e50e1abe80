# contribkit/cli/cli.py
"""
contrib CLI - Main application.

Commands:
    contrib install        Provision the development environment
    contrib check          Version, formatting, types, lint, CLI docs (read-only)
    contrib lint           Auto-format and fix, regenerate CLI docs
    contrib test           Run the test suite under coverage
    contrib coverage       Coverage report with threshold
    contrib docs           Serve or build the documentation
    contrib build          Build sdist/wheel and the docs site
    contrib publish        Upload a release (maintainers)
    contrib sync-version   Changelog/package version consistency
    contrib cli-usage      Regenerate the CLI usage docs
    contrib verify-docs    Check the contributing guides
    contrib config         Show the resolved configuration

NOTE: Commands use lazy loading - implementation modules are only imported
when a command is invoked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from contribkit.core.paths import ProjectPaths
from contribkit.logging.logger import configure_logging
from contribkit.workflow.docs import DocsMode

app = typer.Typer(
    name="contrib",
    help="Contributor workflow: install, check, lint, test, docs, build, publish.",
    no_args_is_help=True,
    add_completion=False,
    # Plain Click help; docs/index.md embeds it verbatim
    rich_markup_mode=None,
)


@app.callback()
def main(
    root: Optional[Path] = typer.Option(
        None, "--root", metavar="PATH", help="Project root (default: nearest pyproject.toml or .git)."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", metavar="FILE", help="Config file (default: <root>/contribkit.yaml)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", show_default=False, help="Show debug logging."),
) -> None:
    """Contributor workflow: install, check, lint, test, docs, build, publish."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    if root is not None:
        ProjectPaths.set_root(root)
    if config is not None:
        ProjectPaths.set_config(config)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("install")
def install(
    python: Optional[str] = typer.Option(
        None, "--python", "-p", help="Interpreter used to create the environment."
    ),
    recreate: bool = typer.Option(False, "--recreate", help="Remove and rebuild the venv."),
) -> None:
    """Provision an isolated environment and install the project."""
    from contribkit.cli.commands import install as mod

    mod.command(python=python, recreate=recreate)


@app.command("check")
def check() -> None:
    """Run version, format, type, lint and CLI usage checks."""
    from contribkit.cli.commands import check as mod

    mod.command()


@app.command("lint")
def lint() -> None:
    """Auto-format, fix lint issues and regenerate CLI usage docs."""
    from contribkit.cli.commands import lint as mod

    mod.command()


@app.command(
    "test",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def test(
    ctx: typer.Context,
    no_check: bool = typer.Option(False, "--no-check", help="Skip `contrib check` first."),
) -> None:
    """Run the test suite under coverage. Extra arguments go to pytest."""
    from contribkit.cli.commands import test as mod

    mod.command(pytest_args=ctx.args, no_check=no_check)


@app.command("coverage")
def coverage(
    fail_under: Optional[float] = typer.Option(
        None, "--fail-under", help="Override the configured coverage threshold."
    ),
) -> None:
    """Report coverage and enforce the minimum threshold."""
    from contribkit.cli.commands import coverage as mod

    mod.command(fail_under=fail_under)


@app.command("docs")
def docs(
    mode: DocsMode = typer.Argument(..., help="serve or build."),
    dev_addr: Optional[str] = typer.Option(None, "--dev-addr", "-a", help="serve: IP:PORT."),
    strict: bool = typer.Option(False, "--strict", help="build: fail on warnings."),
) -> None:
    """Serve the documentation locally or build the static site."""
    from contribkit.cli.commands import docs as mod

    mod.command(mode=mode, dev_addr=dev_addr, strict=strict)


@app.command("build")
def build() -> None:
    """Build distributable packages into the dist directory."""
    from contribkit.cli.commands import build as mod

    mod.command()


@app.command("publish")
def publish(
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Release tag to verify."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the plan only."),
) -> None:
    """Upload release artifacts and deploy docs (maintainers only)."""
    from contribkit.cli.commands import publish as mod

    mod.command(tag=tag, yes=yes, dry_run=dry_run)


@app.command("sync-version")
def sync_version() -> None:
    """Check that the changelog and package versions match."""
    from contribkit.cli.commands import version as mod

    mod.command()


@app.command("cli-usage")
def cli_usage(
    check_only: bool = typer.Option(False, "--check", help="Fail if stale, don't write."),
) -> None:
    """Regenerate the CLI usage block in the docs."""
    from contribkit.cli.commands import cli_usage as mod

    mod.command(check=check_only)


@app.command("verify-docs")
def verify_docs(
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors."),
) -> None:
    """Check the contributing guides against scripts and config."""
    from contribkit.cli.commands import verify_docs as mod

    mod.command(strict=strict)


@app.command("config")
def config(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Show the resolved workflow configuration."""
    from contribkit.cli.commands import config as mod

    mod.command(as_json=as_json)


if __name__ == "__main__":
    app()
