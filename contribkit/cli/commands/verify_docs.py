# contribkit/cli/commands/verify_docs.py
"""
Verify the contributing guides against each other and the repository.

Usage:
    contrib verify-docs            # errors fail, warnings are reported
    contrib verify-docs --strict   # warnings fail too
"""

from __future__ import annotations

import typer

from contribkit.cli.ui import ui
from contribkit.cli.utils import display_path, load_config
from contribkit.core.paths import ProjectPaths
from contribkit.integrity.checks import Severity, verify_documents


def command(strict: bool = False) -> None:
    config = load_config()
    root = ProjectPaths.root()
    report = verify_documents(config)

    ui.header("contrib verify-docs", ", ".join(config.contributing.documents))

    for doc in report.documents:
        scripts = ", ".join(sorted(doc.script_names)) or "none"
        ui.status(display_path(doc.path), True, f"scripts: {scripts}")

    if report.findings:
        ui.section("Findings")
    for finding in report.findings:
        msg = f"{finding.location(root)}: {finding.message}"
        if finding.severity == Severity.ERROR:
            ui.error(msg)
        else:
            ui.warning(msg)

    failed = bool(report.errors) or (strict and bool(report.warnings))
    if failed:
        ui.error(f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)")
        raise typer.Exit(1)

    ui.success(f"Contributing docs are consistent ({len(report.warnings)} warning(s))")
