# contribkit/integrity/checks.py
"""
Documentation integrity checks for contributing guides.

Two guides (CONTRIBUTING.md and docs/contributing.md) describe the same
workflow, so they must agree with each other and with the repository:

- check_consistency               same script names, same coverage threshold
- check_scripts_exist             every referenced script exists in scripts/
- check_threshold_matches_config  documented threshold == configured threshold
- check_structure                 "Project Structure" entries exist on disk

verify_documents() runs all of them against the workflow config.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from contribkit.config.schema import WorkflowConfig
from contribkit.core.exceptions import DocumentError
from contribkit.core.paths import ProjectPaths
from contribkit.integrity.parser import ContributingDoc, parse_document
from contribkit.logging.logger import get_logger
from contribkit.workflow.coverage import format_threshold

logger = get_logger(__name__)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Finding:
    """A single integrity problem, located in a file."""

    path: Path
    message: str
    line: Optional[int] = None
    severity: Severity = Severity.ERROR

    def location(self, root: Optional[Path] = None) -> str:
        path = self.path
        if root is not None:
            try:
                path = path.relative_to(root)
            except ValueError:
                pass
        return f"{path}:{self.line}" if self.line else str(path)


@dataclass
class VerifyReport:
    documents: list[ContributingDoc] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors


def _display(path: Path) -> str:
    try:
        return str(path.relative_to(ProjectPaths.root()))
    except ValueError:
        return str(path)


def _names(docs: Sequence[ContributingDoc]) -> str:
    return ", ".join(_display(doc.path) for doc in docs)


# =============================================================================
# Checks
# =============================================================================


def check_consistency(docs: Sequence[ContributingDoc]) -> list[Finding]:
    """Every document mentions the same scripts and the same coverage threshold(s)."""
    findings: list[Finding] = []
    if len(docs) < 2:
        return findings

    all_names = set().union(*(doc.script_names for doc in docs))
    for doc in docs:
        for name in sorted(all_names - doc.script_names):
            others = [d for d in docs if name in d.script_names]
            findings.append(
                Finding(
                    path=doc.path,
                    message=f"does not mention scripts/{name} (mentioned in {_names(others)})",
                )
            )

    stated = [doc for doc in docs if doc.coverage_thresholds]
    if not stated:
        return findings

    reference = stated[0]
    for doc in docs:
        if doc is reference:
            continue
        if not doc.coverage_thresholds:
            values = ", ".join(f"{format_threshold(v)}%" for v in sorted(reference.threshold_values))
            findings.append(
                Finding(
                    path=doc.path,
                    message=f"states no coverage threshold ({_display(reference.path)} states {values})",
                )
            )
        elif doc.threshold_values != reference.threshold_values:
            first = doc.coverage_thresholds[0]
            ours = ", ".join(f"{format_threshold(v)}%" for v in sorted(doc.threshold_values))
            theirs = ", ".join(f"{format_threshold(v)}%" for v in sorted(reference.threshold_values))
            findings.append(
                Finding(
                    path=doc.path,
                    line=first.line,
                    message=f"coverage threshold {ours} differs from {_display(reference.path)} ({theirs})",
                )
            )

    return findings


def check_scripts_exist(docs: Sequence[ContributingDoc], scripts_dir: Path) -> list[Finding]:
    """Every referenced script is a file in scripts_dir; non-executable scripts are warned once."""
    findings: list[Finding] = []
    warned: set[str] = set()

    for doc in docs:
        for name in sorted(doc.script_names):
            ref = doc.first_reference(name)
            script = scripts_dir / name
            if not script.is_file():
                findings.append(
                    Finding(
                        path=doc.path,
                        line=ref.line if ref else None,
                        message=f"references scripts/{name}, which does not exist in {scripts_dir.name}/",
                    )
                )
            elif name not in warned and not os.access(script, os.X_OK):
                warned.add(name)
                findings.append(
                    Finding(
                        path=script,
                        message="is not executable (chmod +x)",
                        severity=Severity.WARNING,
                    )
                )

    return findings


def check_threshold_matches_config(docs: Sequence[ContributingDoc], threshold: float) -> list[Finding]:
    """Documented thresholds equal the configured coverage threshold."""
    findings: list[Finding] = []

    for doc in docs:
        for mention in doc.coverage_thresholds:
            if mention.value != threshold:
                findings.append(
                    Finding(
                        path=doc.path,
                        line=mention.line,
                        message=(
                            f"documents a {format_threshold(mention.value)}% coverage threshold, "
                            f"configured threshold is {format_threshold(threshold)}%"
                        ),
                    )
                )

    return findings


def check_structure(docs: Sequence[ContributingDoc], root: Path) -> list[Finding]:
    """Entries of the Project Structure tree exist in the repository."""
    findings: list[Finding] = []

    for doc in docs:
        for entry in doc.structure_entries:
            if not (root / entry.name).exists():
                findings.append(
                    Finding(
                        path=doc.path,
                        line=entry.line,
                        message=f"project structure lists {entry.name!r}, which does not exist",
                        severity=Severity.WARNING,
                    )
                )

    return findings


# =============================================================================
# Entry Point
# =============================================================================


def verify_documents(config: WorkflowConfig) -> VerifyReport:
    """Parse the configured guides and run every integrity check."""
    report = VerifyReport()
    root = ProjectPaths.root()

    for name in config.contributing.documents:
        path = ProjectPaths.resolve(name)
        if not path.exists():
            report.findings.append(Finding(path=path, message="contributing document not found"))
            continue
        try:
            report.documents.append(parse_document(path))
        except DocumentError as e:
            report.findings.append(Finding(path=path, message=str(e)))

    docs = report.documents
    scripts_dir = ProjectPaths.scripts_dir(config.contributing.scripts_dir)

    report.findings += check_consistency(docs)
    report.findings += check_scripts_exist(docs, scripts_dir)
    report.findings += check_threshold_matches_config(docs, config.test.coverage_threshold)
    report.findings += check_structure(docs, root)

    logger.debug(
        f"Verified {len(docs)} document(s): {len(report.errors)} error(s), "
        f"{len(report.warnings)} warning(s)"
    )
    return report
