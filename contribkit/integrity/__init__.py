# contribkit/integrity/__init__.py
"""
Contributing-guide integrity: parse the guides, then check that they agree
with each other, with scripts/, with the configured coverage threshold and
with the repository layout.

Usage:
    from contribkit.integrity import verify_documents

    report = verify_documents(config)
    if not report.ok:
        ...
"""

from contribkit.integrity.checks import (
    Finding,
    Severity,
    VerifyReport,
    check_consistency,
    check_scripts_exist,
    check_structure,
    check_threshold_matches_config,
    verify_documents,
)
from contribkit.integrity.parser import ContributingDoc, ScriptReference, parse_document

__all__ = [
    "ContributingDoc",
    "Finding",
    "ScriptReference",
    "Severity",
    "VerifyReport",
    "check_consistency",
    "check_scripts_exist",
    "check_structure",
    "check_threshold_matches_config",
    "parse_document",
    "verify_documents",
]
