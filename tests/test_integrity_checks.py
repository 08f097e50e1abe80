# tests/test_integrity_checks.py
"""
Tests for the contributing-guide integrity checks.
"""

from __future__ import annotations

import pytest

from contribkit.integrity.checks import (
    Finding,
    Severity,
    check_consistency,
    check_scripts_exist,
    check_structure,
    check_threshold_matches_config,
    verify_documents,
)
from contribkit.integrity.parser import parse_document
from helpers import CONTRIBUTING

pytestmark = pytest.mark.tier2


def _doc(tmp_path, name: str, text: str):
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return parse_document(path)


class TestConsistency:
    def test_identical_documents_agree(self, tmp_path):
        docs = [_doc(tmp_path, "a.md", CONTRIBUTING), _doc(tmp_path, "b.md", CONTRIBUTING)]
        assert check_consistency(docs) == []

    def test_missing_script_reference(self, tmp_path):
        docs = [
            _doc(tmp_path, "a.md", "Run `./scripts/test` and `./scripts/lint`."),
            _doc(tmp_path, "b.md", "Run `./scripts/test`."),
        ]

        (finding,) = check_consistency(docs)

        assert finding.path == tmp_path / "b.md"
        assert "scripts/lint" in finding.message
        assert "a.md" in finding.message

    def test_differing_threshold(self, tmp_path):
        docs = [
            _doc(tmp_path, "a.md", "Coverage must stay above 98.35%."),
            _doc(tmp_path, "b.md", "intro\nCoverage must stay above 95%."),
        ]

        (finding,) = check_consistency(docs)

        assert finding.line == 2
        assert "95%" in finding.message
        assert "98.35%" in finding.message

    def test_threshold_missing_from_one_document(self, tmp_path):
        docs = [
            _doc(tmp_path, "a.md", "Coverage must stay above 98.35%."),
            _doc(tmp_path, "b.md", "No numbers here."),
        ]

        (finding,) = check_consistency(docs)

        assert "states no coverage threshold" in finding.message

    def test_single_document_is_trivially_consistent(self, tmp_path):
        assert check_consistency([_doc(tmp_path, "a.md", "Run `./scripts/test`.")]) == []


class TestScriptsExist:
    def test_missing_script_is_an_error(self, tmp_path):
        scripts = tmp_path / "scripts"
        scripts.mkdir()
        doc = _doc(tmp_path, "a.md", "first line\nRun `./scripts/tset`.")

        (finding,) = check_scripts_exist([doc], scripts)

        assert finding.severity == Severity.ERROR
        assert finding.line == 2
        assert "scripts/tset" in finding.message

    def test_non_executable_script_warns_once(self, tmp_path):
        scripts = tmp_path / "scripts"
        scripts.mkdir()
        script = scripts / "test"
        script.write_text("#!/bin/sh\n", encoding="utf-8")
        script.chmod(0o644)
        docs = [_doc(tmp_path, "a.md", "`./scripts/test`"), _doc(tmp_path, "b.md", "`./scripts/test`")]

        (finding,) = check_scripts_exist(docs, scripts)

        assert finding.severity == Severity.WARNING
        assert finding.path == script
        assert "chmod +x" in finding.message


class TestThresholdMatchesConfig:
    def test_match(self, tmp_path):
        doc = _doc(tmp_path, "a.md", "Coverage must stay above 98.35%.")
        assert check_threshold_matches_config([doc], 98.35) == []

    def test_mismatch(self, tmp_path):
        doc = _doc(tmp_path, "a.md", "Coverage must stay above 98.35%.")

        (finding,) = check_threshold_matches_config([doc], 100.0)

        assert finding.message == "documents a 98.35% coverage threshold, configured threshold is 100%"


class TestStructure:
    def test_missing_entry_is_a_warning(self, tmp_path):
        (tmp_path / "demo").mkdir()
        (tmp_path / "tests").mkdir()
        doc = _doc(tmp_path, "a.md", CONTRIBUTING)

        (finding,) = check_structure([doc], tmp_path)

        assert finding.severity == Severity.WARNING
        assert "'scripts'" in finding.message


class TestFinding:
    def test_location_relative_to_root(self, tmp_path):
        finding = Finding(path=tmp_path / "docs" / "contributing.md", message="x", line=12)
        assert finding.location(tmp_path) == "docs/contributing.md:12"

    def test_location_outside_root(self, tmp_path):
        finding = Finding(path=tmp_path / "a.md", message="x")
        assert finding.location(tmp_path / "elsewhere") == str(tmp_path / "a.md")


class TestVerifyDocuments:
    def test_sample_project_is_consistent(self, config):
        report = verify_documents(config)

        assert report.ok
        assert report.findings == []
        assert len(report.documents) == 2

    def test_missing_document(self, project, config):
        (project / "docs" / "contributing.md").unlink()

        report = verify_documents(config)

        assert not report.ok
        assert report.errors[0].message == "contributing document not found"

    def test_drifted_guides_are_reported(self, project, config):
        drifted = CONTRIBUTING.replace("98.35%", "97%").replace("`./scripts/docs serve`", "mkdocs serve")
        (project / "docs" / "contributing.md").write_text(drifted, encoding="utf-8")

        report = verify_documents(config)

        messages = [f.message for f in report.errors]
        assert any("does not mention scripts/docs" in m for m in messages)
        assert any("differs from" in m for m in messages)
        assert any("configured threshold is 98.35%" in m for m in messages)

    def test_removed_script_is_reported(self, project, config):
        (project / "scripts" / "coverage").unlink()

        report = verify_documents(config)

        assert len(report.errors) == 2
        assert all("scripts/coverage" in f.message for f in report.errors)
