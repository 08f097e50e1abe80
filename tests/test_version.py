# tests/test_version.py
"""
Tests for changelog/package version consistency.
"""

from __future__ import annotations

import pytest

from contribkit.core.exceptions import DocumentError
from contribkit.workflow.version import check_version, current_version, find_version, read_version


class TestFindVersion:
    pytestmark = pytest.mark.tier1

    @pytest.mark.parametrize(
        "text, expected",
        [
            ('__version__ = "1.2.3"', "1.2.3"),
            ("## 0.30.1 (May 1, 2026)", "0.30.1"),
            ("## v2.0.0", "2.0.0"),
            ("1.0.0-rc.1 and then 1.0.0", "1.0.0-rc.1"),
            ("1.0.0+build.5", "1.0.0+build.5"),
            ('__version__ = "1.0.0rc1"', "1.0.0rc1"),
            ("## 2.0.0.dev3", "2.0.0.dev3"),
            ("# Release Notes\n\n## 0.2.0\n\n## 0.1.0\n", "0.2.0"),
        ],
    )
    def test_first_semver_wins(self, text, expected):
        assert find_version(text) == expected

    @pytest.mark.parametrize("text", ["no version here", "version 1.2", "01.2.3"])
    def test_no_version(self, text):
        assert find_version(text) is None


@pytest.mark.tier2
class TestCheckVersion:
    def test_matching_versions(self, config):
        ok, message = check_version(config)

        assert ok
        assert message == "Version 1.2.3 is consistent"

    def test_mismatch_names_both_files(self, project, config):
        (project / "demo" / "__init__.py").write_text('__version__ = "1.2.4"\n', encoding="utf-8")

        ok, message = check_version(config)

        assert not ok
        assert "docs/release-notes.md (1.2.3)" in message
        assert "demo/__init__.py (1.2.4)" in message

    def test_missing_version_file(self, project, config):
        (project / "demo" / "__init__.py").unlink()

        ok, message = check_version(config)

        assert not ok
        assert "File not found" in message

    def test_changelog_without_version(self, project, config):
        (project / "docs" / "release-notes.md").write_text("# Release Notes\n", encoding="utf-8")

        ok, message = check_version(config)

        assert not ok
        assert message == "No version found in docs/release-notes.md"

    def test_current_version(self, config):
        assert current_version(config) == "1.2.3"

    def test_read_version_of_directory_raises(self, tmp_path):
        with pytest.raises(DocumentError):
            read_version(tmp_path)

    def test_read_version_of_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "release-notes.md"
        path.write_bytes(b"## 1.2.3 \xff\xfe\n")

        with pytest.raises(DocumentError, match="Cannot read"):
            read_version(path)

    def test_pre_release_is_not_truncated(self, project, config):
        (project / "demo" / "__init__.py").write_text('__version__ = "1.2.3rc1"\n', encoding="utf-8")

        ok, message = check_version(config)

        assert not ok
        assert "(1.2.3rc1)" in message
