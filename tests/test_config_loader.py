# tests/test_config_loader.py
"""
Tests for layered config loading: package defaults + contribkit.yaml.
"""

from __future__ import annotations

import pytest

from contribkit.config.loader import (
    deep_merge,
    load_defaults,
    load_workflow_config,
    load_yaml,
)
from contribkit.config.schema import WorkflowConfig
from contribkit.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from contribkit.core.paths import ProjectPaths


class TestDeepMerge:
    pytestmark = pytest.mark.tier1

    def test_nested_values_are_merged(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        assert deep_merge(base, {"b": {"c": 10}}) == {"a": 1, "b": {"c": 10, "d": 3}}

    def test_lists_are_replaced(self):
        base = {"lint": {"paths": ["a", "b"]}}
        assert deep_merge(base, {"lint": {"paths": ["c"]}}) == {"lint": {"paths": ["c"]}}

    def test_base_is_not_mutated(self):
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}


@pytest.mark.tier2
class TestLoadYaml:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError, match="not found"):
            load_yaml(tmp_path / "missing.yaml")

    def test_directory(self, tmp_path):
        with pytest.raises(ConfigError, match="directory"):
            load_yaml(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("project: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="Invalid YAML"):
            load_yaml(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="mapping"):
            load_yaml(path)

    def test_empty_file_is_empty_dict(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_yaml(path) == {}


@pytest.mark.tier2
class TestLoadWorkflowConfig:
    def test_packaged_defaults_match_schema_defaults(self):
        assert WorkflowConfig.model_validate(load_defaults()) == WorkflowConfig()

    def test_no_project_config_uses_defaults(self, tmp_path):
        ProjectPaths.set_root(tmp_path)

        config = load_workflow_config()

        assert config.test.coverage_threshold == 98.35
        assert config.contributing.documents == ["CONTRIBUTING.md", "docs/contributing.md"]
        assert config.docs.cli_usage.marker == "<!-- :cli_usage: -->"

    def test_project_config_overrides_defaults(self, config):
        assert config.project.name == "demo"
        assert config.lint.paths == ["demo", "tests"]
        assert config.docs.cli_usage.command == ["demo", "--help"]
        # Untouched keys keep their defaults
        assert config.docs.cli_usage.targets == ["docs/index.md"]
        assert config.install.venv == "venv"

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            load_workflow_config(tmp_path / "nope.yaml")

    def test_config_override_is_used(self, tmp_path):
        custom = tmp_path / "custom.yaml"
        custom.write_text("test:\n  coverage_threshold: 90\n", encoding="utf-8")
        ProjectPaths.set_root(tmp_path)
        ProjectPaths.set_config(custom)

        assert load_workflow_config().test.coverage_threshold == 90

    def test_unknown_key_is_rejected(self, tmp_path):
        path = tmp_path / "contribkit.yaml"
        path.write_text("lint:\n  pathz: [src]\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError, match="contribkit.yaml"):
            load_workflow_config(path)

    def test_threshold_out_of_range_is_rejected(self, tmp_path):
        path = tmp_path / "contribkit.yaml"
        path.write_text("test:\n  coverage_threshold: 101\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            load_workflow_config(path)

    def test_empty_cli_usage_command_is_rejected(self, tmp_path):
        path = tmp_path / "contribkit.yaml"
        path.write_text("docs:\n  cli_usage:\n    command: []\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError, match="must not be empty"):
            load_workflow_config(path)
