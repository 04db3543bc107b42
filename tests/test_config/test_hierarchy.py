"""Tests for config hierarchy."""

import pytest

from libconfidence.config import hierarchy
from libconfidence.config.hierarchy import (
    _coerce_env_value,
    _load_yaml_config,
    load_config_hierarchy,
)


@pytest.fixture(autouse=True)
def _no_global_config(tmp_path, monkeypatch):
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml")


class TestLoadConfigHierarchy:
    def test_returns_defaults(self):
        config = load_config_hierarchy()
        assert config["risk_low_threshold"] == 70
        assert config["output_format"] == "table"

    def test_runtime_overrides(self):
        config = load_config_hierarchy(risk_low_threshold=80, output_format="json")
        assert config["risk_low_threshold"] == 80
        assert config["output_format"] == "json"

    def test_none_overrides_ignored(self):
        config = load_config_hierarchy(risk_low_threshold=None)
        assert config["risk_low_threshold"] == 70  # Default preserved

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("LIBCONFIDENCE_MODEL_RECENCY_START", "2021-06")
        config = load_config_hierarchy()
        assert config["model_recency_start"] == "2021-06"

    def test_runtime_beats_env(self, monkeypatch):
        monkeypatch.setenv("LIBCONFIDENCE_OUTPUT_FORMAT", "json")
        config = load_config_hierarchy(output_format="table")
        assert config["output_format"] == "table"  # Runtime wins

    def test_env_numeric_coercion(self, monkeypatch):
        monkeypatch.setenv("LIBCONFIDENCE_RISK_MEDIUM_THRESHOLD", "35")
        config = load_config_hierarchy()
        assert config["risk_medium_threshold"] == 35.0
        assert isinstance(config["risk_medium_threshold"], float)

    def test_global_config(self, tmp_path, monkeypatch):
        global_path = tmp_path / "home" / "config.yaml"
        global_path.parent.mkdir()
        global_path.write_text("log_level: INFO\nrisk_low_threshold: 75\n")
        monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", global_path)
        monkeypatch.chdir(tmp_path)
        config = load_config_hierarchy()
        assert config["log_level"] == "INFO"
        assert config["risk_low_threshold"] == 75

    def test_project_config(self, tmp_path, monkeypatch):
        config_file = tmp_path / "libconfidence.yaml"
        config_file.write_text("risk_low_threshold: 85\nmodel_recency_start: '2022-01'\n")
        monkeypatch.chdir(tmp_path)
        config = load_config_hierarchy()
        assert config["risk_low_threshold"] == 85
        assert config["model_recency_start"] == "2022-01"

    def test_project_config_found_upward(self, tmp_path, monkeypatch):
        (tmp_path / "libconfidence.yaml").write_text("output_format: json\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config_hierarchy()["output_format"] == "json"

    def test_env_beats_project(self, tmp_path, monkeypatch):
        (tmp_path / "libconfidence.yaml").write_text("log_level: INFO\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LIBCONFIDENCE_LOG_LEVEL", "DEBUG")
        assert load_config_hierarchy()["log_level"] == "DEBUG"

    def test_non_numeric_env_kept_as_text(self, monkeypatch):
        monkeypatch.setenv("LIBCONFIDENCE_RISK_LOW_THRESHOLD", "high")
        assert load_config_hierarchy()["risk_low_threshold"] == "high"

    def test_directory_named_like_config_ignored(self, tmp_path, monkeypatch):
        (tmp_path / "libconfidence.yaml").mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_config_hierarchy()["output_format"] == "table"


class TestLoadYamlConfig:
    def test_loads_valid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("key: value\n")
        result = _load_yaml_config(path)
        assert result == {"key": "value"}

    def test_returns_none_for_missing(self, tmp_path):
        result = _load_yaml_config(tmp_path / "nonexistent.yaml")
        assert result is None

    def test_returns_none_for_non_dict(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- item1\n- item2\n")
        result = _load_yaml_config(path)
        assert result is None

    def test_returns_none_for_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n")
        assert _load_yaml_config(path) is None


class TestCoerceEnvValue:
    def test_float(self):
        assert _coerce_env_value("risk_low_threshold", "72.5") == 72.5

    def test_invalid_float_kept_as_string(self):
        assert _coerce_env_value("risk_low_threshold", "high") == "high"

    def test_string_passthrough(self):
        assert _coerce_env_value("log_level", "DEBUG") == "DEBUG"
