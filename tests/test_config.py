"""
Tests for configuration model, loading and activation.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json

import pytest

from node_utils.core.config import (
    NodeUtilsConfig,
    get_config,
    load_config,
    reset_config,
    save_config,
    set_config,
    validate_config,
)
from node_utils.core.exceptions import ConfigurationError


class TestNodeUtilsConfig:
    def test_defaults(self) -> None:
        config = NodeUtilsConfig()
        assert config.open_suffix == ".open"
        assert config.close_suffix == ".close"
        assert config.join_separator == ","
        assert config.log_level == "WARNING"

    def test_log_level_is_normalized(self) -> None:
        assert NodeUtilsConfig(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            NodeUtilsConfig(log_level="LOUD")

    @pytest.mark.parametrize("suffix", ["", ".", "open", "-open"])
    def test_invalid_suffix(self, suffix) -> None:
        with pytest.raises(ValueError):
            NodeUtilsConfig(open_suffix=suffix)

    def test_suffixes_must_differ(self) -> None:
        with pytest.raises(ValueError, match="must differ"):
            NodeUtilsConfig(open_suffix=".x", close_suffix=".x")

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValueError):
            NodeUtilsConfig(children_field="kids")


class TestActiveConfig:
    def test_get_config_is_cached(self) -> None:
        assert get_config() is get_config()

    def test_set_and_reset(self) -> None:
        custom = NodeUtilsConfig(join_separator="|")
        assert set_config(custom) is custom
        assert get_config() is custom
        reset_config()
        assert get_config().join_separator == ","

    def test_set_config_rejects_other_types(self) -> None:
        with pytest.raises(ConfigurationError):
            set_config({"join_separator": "|"})


class TestConfigFiles:
    def test_save_then_load(self, tmp_path) -> None:
        path = tmp_path / "nested" / "config.json"
        save_config(NodeUtilsConfig(open_suffix=".begin", close_suffix=".end"), path)

        loaded = load_config(path)

        assert loaded.open_suffix == ".begin"
        assert get_config().open_suffix == ".open"

    def test_load_and_activate(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"join_separator": ";"}), encoding="utf-8")
        load_config(path, activate=True)
        assert get_config().join_separator == ";"

    def test_validate_missing_file(self, tmp_path) -> None:
        ok, error, config = validate_config(tmp_path / "missing.json")
        assert ok is False
        assert "not found" in error
        assert config is None

    def test_validate_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        ok, error, _ = validate_config(path)
        assert ok is False
        assert error.startswith("Invalid JSON")

    def test_validate_non_object_root(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[]", encoding="utf-8")
        ok, error, _ = validate_config(path)
        assert ok is False
        assert "JSON object" in error

    def test_load_invalid_raises_configuration_error(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "LOUD"}), encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert exc_info.value.details["path"] == str(path)
