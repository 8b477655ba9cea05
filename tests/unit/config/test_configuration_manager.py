"""Tests for the configuration manager."""
import json

import pytest

from pattern_catalogue.config.manager import ConfigurationManager
from pattern_catalogue.domain.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for env_var in (
        "PATTERN_CATALOGUE_CONFIG",
        "PATTERN_CATALOGUE_LOG_LEVEL",
        "PATTERN_CATALOGUE_LOG_DESTINATION",
        "PATTERN_CATALOGUE_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(env_var, raising=False)


class TestConfigurationManager:
    """Test file loading, environment overrides and validation."""

    def test_defaults_without_file(self):
        config = ConfigurationManager().app_config

        assert config.output.format == "text"

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("logging:\n  level: info\noutput:\n  format: table\n")

        config = ConfigurationManager(str(config_file)).app_config

        assert config.logging.level == "INFO"
        assert config.output.format == "table"

    def test_json_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"demos": {"enabled": ["facade"]}}))

        config = ConfigurationManager(str(config_file)).app_config

        assert config.demos.enabled == ["facade"]

    def test_empty_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("")

        assert ConfigurationManager(str(config_file)).app_config.output.format == "text"

    def test_config_file_from_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yml"
        config_file.write_text("output:\n  format: yaml\n")
        monkeypatch.setenv("PATTERN_CATALOGUE_CONFIG", str(config_file))

        manager = ConfigurationManager()

        assert manager.config_file == str(config_file)
        assert manager.app_config.output.format == "yaml"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yml"
        config_file.write_text("logging:\n  level: info\n")
        monkeypatch.setenv("PATTERN_CATALOGUE_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PATTERN_CATALOGUE_OUTPUT_FORMAT", "json")

        config = ConfigurationManager(str(config_file)).app_config

        assert config.logging.level == "ERROR"
        assert config.output.format == "json"

    def test_environment_override_on_empty_section(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yml"
        config_file.write_text("logging:\n")
        monkeypatch.setenv("PATTERN_CATALOGUE_LOG_DESTINATION", "none")

        config = ConfigurationManager(str(config_file)).app_config

        assert config.logging.destination == "none"

    def test_missing_file(self, tmp_path):
        manager = ConfigurationManager(str(tmp_path / "missing.yml"))

        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            manager.app_config

    def test_unparsable_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigurationManager(str(config_file)).app_config

    def test_non_mapping_file(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigurationManager(str(config_file)).app_config

    def test_invalid_values_wrapped(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("output:\n  format: xml\n")

        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
            ConfigurationManager(str(config_file)).app_config

        assert exc_info.value.source == str(config_file)
        assert exc_info.value.details

    def test_config_cached_until_reload(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("output:\n  format: json\n")
        manager = ConfigurationManager(str(config_file))
        first = manager.app_config

        config_file.write_text("output:\n  format: yaml\n")
        assert manager.get_config() is first

        manager.reload()
        assert manager.app_config.output.format == "yaml"

    def test_directory_path(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read configuration file") as exc_info:
            ConfigurationManager(str(tmp_path)).app_config

        assert exc_info.value.source == str(tmp_path)

    @pytest.mark.parametrize("suffix", [".yml", ".json"])
    def test_invalid_utf8_file(self, tmp_path, suffix):
        config_file = tmp_path / f"config{suffix}"
        config_file.write_bytes(b"\xff\xfe")

        with pytest.raises(ConfigurationError, match="configuration file"):
            ConfigurationManager(str(config_file)).app_config

    def test_misspelt_section_rejected(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("loging:\n  level: info\n")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigurationManager(str(config_file)).app_config
