"""Tests for configuration loading and validation."""
import json

import pytest

from patternbook.config import AppConfig, ConfigurationManager, DemoConfig, LoggingConfig
from patternbook.core.exceptions import ConfigurationError


class TestSchemas:
    def test_defaults(self):
        config = AppConfig()
        assert config.logging.level == "WARNING"
        assert config.logging.destination == "stderr"
        assert config.demo.race_workers == 2
        assert config.demo.remote_slots == 7
        assert config.demo.coffee_answer is None

    def test_log_level_is_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(Exception):
            LoggingConfig(level="chatty")

    def test_race_needs_two_workers(self):
        with pytest.raises(Exception):
            DemoConfig(race_workers=1)

    @pytest.mark.parametrize("destination", ["file", "both"])
    def test_file_destinations_need_a_path(self, destination):
        with pytest.raises(Exception, match="file_path is required"):
            LoggingConfig(destination=destination)

    def test_file_destination_with_path(self, tmp_path):
        config = LoggingConfig(destination="file", file_path=str(tmp_path / "patternbook.log"))
        assert config.destination == "file"


class TestConfigurationManager:
    def test_no_file_gives_defaults(self):
        config = ConfigurationManager().get_config()
        assert config == AppConfig()

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "patternbook.yaml"
        path.write_text("demo:\n  remote_slots: 3\n  coffee_answer: 'yes'\n")

        config = ConfigurationManager(str(path)).get_config()

        assert config.demo.remote_slots == 3
        assert config.demo.coffee_answer == "yes"

    def test_loads_json(self, tmp_path):
        path = tmp_path / "patternbook.json"
        path.write_text(json.dumps({"logging": {"level": "info"}}))

        config = ConfigurationManager(str(path)).get_config()

        assert config.logging.level == "INFO"

    def test_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "patternbook.yml"
        path.write_text("demo:\n  race_workers: 5\n")
        monkeypatch.setenv("PATTERNBOOK_CONFIG", str(path))

        assert ConfigurationManager().get_config().demo.race_workers == 5

    def test_log_level_environment_override(self, tmp_path, monkeypatch):
        path = tmp_path / "patternbook.yml"
        path.write_text("logging:\n  level: ERROR\n")
        monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "debug")

        assert ConfigurationManager(str(path)).get_config().logging.level == "DEBUG"

    def test_env_vars_expanded_before_validation(self, tmp_path, monkeypatch):
        path = tmp_path / "patternbook.yml"
        path.write_text("demo:\n  remote_slots: ${PB_SLOTS:4}\n")

        assert ConfigurationManager(str(path)).get_config().demo.remote_slots == 4

        monkeypatch.setenv("PB_SLOTS", "2")
        assert ConfigurationManager(str(path)).get_config().demo.remote_slots == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager(str(tmp_path / "absent.yaml")).get_config()

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "patternbook.toml"
        path.write_text("x = 1")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            ConfigurationManager(str(path)).get_config()

    def test_invalid_values_report_fields(self, tmp_path):
        path = tmp_path / "patternbook.yaml"
        path.write_text("demo:\n  remote_slots: 0\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(str(path)).get_config()

        assert "demo.remote_slots" in exc_info.value.missing_fields

    def test_unknown_keys_rejected(self, tmp_path):
        path = tmp_path / "patternbook.yaml"
        path.write_text("storage:\n  type: json\n")
        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(path)).get_config()

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "patternbook.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigurationManager(str(path)).get_config()

    def test_config_is_cached_until_reload(self, tmp_path):
        path = tmp_path / "patternbook.yaml"
        path.write_text("demo:\n  remote_slots: 3\n")
        manager = ConfigurationManager(str(path))

        first = manager.get_config()
        path.write_text("demo:\n  remote_slots: 4\n")

        assert manager.get_config() is first
        assert manager.reload().demo.remote_slots == 4

    def test_file_destination_without_path_rejected(self, tmp_path):
        path = tmp_path / "patternbook.yaml"
        path.write_text("logging:\n  destination: both\n")
        with pytest.raises(ConfigurationError, match="file_path"):
            ConfigurationManager(str(path)).get_config()
