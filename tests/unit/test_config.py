"""Unit tests for configuration loading."""
import json

from preflight_core.config import ConfigManager, PreflightConfig, get_config, get_config_manager


class TestConfigManager:
    """Tests for loading configuration from disk."""

    def test_defaults_without_file(self, tmp_path):
        manager = ConfigManager(tmp_path / "absent.json")
        config = manager.config
        assert config.output_path == "odoo_system_analysis.json"
        assert config.web_url == "https://www.odoo.com/es_ES/trial"
        assert config.disk_path is None

    def test_loads_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output_path": "out.json", "disk_path": "/srv"}))
        config = ConfigManager(path).config
        assert config.output_path == "out.json"
        assert config.disk_path == "/srv"
        assert config.web_username == "admin"

    def test_invalid_json_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert ConfigManager(path).config == PreflightConfig()

    def test_invalid_values_use_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output_path": ["not", "a", "string"]}))
        assert ConfigManager(path).config == PreflightConfig()

    def test_update_overrides_for_run(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        manager.update(log_level="DEBUG")
        assert manager.config.log_level == "DEBUG"
        assert manager.config.output_path == "odoo_system_analysis.json"


class TestGlobalConfig:
    """Tests for the lazy singleton."""

    def test_get_config_uses_manager(self, isolated_config):
        assert get_config_manager() is isolated_config
        assert get_config() is isolated_config.config
