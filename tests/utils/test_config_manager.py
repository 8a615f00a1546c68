"""Tests for config_manager.py module."""

import json

import pytest

from sail.models.config import SailConfig
from sail.services.exceptions import ConfigError
from sail.utils.config_manager import ConfigManager, default_config_path, meta_root


class TestConfigManager:
    """Tests for ConfigManager functionality."""

    def test_load_defaults_when_missing(self, tmp_path):
        """Test loading config when no file exists."""
        manager = ConfigManager(tmp_path / "config.json")
        config = manager.load()
        assert config == SailConfig()
        assert config.default_network == "sail"

    def test_save_and_load(self, tmp_path):
        """Test saving and loading configuration."""
        path = tmp_path / "nested" / "config.json"
        manager = ConfigManager(path)
        manager.save(SailConfig(default_network="devnet", meta_root="/srv/sail"))

        assert path.exists()
        loaded = manager.load()
        assert loaded.default_network == "devnet"
        assert loaded.meta_root == "/srv/sail"

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"default_image": "myorg/dev"}))

        config = ConfigManager(path).load()
        assert config.default_image == "myorg/dev"
        assert config.default_subnet == SailConfig().default_subnet

    def test_invalid_file_raises(self, tmp_path):
        """Test invalid content is an error rather than silently ignored."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="Failed to read config"):
            ConfigManager(path).load()

    def test_default_config_path_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SAIL_CONFIG", str(tmp_path / "custom.json"))
        assert default_config_path() == tmp_path / "custom.json"
        assert ConfigManager().config_path == tmp_path / "custom.json"

    def test_default_config_path_under_home(self, host_home, monkeypatch):
        monkeypatch.delenv("SAIL_CONFIG", raising=False)
        assert default_config_path() == host_home / ".config" / "sail" / "config.json"

    def test_meta_root_default_and_override(self, host_home, tmp_path):
        assert meta_root(SailConfig()) == host_home / ".config" / "sail"
        assert meta_root(SailConfig(meta_root=str(tmp_path))) == tmp_path
