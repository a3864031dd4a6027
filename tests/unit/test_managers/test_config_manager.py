"""
Unit tests for ConfigManager and related configuration classes.

Tests configuration management with real file operations,
emphasizing actual file I/O over mocking.
"""

import json
import os

import pytest
from pydantic import ValidationError

from metroplanner.core.services import PlanningObjective
from metroplanner.managers.config_manager import (
    ConfigData,
    ConfigManager,
    ConfigurationError,
    LoggingConfig,
    PlannerConfig,
)


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a config file pointing at a custom network."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "network_path": "networks/city.txt",
        "planner": {"objective": "transfers"},
        "logging": {"level": "info", "log_file": None},
    }), encoding="utf-8")
    return path


class TestConfigModels:
    """Test the pydantic configuration models."""

    def test_defaults(self):
        config = ConfigData()

        assert config.network_path is None
        assert config.planner.objective is PlanningObjective.STOPS
        assert config.logging.level == "WARNING"
        assert config.logging.log_file is None

    def test_defaults_not_shared(self):
        first, second = ConfigData(), ConfigData()
        first.logging.level = "DEBUG"

        assert second.logging.level == "WARNING"

    def test_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="chatty")

    def test_objective_from_string(self):
        assert PlannerConfig(objective="transfers").objective is PlanningObjective.TRANSFERS

    def test_invalid_objective(self):
        with pytest.raises(ValidationError):
            PlannerConfig(objective="fastest")


class TestConfigManager:
    """Test ConfigManager class."""

    def test_load_existing_config(self, temp_config_file):
        manager = ConfigManager(str(temp_config_file))

        config = manager.load_config()

        assert config.network_path == "networks/city.txt"
        assert config.planner.objective is PlanningObjective.TRANSFERS
        assert config.logging.level == "INFO"
        assert manager.config is config

    def test_create_default_config(self, tmp_path):
        path = tmp_path / "fresh" / "config.json"
        manager = ConfigManager(str(path))

        config = manager.load_config()

        assert path.exists()
        assert config == ConfigData()
        assert json.loads(path.read_text(encoding="utf-8"))["planner"]["objective"] == "stops"

    def test_save_and_reload_config(self, tmp_path):
        path = tmp_path / "config.json"
        manager = ConfigManager(str(path))
        config = ConfigData(
            network_path="net.txt",
            planner=PlannerConfig(objective=PlanningObjective.TRANSFERS),
            logging=LoggingConfig(level="ERROR", log_file="logs/planner.log"),
        )

        assert manager.save_config(config) is True

        reloaded = ConfigManager(str(path)).load_config()
        assert reloaded == config

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{ not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigManager(str(path)).load_config()

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "LOUD"}}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigManager(str(path)).load_config()

    def test_save_config_failure_returns_false(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        manager = ConfigManager(str(blocker / "config.json"))

        assert manager.save_config(ConfigData()) is False
        with pytest.raises(ConfigurationError):
            manager.create_default_config()

    @pytest.mark.skipif(os.name == "nt", reason="XDG layout applies off Windows")
    def test_default_config_path_uses_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert ConfigManager.get_default_config_path() == tmp_path / "MetroPlanner" / "config.json"
        assert ConfigManager().config_path == tmp_path / "MetroPlanner" / "config.json"

    @pytest.mark.skipif(os.name == "nt", reason="XDG layout applies off Windows")
    def test_default_config_path_without_xdg(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert ConfigManager.get_default_config_path() == tmp_path / ".config" / "MetroPlanner" / "config.json"
