"""Tests for ConfigurationManager."""

import json
import os
from unittest.mock import patch

import pytest

from pattern_catalog.config.defaults import DEFAULT_CONFIG
from pattern_catalog.config.manager import ConfigurationManager, get_config_manager
from pattern_catalog.config.schemas import LogDestination, LogLevel
from pattern_catalog.domain.core.exceptions import ConfigurationError


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=False):
        for name in ("LOG_LEVEL", "LOG_DESTINATION", "PATTERN_CATALOG_LOGDIR"):
            os.environ.pop(name, None)
        yield


@pytest.fixture
def config_file(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return str(path)
    return _write


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestConfigurationManager:
    """Test cases for ConfigurationManager."""

    def test_defaults(self):
        config = ConfigurationManager().app_config

        assert config.logging.level == LogLevel.WARNING
        assert config.logging.destination == LogDestination.CONSOLE
        assert config.logging.file.path == "logs/pattern_catalog.log"
        assert config.debug is False

    def test_environment_overrides(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug", "PATTERN_CATALOG_LOGDIR": "/tmp/pc"}):
            config = ConfigurationManager().app_config

        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.file.path == "/tmp/pc/pattern_catalog.log"

    def test_file_is_deep_merged(self, config_file):
        path = config_file({"logging": {"destination": "both", "file": {"backup_count": 2}}})

        config = ConfigurationManager(path).app_config

        assert config.logging.destination == LogDestination.BOTH
        assert config.logging.file.backup_count == 2
        assert config.logging.file.max_size_mb == 10
        assert config.logging.level == LogLevel.WARNING

    def test_defaults_are_not_mutated(self, config_file):
        path = config_file({"logging": {"level": "ERROR"}})

        ConfigurationManager(path)

        assert DEFAULT_CONFIG["logging"]["level"] == "${LOG_LEVEL:WARNING}"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc:
            ConfigurationManager(str(tmp_path / "missing.json"))
        assert "not found" in str(exc.value)

    def test_invalid_json(self, config_file):
        path = config_file("{not json")

        with pytest.raises(ConfigurationError) as exc:
            ConfigurationManager(path)
        assert "Invalid JSON" in str(exc.value)

    def test_non_object_json(self, config_file):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(config_file([1, 2, 3]))

    def test_invalid_values(self, config_file):
        path = config_file({"logging": {"level": "LOUD"}})

        with pytest.raises(ConfigurationError) as exc:
            ConfigurationManager(path)
        assert "Invalid configuration" in str(exc.value)

    def test_get_dot_notation(self):
        manager = ConfigurationManager()

        assert manager.get("logging.file.max_size_mb") == 10
        assert manager.get("logging.missing", "fallback") == "fallback"
        assert manager.get("debug") is False

    def test_raw_config_is_a_copy(self):
        manager = ConfigurationManager()

        raw = manager.get_raw_config()
        raw["logging"]["level"] = "CRITICAL"

        assert manager.get("logging.level") == "WARNING"

    def test_reload(self):
        manager = ConfigurationManager()

        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}):
            manager.reload()

        assert manager.app_config.logging.level == LogLevel.ERROR

    def test_get_config_manager_is_shared(self):
        assert get_config_manager() is get_config_manager()

    def test_get_config_manager_same_path_is_allowed(self, config_file):
        path = config_file({"debug": True})

        manager = get_config_manager(path)

        assert get_config_manager(path) is manager
        assert get_config_manager() is manager
        assert manager.config_path == path
        assert manager.app_config.debug is True

    def test_get_config_manager_rejects_different_path(self, config_file, tmp_path):
        get_config_manager(config_file({"debug": True}))
        other_path = str(tmp_path / "other.json")

        with pytest.raises(ConfigurationError) as exc:
            get_config_manager(other_path)
        assert "cannot switch to" in str(exc.value)
        assert other_path in str(exc.value)

    def test_get_config_manager_rejects_path_after_defaults(self, config_file):
        get_config_manager()

        with pytest.raises(ConfigurationError) as exc:
            get_config_manager(config_file({}))
        assert "already loaded from defaults" in str(exc.value)
