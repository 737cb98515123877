"""Configuration management for the pattern catalog."""
from __future__ import annotations

import copy
import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.config.defaults import DEFAULT_CONFIG
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.config.utils.env_expansion import expand_config_env_vars
from pattern_catalog.domain.core.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is assembled from ``DEFAULT_CONFIG``, deep-merged with an
    optional JSON file, expanded against the environment and validated into
    an ``AppConfig``.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to a JSON configuration file

        Raises:
            ConfigurationError: If the file cannot be read or the result is invalid
        """
        self._config_path = config_path
        self._lock = threading.RLock()
        self.raw_config = self._load(config_path)
        self._app_config = self._create_app_config(self.raw_config)
        logger.debug("Configuration loaded", config_path=config_path)

    @staticmethod
    def _load(config_path: Optional[str]) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)
        if config_path:
            path = Path(config_path)
            try:
                with path.open("r", encoding="utf-8") as f:
                    file_config = json.load(f)
            except FileNotFoundError:
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in configuration file {config_path}: {e}")
            if not isinstance(file_config, dict):
                raise ConfigurationError(f"Configuration file {config_path} must contain a JSON object")
            config = ConfigurationManager._deep_merge(config, file_config)
        return expand_config_env_vars(config)

    @staticmethod
    def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = ConfigurationManager._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @staticmethod
    def _create_app_config(raw_config: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.model_validate(raw_config)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @property
    def config_path(self) -> Optional[str]:
        """Configuration file the manager was created with."""
        return self._config_path

    @property
    def app_config(self) -> AppConfig:
        """Get typed application configuration."""
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get a copy of the raw configuration dictionary."""
        return copy.deepcopy(self.raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.raw_config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Reload configuration from the same sources."""
        with self._lock:
            self.raw_config = self._load(self._config_path)
            self._app_config = self._create_app_config(self.raw_config)
            logger.info("Configuration reloaded")


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    Args:
        config_path: Configuration file used when the manager is first created.
            Later calls may omit it or repeat the same path.

    Raises:
        ConfigurationError: If the manager already exists for a different file
    """
    manager = get_singleton(ConfigurationManager, config_path)
    if config_path is not None and manager.config_path != config_path:
        raise ConfigurationError(
            f"Configuration already loaded from {manager.config_path or 'defaults'}; "
            f"cannot switch to {config_path}"
        )
    return manager
