"""Configuration package.

Typed schemas are exported here. The configuration manager lives in
``pattern_catalog.config.manager`` and is obtained with ``get_config_manager``.
"""

from .schemas import AppConfig, LogDestination, LogFileConfig, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "LogDestination",
    "LogFileConfig",
    "LoggingConfig",
    "LogLevel",
]
