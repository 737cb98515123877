"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "LogDestination",
    "LogFileConfig",
    "LoggingConfig",
    "LogLevel",
]
