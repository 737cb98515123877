"""Process-wide application settings."""

import threading
from typing import Optional

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AppSettings:
    """
    Application settings shared by the whole process.

    ``AppSettings()`` and ``AppSettings.get_instance()`` both return the same
    object. Creation is guarded by double-checked locking so concurrent first
    access constructs exactly one instance. Values are fixed at construction
    and exposed read-only.
    """

    _instance: Optional["AppSettings"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "AppSettings":
        """Thread-safe singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._create()
        return cls._instance

    @classmethod
    def _create(cls) -> "AppSettings":
        instance = super().__new__(cls)
        instance._database_url = "jdbc:mysql//localhost:3306"
        instance._api_key = "12345-abcde"
        logger.debug("AppSettings instance created")
        return instance

    @classmethod
    def get_instance(cls) -> "AppSettings":
        """Return the process-wide settings instance."""
        return cls()

    @property
    def database_url(self) -> str:
        return self._database_url

    @property
    def api_key(self) -> str:
        return self._api_key
