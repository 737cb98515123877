"""Registry that holds one instance per class for the lifetime of the process."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Thread-safe registry of singleton instances keyed by class.

    The registry itself is a singleton. Instances are created lazily on the
    first ``get`` for a class, under a lock, so concurrent first access
    constructs each class at most once.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "SingletonRegistry":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize singleton registry."""
        if hasattr(self, "_initialized"):
            return

        self._instances: Dict[Type[Any], Any] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)
        self._initialized = True

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Return the registry."""
        return cls()

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of a class, creating it on first access.

        Args:
            singleton_class: Class to get an instance of
            *args: Constructor arguments, only used on first access
            **kwargs: Constructor keyword arguments, only used on first access

        Returns:
            The shared instance
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._registry_lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                self._instances[singleton_class] = instance
                self.logger.debug("Created singleton instance", singleton=singleton_class.__name__)
            return instance

    def reset(self, singleton_class: Optional[Type[Any]] = None) -> None:
        """
        Drop cached instances.

        Args:
            singleton_class: Class to drop; all instances are dropped when omitted
        """
        with self._registry_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
