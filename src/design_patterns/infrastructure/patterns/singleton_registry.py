"""Thread-safe registry holding one instance per class."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry that lazily creates and then reuses one instance per class.

    The registry is itself a double-checked singleton: use
    ``SingletonRegistry.get_instance()`` rather than constructing it.
    Constructor arguments only matter for the first ``get`` of a class;
    later calls return the existing instance unchanged.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize singleton registry."""
        self._instances: Dict[Type, Any] = {}
        self._registry_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it on first access.

        Args:
            singleton_class: The class to get an instance of
            *args: Arguments to pass to the constructor if creating a new instance
            **kwargs: Keyword arguments to pass to the constructor if creating a new instance

        Returns:
            The singleton instance
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._registry_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self._logger.debug(f"Created singleton instance of {singleton_class.__name__}")
        return instance

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance of ``singleton_class`` already exists."""
        return singleton_class in self._instances

    def remove(self, singleton_class: Type) -> bool:
        """
        Drop the instance of ``singleton_class``.

        Returns:
            True if an instance was removed, False if none existed
        """
        with self._registry_lock:
            return self._instances.pop(singleton_class, None) is not None

    def clear(self) -> None:
        """Drop every registered instance."""
        with self._registry_lock:
            self._instances.clear()
