"""Class-keyed registry of singleton instances."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from patternbook.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Hands out one instance per class.

    The registry is itself a singleton. Lookups and creation happen under a
    re-entrant lock, so a constructor may ask the registry for another
    singleton.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[type, Any] = {}
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Return the instance of ``singleton_class``, creating it on first use.

        Constructor arguments are only used by the call that creates the
        instance.
        """
        with self._lock:
            if singleton_class not in self._instances:
                self._logger.debug(f"Creating singleton instance of {singleton_class.__name__}")
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
            return self._instances[singleton_class]

    def has(self, singleton_class: type) -> bool:
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[type] = None) -> None:
        """Drop one instance, or every instance when no class is given."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)
