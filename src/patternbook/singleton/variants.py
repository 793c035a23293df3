"""Four ways to hand out the one chocolate boiler."""
import threading
import time
from typing import Optional

from .boiler import ChocolateBoiler


class _LazyChocolateBoiler(ChocolateBoiler):
    """Shared plumbing for the variants that create their instance on demand."""

    _instance: Optional["_LazyChocolateBoiler"] = None

    # Seconds between "no instance yet" and constructing one
    creation_delay: float = 0.0

    @classmethod
    def _create(cls) -> "_LazyChocolateBoiler":
        if cls.creation_delay:
            time.sleep(cls.creation_delay)
        return cls()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the instance so the next access creates a new one."""
        cls._instance = None


class SimpleChocolateBoiler(_LazyChocolateBoiler):
    """Naive lazy initialization. Not thread safe."""

    _instance: Optional["SimpleChocolateBoiler"] = None

    @classmethod
    def get_instance(cls) -> "SimpleChocolateBoiler":
        if cls._instance is None:
            cls._instance = cls._create()
        return cls._instance


class SynchronizedChocolateBoiler(_LazyChocolateBoiler):
    """Every call to the accessor holds the class lock."""

    _instance: Optional["SynchronizedChocolateBoiler"] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "SynchronizedChocolateBoiler":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls._create()
            return cls._instance


class DoubleCheckedChocolateBoiler(_LazyChocolateBoiler):
    """The lock is only taken while the instance is still missing."""

    _instance: Optional["DoubleCheckedChocolateBoiler"] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "DoubleCheckedChocolateBoiler":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._create()
        return cls._instance


class EagerChocolateBoiler(ChocolateBoiler):
    """Created once, when this module is imported."""

    _instance: "EagerChocolateBoiler"

    @classmethod
    def get_instance(cls) -> "EagerChocolateBoiler":
        return cls._instance


EagerChocolateBoiler._instance = EagerChocolateBoiler()
