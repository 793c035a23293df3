"""Singleton: one chocolate boiler per factory.

A chocolate boiler is filled, brought to a boil and drained. Its guards keep
it from draining unboiled mix or overflowing a full boiler, but two boiler
objects controlling the same physical boiler would each trust their own flags
and happily do both. There must be exactly one instance, and everyone must
reach it through a single global access point, ``get_instance()``.

The textbook version creates the instance lazily: if there is no instance
yet, make one. With threads that check is a race. Two threads can both see
"no instance" before either assigns it, and each walks away with a different
boiler. ``SimpleChocolateBoiler`` has exactly this bug, and ``run_race``
makes it visible by lining threads up behind a barrier and pausing between
the check and the construction.

Three fixes, each with its price:

* ``SynchronizedChocolateBoiler`` takes a lock around the whole accessor.
  Always correct, but every call pays for the lock even though it is only
  needed once.
* ``EagerChocolateBoiler`` creates the instance when its module is imported.
  No race and no lock, but the object exists whether anyone needs it or not.
* ``DoubleCheckedChocolateBoiler`` checks, takes the lock only when the
  instance is missing, and checks again inside the lock. The lock is paid
  once.

``SingletonRegistry`` and ``get_singleton`` generalize the lock-protected
variant to any class.
"""

from .boiler import ChocolateBoiler
from .race import RaceResult, run_race
from .registry import SingletonRegistry, get_singleton
from .variants import (
    DoubleCheckedChocolateBoiler,
    EagerChocolateBoiler,
    SimpleChocolateBoiler,
    SynchronizedChocolateBoiler,
)

__all__ = [
    "ChocolateBoiler",
    "SimpleChocolateBoiler",
    "SynchronizedChocolateBoiler",
    "EagerChocolateBoiler",
    "DoubleCheckedChocolateBoiler",
    "SingletonRegistry",
    "get_singleton",
    "RaceResult",
    "run_race",
]
