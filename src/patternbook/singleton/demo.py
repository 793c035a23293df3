"""Singleton demo."""
import threading

from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .race import run_race
from .variants import (
    DoubleCheckedChocolateBoiler,
    EagerChocolateBoiler,
    SimpleChocolateBoiler,
    SynchronizedChocolateBoiler,
)

_LAZY_VARIANTS = (SimpleChocolateBoiler, SynchronizedChocolateBoiler, DoubleCheckedChocolateBoiler)


def _run_pair(first, second) -> None:
    threads = [threading.Thread(target=first), threading.Thread(target=second)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


@demo("singleton", summary="Chocolate boilers and the lazy-initialization race")
def run(config: DemoConfig) -> None:
    simple = SimpleChocolateBoiler.get_instance()
    simple.fill()
    simple.boil()
    print(f"Simple boiler: {simple!r}")

    _run_pair(
        lambda: SynchronizedChocolateBoiler.get_instance().fill(),
        lambda: SynchronizedChocolateBoiler.get_instance().boil(),
    )
    print(f"Synchronized boiler: {SynchronizedChocolateBoiler.get_instance()!r}")

    eager = EagerChocolateBoiler.get_instance()
    eager.fill()
    print(f"Eager boiler: {eager!r}")

    _run_pair(
        lambda: DoubleCheckedChocolateBoiler.get_instance().fill(),
        lambda: DoubleCheckedChocolateBoiler.get_instance().boil(),
    )
    print(f"Double-checked boiler: {DoubleCheckedChocolateBoiler.get_instance()!r}")

    print(f"-- {config.race_workers} threads racing, {config.race_delay_seconds}s window --")
    for variant in _LAZY_VARIANTS:
        variant.reset_instance()
        variant.creation_delay = config.race_delay_seconds
        try:
            print(run_race(variant.get_instance, workers=config.race_workers))
        finally:
            variant.creation_delay = 0.0
            variant.reset_instance()
    print(run_race(EagerChocolateBoiler.get_instance, workers=config.race_workers))
