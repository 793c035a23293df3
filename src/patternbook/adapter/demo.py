"""Adapter demo."""
from patternbook.config.schemas import DemoConfig
from patternbook.core.exceptions import UnsupportedOperationError
from patternbook.registry import demo

from .birds import Duck, MallardDuck, ThanksgivingTurkey, Turkey, TurkeyAdapter
from .enumeration import EnumerationIterator, ListEnumeration


@demo("adapter", summary="A turkey wrapped to look like a duck, an enumeration wrapped as an iterator")
def run(config: DemoConfig) -> None:
    mallard_duck: Duck = MallardDuck()
    mallard_duck.quack()

    thanksgiving_turkey: Turkey = ThanksgivingTurkey()
    turkey_to_duck: Duck = TurkeyAdapter(thanksgiving_turkey)
    turkey_to_duck.quack()
    turkey_to_duck.fly()

    print("-- Enumeration as iterator --")
    iterator = EnumerationIterator(ListEnumeration(["mallard", "redhead", "rubber"]))
    for name in iterator:
        print(name)
    try:
        iterator.remove()
    except UnsupportedOperationError as e:
        print(f"remove() rejected: {e}")
