"""Strategy demo."""
from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .behaviors import RocketPoweredFly
from .ducks import Duck, MallardDuck, RubberDuck
from .inheritance import InheritedMallardDuck


@demo("strategy", summary="Ducks delegating fly/quack to swappable behaviour objects")
def run(config: DemoConfig) -> None:
    print("-- Inheritance only --")
    legacy = InheritedMallardDuck()
    legacy.quack()
    legacy.fly()

    print("-- Composition with strategies --")
    # Program to an interface, not an implementation
    duck: Duck = MallardDuck()
    duck.fly()
    duck.set_fly_behavior(RocketPoweredFly())
    duck.fly()

    duck = RubberDuck()
    duck.quack()
