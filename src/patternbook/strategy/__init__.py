"""Strategy: ducks with interchangeable behaviours.

Start with inheritance: an abstract duck declares ``quack`` and ``fly`` and
every subclass implements both. It works until a rubber duck turns up. It
squeaks, it cannot fly, and every new kind of duck means revisiting the same
two methods, copying the code of whichever sibling happens to match.

The fix is to take what varies and encapsulate it. Flying and quacking become
families of small objects (``FlyWithWings``, ``FlyNoWay``,
``RocketPoweredFly``; ``NormalQuack``, ``Squeak``, ``MuteQuack``) behind the
``FlyBehavior`` and ``QuackBehavior`` interfaces. A ``Duck`` holds one of
each and delegates to it. It has-a behaviour instead of being-a behaviour.

Two things fall out of that. Subclasses shrink to a constructor call that
picks their strategies. And behaviour can change at runtime: hand a mallard a
rocket and the very next ``fly()`` blasts off.

Program to an interface, not an implementation; favour composition over
inheritance.
"""

from .behaviors import (
    FlyBehavior,
    FlyNoWay,
    FlyWithWings,
    MuteQuack,
    NormalQuack,
    QuackBehavior,
    RocketPoweredFly,
    Squeak,
)
from .ducks import DecoyDuck, Duck, MallardDuck, RubberDuck

__all__ = [
    "FlyBehavior",
    "FlyWithWings",
    "FlyNoWay",
    "RocketPoweredFly",
    "QuackBehavior",
    "NormalQuack",
    "Squeak",
    "MuteQuack",
    "Duck",
    "MallardDuck",
    "RubberDuck",
    "DecoyDuck",
]
