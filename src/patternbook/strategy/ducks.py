"""Ducks composed from behaviours."""
from .behaviors import (
    FlyBehavior,
    FlyNoWay,
    FlyWithWings,
    MuteQuack,
    NormalQuack,
    QuackBehavior,
    Squeak,
)


class Duck:
    """
    A duck that delegates flying and quacking to its strategies.

    Subclasses only choose the initial strategies; both can be replaced
    at runtime with :meth:`set_fly_behavior` and :meth:`set_quack_behavior`.
    """

    def __init__(self, name: str, fly_behavior: FlyBehavior, quack_behavior: QuackBehavior):
        self._name = name
        self._fly_behavior = fly_behavior
        self._quack_behavior = quack_behavior

    @property
    def name(self) -> str:
        return self._name

    @property
    def fly_behavior(self) -> FlyBehavior:
        return self._fly_behavior

    @property
    def quack_behavior(self) -> QuackBehavior:
        return self._quack_behavior

    def quack(self) -> None:
        self._quack_behavior.quack(self._name)

    def fly(self) -> None:
        self._fly_behavior.fly(self._name)

    def set_fly_behavior(self, fly_behavior: FlyBehavior) -> None:
        self._fly_behavior = fly_behavior

    def set_quack_behavior(self, quack_behavior: QuackBehavior) -> None:
        self._quack_behavior = quack_behavior

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"fly={type(self._fly_behavior).__name__}, "
            f"quack={type(self._quack_behavior).__name__})"
        )


class MallardDuck(Duck):
    def __init__(self):
        super().__init__("Mallard", FlyWithWings(), NormalQuack())


class RubberDuck(Duck):
    def __init__(self):
        super().__init__("Rubber", FlyNoWay(), Squeak())


class DecoyDuck(Duck):
    def __init__(self):
        super().__init__("Decoy", FlyNoWay(), MuteQuack())
