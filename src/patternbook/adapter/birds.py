"""Ducks, turkeys and the adapters between them."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Duck(Protocol):
    def quack(self) -> None:
        ...

    def fly(self) -> None:
        ...


@runtime_checkable
class Turkey(Protocol):
    def gobble(self) -> None:
        ...

    def fly(self) -> None:
        ...


class MallardDuck:
    def quack(self) -> None:
        print("Quack quack!")

    def fly(self) -> None:
        print("Mallard ducks assemble and fly!")


class ThanksgivingTurkey:
    def gobble(self) -> None:
        print("Gobble gobble!")

    def fly(self) -> None:
        print("I'm flying a short distance")


class TurkeyAdapter:
    """Makes a Turkey usable wherever a Duck is expected."""

    def __init__(self, turkey: Turkey):
        self._turkey = turkey

    def quack(self) -> None:
        self._turkey.gobble()

    def fly(self) -> None:
        print("Turkeys cannot fly!")


class DuckAdapter:
    """Makes a Duck usable wherever a Turkey is expected."""

    FLY_EVERY = 5

    def __init__(self, duck: Duck):
        self._duck = duck
        self._fly_calls = 0

    def gobble(self) -> None:
        self._duck.quack()

    def fly(self) -> None:
        # Ducks fly much further; only pass on every fifth call
        self._fly_calls += 1
        if self._fly_calls % self.FLY_EVERY == 0:
            self._duck.fly()
