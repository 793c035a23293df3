"""Fly and quack strategy families."""
from abc import ABC, abstractmethod


class FlyBehavior(ABC):
    """How a duck flies."""

    @abstractmethod
    def fly(self, name: str) -> None:
        ...


class FlyWithWings(FlyBehavior):
    def fly(self, name: str) -> None:
        print(f"{name} is flapping its wings in the air!")


class FlyNoWay(FlyBehavior):
    def fly(self, name: str) -> None:
        print(f"{name} cannot fly! :(")


class RocketPoweredFly(FlyBehavior):
    def fly(self, name: str) -> None:
        print(f"{name} is blasting off!")


class QuackBehavior(ABC):
    """How a duck makes noise."""

    @abstractmethod
    def quack(self, name: str) -> None:
        ...


class NormalQuack(QuackBehavior):
    def quack(self, name: str) -> None:
        print(f"{name} goes quack quack!")


class Squeak(QuackBehavior):
    def quack(self, name: str) -> None:
        print(f"{name} can't quack, but it can sure squeak!")


class MuteQuack(QuackBehavior):
    def quack(self, name: str) -> None:
        print(f"{name} says nothing.")
