"""The inheritance-only design that the strategy version replaces.

Every subclass must implement both methods, so shared behaviour is copied
between siblings and cannot change at runtime.
"""
from abc import ABC, abstractmethod


class AbstractDuck(ABC):
    name: str = ""

    @abstractmethod
    def quack(self) -> None:
        ...

    @abstractmethod
    def fly(self) -> None:
        ...


class InheritedMallardDuck(AbstractDuck):
    def __init__(self):
        self.name = "Mallard"

    def quack(self) -> None:
        print(f"{self.name} says quack!")

    def fly(self) -> None:
        print(f"{self.name} can fly!")
