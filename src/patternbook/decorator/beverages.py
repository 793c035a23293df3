"""Beverages that condiments can decorate."""
from abc import ABC, abstractmethod


class Beverage(ABC):
    """A drink with a description and a price."""

    def __init__(self, description: str = "Unknown Beverage"):
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    @abstractmethod
    def cost(self) -> float:
        ...

    def __str__(self) -> str:
        return f"{self.description} {self.cost():.2f}"


class Espresso(Beverage):
    def __init__(self):
        super().__init__("Espresso")

    def cost(self) -> float:
        return 1.99


class HotBlend(Beverage):
    def __init__(self):
        super().__init__("Hot Blend")

    def cost(self) -> float:
        return 0.89


class DarkRoast(Beverage):
    def __init__(self):
        super().__init__("Dark Roast")

    def cost(self) -> float:
        return 0.99


class Decaf(Beverage):
    def __init__(self):
        super().__init__("Decaf")

    def cost(self) -> float:
        return 1.05
