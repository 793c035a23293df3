"""Condiment decorators."""
from .beverages import Beverage


class CondimentDecorator(Beverage):
    """
    A beverage wrapping another beverage.

    Subclasses set ``name`` and ``price``; description and cost are the
    wrapped beverage's with the condiment appended and added.
    """

    name: str = ""
    price: float = 0.0

    def __init__(self, beverage: Beverage):
        super().__init__(self.name)
        self._beverage = beverage

    @property
    def beverage(self) -> Beverage:
        """The wrapped beverage."""
        return self._beverage

    @property
    def description(self) -> str:
        return f"{self._beverage.description}, {self.name}"

    def cost(self) -> float:
        return self._beverage.cost() + self.price


class Mocha(CondimentDecorator):
    name = "Mocha"
    price = 0.49


class Whip(CondimentDecorator):
    name = "Whip"
    price = 1.39


class Soy(CondimentDecorator):
    name = "Soy"
    price = 0.15


class SteamedMilk(CondimentDecorator):
    name = "Steamed Milk"
    price = 0.10
