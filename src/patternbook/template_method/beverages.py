"""Caffeine beverages sharing one recipe."""
from abc import ABC, abstractmethod
from typing import Callable, Optional


class CaffeineBeverage(ABC):
    def prepare_recipe(self) -> None:
        """The template method. Subclasses must not override it."""
        self.boil_water()
        self.brew()
        self.pour_in_cup()
        if self.customer_wants_condiments():
            self.add_condiments()

    def boil_water(self) -> None:
        print("Boiling water")

    @abstractmethod
    def brew(self) -> None:
        ...

    def pour_in_cup(self) -> None:
        print("Pouring into cup")

    @abstractmethod
    def add_condiments(self) -> None:
        ...

    def customer_wants_condiments(self) -> bool:
        """Hook, subclasses may override."""
        return True


class Coffee(CaffeineBeverage):
    """
    Coffee that asks before adding milk and creamer.

    Args:
        ask: Reads the customer's answer; defaults to :func:`input`
    """

    def __init__(self, ask: Optional[Callable[[], str]] = None):
        self._ask = ask or input

    def brew(self) -> None:
        print("Brewing coffee")

    def add_condiments(self) -> None:
        print("Adding milk")
        print("Adding creamer")

    def customer_wants_condiments(self) -> bool:
        print("Do you wish to add condiments?")
        try:
            answer = self._ask()
        except EOFError:
            answer = ""
        return answer.strip().lower() == "yes"


class Tea(CaffeineBeverage):
    def brew(self) -> None:
        print("Steeping the tea")

    def add_condiments(self) -> None:
        print("Adding lemon")
