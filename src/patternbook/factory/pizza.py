"""Pizzas, the products of the pizza stores."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from .ingredients import Cheese, Clam, Dough, IngredientFactory, Pepperoni, Sauce, Veggie


class PizzaType(str, Enum):
    """Pizzas a store can be asked for."""
    CHEESE = "cheese"
    HAWAIIAN = "hawaiian"
    CLAM = "clam"


class Pizza:
    """
    Base pizza with the default bake/cut/box steps.

    Pizzas built from a fixed recipe pass their dough, sauce and toppings as
    names; pizzas built from an :class:`IngredientFactory` fill the ingredient
    attributes in :meth:`prepare` instead.
    """

    def __init__(self, name: str = "", dough: str = "", sauce: str = "", *toppings: str):
        self.name = name
        self.dough_name = dough
        self.sauce_name = sauce
        self.toppings: List[str] = list(toppings)

        self.dough: Optional[Dough] = None
        self.sauce: Optional[Sauce] = None
        self.cheese: Optional[Cheese] = None
        self.veggies: List[Veggie] = []
        self.pepperoni: Optional[Pepperoni] = None
        self.clam: Optional[Clam] = None

    def prepare(self) -> None:
        print(f"Preparing {self.name}")
        print("Tossing dough...")
        print("Adding sauce...")
        print("Adding toppings:")
        for topping in self.toppings:
            print(f"\t{topping}")

    def bake(self) -> None:
        print("Bake for 30 minutes at 350")

    def cut(self) -> None:
        print("Cutting the pizza in diagonal slices")

    def box(self) -> None:
        print("Place pizza in official PizzaStore box")

    def __str__(self) -> str:
        return self.name


class ChicagoStyleCheesePizza(Pizza):
    def __init__(self):
        super().__init__(
            "Chicago Style Deep Dish Cheese Pizza",
            "Extra Thick Crust Dough",
            "Plum Tomato Sauce",
            "Shredded Mozzarella Cheese",
        )

    def cut(self) -> None:
        print("Cutting the pizza into square slices")


class NYStyleCheesePizza(Pizza):
    def __init__(self):
        super().__init__(
            "NY Style Sauce and Cheese Pizza",
            "Thin Crust Dough",
            "Marinara Sauce",
            "Grated Reggiano Cheese",
        )


class IngredientPizza(Pizza, ABC):
    """A pizza whose ingredients come from a regional ingredient factory."""

    def __init__(self, ingredient_factory: IngredientFactory, name: str = ""):
        super().__init__(name)
        self._ingredient_factory = ingredient_factory

    def prepare(self) -> None:
        print(f"Preparing {self.name}...")
        self.gather_ingredients(self._ingredient_factory)

    @abstractmethod
    def gather_ingredients(self, factory: IngredientFactory) -> None:
        ...


class CheesePizza(IngredientPizza):
    def gather_ingredients(self, factory: IngredientFactory) -> None:
        self.dough = factory.create_dough()
        self.cheese = factory.create_cheese()
        self.sauce = factory.create_sauce()
        print(f"Type of dough: {self.dough.name}")


class HawaiianPizza(IngredientPizza):
    def gather_ingredients(self, factory: IngredientFactory) -> None:
        self.dough = factory.create_dough()
        self.sauce = factory.create_sauce()
        self.veggies = factory.create_veggies()
        self.pepperoni = factory.create_pepperoni()


class ClamPizza(IngredientPizza):
    def gather_ingredients(self, factory: IngredientFactory) -> None:
        self.dough = factory.create_dough()
        self.sauce = factory.create_sauce()
        self.cheese = factory.create_cheese()
        self.clam = factory.create_clam()
