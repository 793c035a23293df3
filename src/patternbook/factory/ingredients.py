"""Ingredient families and the abstract factory that creates them."""
from abc import ABC, abstractmethod
from typing import List


class Ingredient:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"

    def __str__(self) -> str:
        return self.name


class Dough(Ingredient):
    pass


class ThinCrustDough(Dough):
    def __init__(self):
        super().__init__("Thin Crust Dough")


class StuffedCrustDough(Dough):
    def __init__(self):
        super().__init__("Stuffed Crust Dough")


class ExtraThickCrustDough(Dough):
    def __init__(self):
        super().__init__("Extra Thick Crust Dough")


class Sauce(Ingredient):
    pass


class MarinaraSauce(Sauce):
    def __init__(self):
        super().__init__("Marinara Sauce")


class PlumTomatoSauce(Sauce):
    def __init__(self):
        super().__init__("Plum Tomato Sauce")


class Cheese(Ingredient):
    pass


class BlueCheese(Cheese):
    def __init__(self):
        super().__init__("Blue Cheese")


class ReggianoCheese(Cheese):
    def __init__(self):
        super().__init__("Reggiano Cheese")


class MozzarellaCheese(Cheese):
    def __init__(self):
        super().__init__("Shredded Mozzarella Cheese")


class Veggie(Ingredient):
    pass


class Broccoli(Veggie):
    def __init__(self):
        super().__init__("Broccoli")


class Onion(Veggie):
    def __init__(self):
        super().__init__("Onion")


class Pepperoni(Ingredient):
    def __init__(self):
        super().__init__("Sliced Pepperoni")


class Clam(Ingredient):
    pass


class FreshClams(Clam):
    def __init__(self):
        super().__init__("Fresh Clams")


class FrozenClams(Clam):
    def __init__(self):
        super().__init__("Frozen Clams")


class IngredientFactory(ABC):
    """Creates one regional family of ingredients."""

    @abstractmethod
    def create_dough(self) -> Dough:
        ...

    @abstractmethod
    def create_sauce(self) -> Sauce:
        ...

    @abstractmethod
    def create_cheese(self) -> Cheese:
        ...

    @abstractmethod
    def create_veggies(self) -> List[Veggie]:
        ...

    @abstractmethod
    def create_pepperoni(self) -> Pepperoni:
        ...

    @abstractmethod
    def create_clam(self) -> Clam:
        ...


class NYIngredientFactory(IngredientFactory):
    def create_dough(self) -> Dough:
        return ThinCrustDough()

    def create_sauce(self) -> Sauce:
        return MarinaraSauce()

    def create_cheese(self) -> Cheese:
        return ReggianoCheese()

    def create_veggies(self) -> List[Veggie]:
        return [Broccoli()]

    def create_pepperoni(self) -> Pepperoni:
        return Pepperoni()

    def create_clam(self) -> Clam:
        # Close to the coast
        return FreshClams()


class ChicagoIngredientFactory(IngredientFactory):
    def create_dough(self) -> Dough:
        return StuffedCrustDough()

    def create_sauce(self) -> Sauce:
        return PlumTomatoSauce()

    def create_cheese(self) -> Cheese:
        return BlueCheese()

    def create_veggies(self) -> List[Veggie]:
        return [Broccoli(), Broccoli()]

    def create_pepperoni(self) -> Pepperoni:
        return Pepperoni()

    def create_clam(self) -> Clam:
        return FrozenClams()
