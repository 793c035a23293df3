"""Pizza stores: the Factory Method creators."""
from abc import ABC, abstractmethod
from typing import Optional, Union

from patternbook.core.exceptions import UnknownProductError
from patternbook.infrastructure.logging.logger import get_logger

from .ingredients import ChicagoIngredientFactory, IngredientFactory, NYIngredientFactory
from .pizza import CheesePizza, ChicagoStyleCheesePizza, ClamPizza, HawaiianPizza, Pizza, PizzaType


class PizzaStore(ABC):
    """Owns the ordering workflow; subclasses decide which pizza to make."""

    def __init__(self):
        self._logger = get_logger(__name__)

    def order_pizza(self, pizza_type: Union[PizzaType, str]) -> Pizza:
        """
        Create, prepare, bake, cut and box a pizza.

        Args:
            pizza_type: A PizzaType or its value, e.g. ``"cheese"``

        Returns:
            The boxed pizza

        Raises:
            UnknownProductError: If the store does not make that pizza
        """
        kind = self._parse_type(pizza_type)
        pizza = self.create_pizza(kind)
        self._logger.debug(f"{type(self).__name__} created {type(pizza).__name__} for '{kind.value}'")

        pizza.prepare()
        pizza.bake()
        pizza.cut()
        pizza.box()
        return pizza

    @abstractmethod
    def create_pizza(self, pizza_type: PizzaType) -> Pizza:
        """The factory method."""

    def _parse_type(self, pizza_type: Union[PizzaType, str]) -> PizzaType:
        if isinstance(pizza_type, PizzaType):
            return pizza_type
        try:
            return PizzaType(str(pizza_type).strip().lower())
        except ValueError as e:
            raise UnknownProductError(type(self).__name__, pizza_type) from e


class NYPizzaStore(PizzaStore):
    def __init__(self, ingredient_factory: Optional[IngredientFactory] = None):
        super().__init__()
        self._ingredients = ingredient_factory or NYIngredientFactory()

    def create_pizza(self, pizza_type: PizzaType) -> Pizza:
        if pizza_type == PizzaType.CHEESE:
            return CheesePizza(self._ingredients, "New York Style Cheese Pizza")
        if pizza_type == PizzaType.HAWAIIAN:
            return HawaiianPizza(self._ingredients, "New York Style Hawaiian Pizza")
        if pizza_type == PizzaType.CLAM:
            return ClamPizza(self._ingredients, "New York Style Clam Pizza")
        raise UnknownProductError(type(self).__name__, pizza_type.value)


class ChicagoPizzaStore(PizzaStore):
    def __init__(self, ingredient_factory: Optional[IngredientFactory] = None):
        super().__init__()
        self._ingredients = ingredient_factory or ChicagoIngredientFactory()

    def create_pizza(self, pizza_type: PizzaType) -> Pizza:
        if pizza_type == PizzaType.CHEESE:
            return ChicagoStyleCheesePizza()
        if pizza_type == PizzaType.HAWAIIAN:
            return HawaiianPizza(self._ingredients, "Chicago Style Hawaiian Pizza")
        raise UnknownProductError(type(self).__name__, pizza_type.value)
