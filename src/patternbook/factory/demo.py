"""Factory demo."""
from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .pizza import PizzaType
from .stores import ChicagoPizzaStore, NYPizzaStore, PizzaStore


@demo("factory", summary="Pizza stores deferring pizza creation to regional subclasses")
def run(config: DemoConfig) -> None:
    ny_store: PizzaStore = NYPizzaStore()
    ny_store.order_pizza(PizzaType.CHEESE)

    print()

    chicago_store: PizzaStore = ChicagoPizzaStore()
    chicago_store.order_pizza("cheese")
