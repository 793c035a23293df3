"""Factory Method and Abstract Factory: pizza stores and their ingredients.

``PizzaStore.order_pizza`` is the same everywhere: make a pizza, prepare it,
bake it, cut it, box it. What differs between franchises is *which* pizza
comes out of the first step. A New York cheese pizza is not a Chicago one.

Factory Method leaves that first step abstract. ``order_pizza`` calls
``create_pizza`` and works only with the ``Pizza`` it gets back; each
franchise subclass (``NYPizzaStore``, ``ChicagoPizzaStore``) overrides
``create_pizza`` to pick the concrete product. The creator knows the
workflow, the subclass knows the product.

Franchises also source their own ingredients: thin crust in New York, stuffed
crust in Chicago. An Abstract Factory, ``IngredientFactory``, groups the
creation of a whole family of related products (dough, sauce, cheese,
veggies, pepperoni, clams) behind one interface. A ``CheesePizza`` asks the
factory it was given for its ingredients and never names a concrete dough.

Depend upon abstractions. Do not depend upon concrete classes.
"""

from .ingredients import (
    ChicagoIngredientFactory,
    Ingredient,
    IngredientFactory,
    NYIngredientFactory,
)
from .pizza import (
    CheesePizza,
    ChicagoStyleCheesePizza,
    ClamPizza,
    HawaiianPizza,
    NYStyleCheesePizza,
    Pizza,
    PizzaType,
)
from .stores import ChicagoPizzaStore, NYPizzaStore, PizzaStore

__all__ = [
    "Ingredient",
    "IngredientFactory",
    "NYIngredientFactory",
    "ChicagoIngredientFactory",
    "Pizza",
    "PizzaType",
    "CheesePizza",
    "HawaiianPizza",
    "ClamPizza",
    "ChicagoStyleCheesePizza",
    "NYStyleCheesePizza",
    "PizzaStore",
    "NYPizzaStore",
    "ChicagoPizzaStore",
]
