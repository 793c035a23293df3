"""Decorator: condiments wrapping beverages.

A coffee shop sells beverages and a growing list of condiments. Giving every
combination its own subclass (``EspressoWithMochaAndWhip``...) explodes the
class count, and putting a flag per condiment on ``Beverage`` means editing
the base class for every new topping.

A decorator has the same type as the object it wraps. ``Mocha(HotBlend())``
is still a ``Beverage``: asked for its cost it asks the hot blend and adds
its own price, asked for its description it appends ", Mocha". Decorators
can wrap decorators, so ``Whip(Mocha(HotBlend()))`` costs
0.89 + 0.49 + 1.39 and describes itself as "Hot Blend, Mocha, Whip". The
order of wrapping is the order the condiments show up in the description.

Python's own I/O stack is built the same way: a buffered reader wraps a raw
file, a text wrapper wraps the buffered reader. ``LowerCaseInputStream``
slots into that chain and lower-cases whatever passes through it.

Classes should be open for extension, but closed for modification.
"""

from .beverages import Beverage, DarkRoast, Decaf, Espresso, HotBlend
from .condiments import CondimentDecorator, Mocha, Soy, SteamedMilk, Whip
from .streams import LowerCaseInputStream

__all__ = [
    "Beverage",
    "Espresso",
    "HotBlend",
    "DarkRoast",
    "Decaf",
    "CondimentDecorator",
    "Mocha",
    "Whip",
    "Soy",
    "SteamedMilk",
    "LowerCaseInputStream",
]
