"""Decorator demo."""
import io

from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .beverages import Beverage, Espresso, HotBlend
from .condiments import Mocha, Whip
from .streams import LowerCaseInputStream


@demo("decorator", summary="Condiments wrapping beverages, and a lower-casing input stream")
def run(config: DemoConfig) -> None:
    # Undecorated item
    espresso: Beverage = Espresso()
    print(espresso)

    # Decorated item
    hot_blend: Beverage = HotBlend()
    hot_blend = Mocha(hot_blend)
    hot_blend = Whip(hot_blend)
    print(hot_blend)

    print("-- java.io style stream decorator --")
    source = io.BytesIO(b"I know the Decorator Pattern therefore I RULE!")
    with io.TextIOWrapper(io.BufferedReader(LowerCaseInputStream(source)), encoding="ascii") as text:
        print(text.read())
