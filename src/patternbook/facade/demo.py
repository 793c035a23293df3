"""Facade demo."""
from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .theater import HomeTheaterFacade


@demo("facade", summary="A home theatre driven through a handful of high-level calls")
def run(config: DemoConfig) -> None:
    home_theater = HomeTheaterFacade()
    home_theater.watch_movie("Raiders of the Lost Ark")
    home_theater.end_movie()

    print()

    home_theater.listen_to_radio(101.5)
    home_theater.end_radio()
