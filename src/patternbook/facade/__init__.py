"""Facade: a home theatre behind a few buttons.

Watching a movie at home takes a dozen calls across half a dozen devices:
dim the lights, lower the screen, start the projector and put it in wide
screen mode, switch the amplifier to the streaming player, set surround
sound and a volume, start the popcorn, play. Ending the movie is the same
dance in reverse. Every client repeating that sequence is coupled to every
device.

``HomeTheaterFacade`` holds the subsystem components and offers a handful
of high-level operations: ``watch_movie``, ``end_movie``,
``listen_to_radio``, ``end_radio``. The subsystems stay fully available to
anyone who needs the fine-grained controls; the facade just makes the common
case simple.

Principle of least knowledge: talk only to your immediate friends.
"""

from .components import (
    Amplifier,
    PopcornPopper,
    Projector,
    Screen,
    StreamingPlayer,
    TheaterLights,
    Tuner,
)
from .theater import HomeTheaterFacade

__all__ = [
    "Amplifier",
    "Tuner",
    "StreamingPlayer",
    "Projector",
    "Screen",
    "TheaterLights",
    "PopcornPopper",
    "HomeTheaterFacade",
]
