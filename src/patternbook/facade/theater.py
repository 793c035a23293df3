"""The facade over the home theatre components."""
from typing import Optional

from .components import (
    Amplifier,
    PopcornPopper,
    Projector,
    Screen,
    StreamingPlayer,
    TheaterLights,
    Tuner,
)


class HomeTheaterFacade:
    """
    One-call operations over the home theatre.

    Every component can be injected; any left out gets a default instance.
    """

    def __init__(
        self,
        amp: Optional[Amplifier] = None,
        tuner: Optional[Tuner] = None,
        player: Optional[StreamingPlayer] = None,
        projector: Optional[Projector] = None,
        screen: Optional[Screen] = None,
        lights: Optional[TheaterLights] = None,
        popper: Optional[PopcornPopper] = None,
    ):
        self.amp = amp or Amplifier()
        self.tuner = tuner or Tuner()
        self.player = player or StreamingPlayer()
        self.projector = projector or Projector()
        self.screen = screen or Screen()
        self.lights = lights or TheaterLights()
        self.popper = popper or PopcornPopper()

    def watch_movie(self, movie: str) -> None:
        print("Get ready to watch a movie...")
        self.popper.on()
        self.popper.pop()
        self.lights.dim(10)
        self.screen.down()
        self.projector.on()
        self.projector.wide_screen_mode()
        self.amp.on()
        self.amp.set_streaming_player(self.player)
        self.amp.set_surround_sound()
        self.amp.set_volume(5)
        self.player.on()
        self.player.play(movie)

    def end_movie(self) -> None:
        print("Shutting movie theater down...")
        self.popper.off()
        self.lights.on()
        self.screen.up()
        self.projector.off()
        self.amp.off()
        self.player.stop()
        self.player.off()

    def listen_to_radio(self, frequency: float) -> None:
        print("Tuning in the airwaves...")
        self.tuner.on()
        self.tuner.set_frequency(frequency)
        self.amp.on()
        self.amp.set_volume(5)
        self.amp.set_tuner(self.tuner)

    def end_radio(self) -> None:
        print("Shutting down the tuner...")
        self.tuner.off()
        self.amp.off()
