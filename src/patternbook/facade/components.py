"""The home theatre subsystem."""
from typing import Optional


class Tuner:
    def __init__(self, description: str = "Top-O-Line AM/FM Tuner"):
        self.description = description
        self.frequency = 0.0
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print(f"{self.description} on")

    def off(self) -> None:
        self.is_on = False
        print(f"{self.description} off")

    def set_frequency(self, frequency: float) -> None:
        self.frequency = frequency
        print(f"{self.description} setting frequency to {frequency}")

    def __str__(self) -> str:
        return self.description


class StreamingPlayer:
    def __init__(self, description: str = "Top-O-Line Streaming Player"):
        self.description = description
        self.movie: Optional[str] = None
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print(f"{self.description} on")

    def off(self) -> None:
        self.is_on = False
        print(f"{self.description} off")

    def play(self, movie: str) -> None:
        self.movie = movie
        print(f'{self.description} playing "{movie}"')

    def stop(self) -> None:
        print(f'{self.description} stopped "{self.movie}"')
        self.movie = None

    def __str__(self) -> str:
        return self.description


class Amplifier:
    def __init__(self, description: str = "Top-O-Line Amplifier"):
        self.description = description
        self.input_source: Optional[object] = None
        self.volume = 0
        self.surround = False
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print(f"{self.description} on")

    def off(self) -> None:
        self.is_on = False
        print(f"{self.description} off")

    def set_streaming_player(self, player: StreamingPlayer) -> None:
        self.input_source = player
        print(f"{self.description} setting Streaming player to {player}")

    def set_tuner(self, tuner: Tuner) -> None:
        self.input_source = tuner
        print(f"{self.description} setting tuner to {tuner}")

    def set_surround_sound(self) -> None:
        self.surround = True
        print(f"{self.description} surround sound on (5 speakers, 1 subwoofer)")

    def set_stereo_sound(self) -> None:
        self.surround = False
        print(f"{self.description} stereo mode on")

    def set_volume(self, volume: int) -> None:
        self.volume = volume
        print(f"{self.description} setting volume to {volume}")


class Projector:
    def __init__(self, description: str = "Top-O-Line Projector"):
        self.description = description
        self.is_on = False
        self.mode = "standard"

    def on(self) -> None:
        self.is_on = True
        print(f"{self.description} on")

    def off(self) -> None:
        self.is_on = False
        print(f"{self.description} off")

    def wide_screen_mode(self) -> None:
        self.mode = "widescreen"
        print(f"{self.description} in widescreen mode (16x9 aspect ratio)")


class Screen:
    def __init__(self, description: str = "Theater Screen"):
        self.description = description
        self.is_down = False

    def down(self) -> None:
        self.is_down = True
        print(f"{self.description} going down")

    def up(self) -> None:
        self.is_down = False
        print(f"{self.description} going up")


class TheaterLights:
    def __init__(self, description: str = "Theater Ceiling Lights"):
        self.description = description
        self.level = 100

    def on(self) -> None:
        self.level = 100
        print(f"{self.description} on")

    def off(self) -> None:
        self.level = 0
        print(f"{self.description} off")

    def dim(self, level: int) -> None:
        self.level = level
        print(f"{self.description} dimming to {level}%")


class PopcornPopper:
    def __init__(self, description: str = "Popcorn Popper"):
        self.description = description
        self.is_on = False
        self.popping = False

    def on(self) -> None:
        self.is_on = True
        print(f"{self.description} on")

    def off(self) -> None:
        self.is_on = False
        self.popping = False
        print(f"{self.description} off")

    def pop(self) -> None:
        self.popping = True
        print(f"{self.description} popping popcorn!")
