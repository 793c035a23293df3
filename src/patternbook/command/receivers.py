"""Vendor classes the remote ends up controlling."""
from enum import IntEnum


class Light:
    def __init__(self, location: str = ""):
        self.location = location
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print(f"{self.location} light is on".strip())

    def off(self) -> None:
        self.is_on = False
        print(f"{self.location} light is off".strip())


class FanSpeed(IntEnum):
    OFF = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class CeilingFan:
    def __init__(self, location: str = ""):
        self.location = location
        self.speed = FanSpeed.OFF

    def high(self) -> None:
        self._set_speed(FanSpeed.HIGH)

    def medium(self) -> None:
        self._set_speed(FanSpeed.MEDIUM)

    def low(self) -> None:
        self._set_speed(FanSpeed.LOW)

    def off(self) -> None:
        self._set_speed(FanSpeed.OFF)

    def set_speed(self, speed: FanSpeed) -> None:
        self._set_speed(FanSpeed(speed))

    def _set_speed(self, speed: FanSpeed) -> None:
        self.speed = speed
        if speed == FanSpeed.OFF:
            print(f"{self.location} ceiling fan is off".strip())
        else:
            print(f"{self.location} ceiling fan is on {speed.name.lower()}".strip())


class GarageDoor:
    def __init__(self, location: str = ""):
        self.location = location
        self.is_open = False
        self.light_on = False

    def up(self) -> None:
        self.is_open = True
        print(f"{self.location} garage door is open".strip())

    def down(self) -> None:
        self.is_open = False
        print(f"{self.location} garage door is closed".strip())

    def lights_on(self) -> None:
        self.light_on = True
        print(f"{self.location} garage light is on".strip())

    def lights_off(self) -> None:
        self.light_on = False
        print(f"{self.location} garage light is off".strip())


class Stereo:
    def __init__(self, location: str = ""):
        self.location = location
        self.is_on = False
        self.source = ""
        self.volume = 0

    def on(self) -> None:
        self.is_on = True
        print(f"{self.location} stereo is on".strip())

    def off(self) -> None:
        self.is_on = False
        print(f"{self.location} stereo is off".strip())

    def set_cd(self) -> None:
        self.source = "CD"
        print(f"{self.location} stereo is set for CD input".strip())

    def set_volume(self, volume: int) -> None:
        self.volume = volume
        print(f"{self.location} stereo volume set to {volume}".strip())
