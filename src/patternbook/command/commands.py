"""Commands binding a receiver to the calls the remote should make."""
from abc import ABC, abstractmethod
from typing import Iterable, List

from .receivers import CeilingFan, FanSpeed, GarageDoor, Light, Stereo


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        ...

    def undo(self) -> None:
        """Reverse :meth:`execute`. Commands with nothing to reverse keep this."""

    def __str__(self) -> str:
        return type(self).__name__


class NoCommand(Command):
    """Null object for unprogrammed slots."""

    def execute(self) -> None:
        pass


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


class _CeilingFanCommand(Command):
    """Sets a fan speed and remembers the previous one for undo."""

    target_speed = FanSpeed.OFF

    def __init__(self, fan: CeilingFan):
        self.fan = fan
        self.previous_speed = fan.speed

    def execute(self) -> None:
        self.previous_speed = self.fan.speed
        self.fan.set_speed(self.target_speed)

    def undo(self) -> None:
        self.fan.set_speed(self.previous_speed)


class CeilingFanHighCommand(_CeilingFanCommand):
    target_speed = FanSpeed.HIGH


class CeilingFanMediumCommand(_CeilingFanCommand):
    target_speed = FanSpeed.MEDIUM


class CeilingFanOffCommand(_CeilingFanCommand):
    target_speed = FanSpeed.OFF


class GarageDoorUpCommand(Command):
    def __init__(self, door: GarageDoor):
        self.door = door

    def execute(self) -> None:
        self.door.up()

    def undo(self) -> None:
        self.door.down()


class GarageDoorDownCommand(Command):
    def __init__(self, door: GarageDoor):
        self.door = door

    def execute(self) -> None:
        self.door.down()

    def undo(self) -> None:
        self.door.up()


class StereoOnWithCDCommand(Command):
    def __init__(self, stereo: Stereo, volume: int = 11):
        self.stereo = stereo
        self.volume = volume

    def execute(self) -> None:
        self.stereo.on()
        self.stereo.set_cd()
        self.stereo.set_volume(self.volume)

    def undo(self) -> None:
        self.stereo.off()


class StereoOffCommand(Command):
    def __init__(self, stereo: Stereo):
        self.stereo = stereo

    def execute(self) -> None:
        self.stereo.off()

    def undo(self) -> None:
        self.stereo.on()


class MacroCommand(Command):
    """Runs several commands as one; undo walks them backwards."""

    def __init__(self, commands: Iterable[Command]):
        self.commands: List[Command] = list(commands)

    def execute(self) -> None:
        for command in self.commands:
            command.execute()

    def undo(self) -> None:
        for command in reversed(self.commands):
            command.undo()

    def __str__(self) -> str:
        return f"MacroCommand[{', '.join(str(command) for command in self.commands)}]"
