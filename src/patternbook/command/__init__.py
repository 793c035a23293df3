"""Command: a programmable remote control.

The remote has a row of on/off button pairs and an undo button. The things
it controls (lights, ceiling fans, garage doors, stereos) share no interface
at all: one has ``on()``, another ``set_speed()``, another ``up()``. A remote
that knew every vendor class would need editing for every new gadget.

A command object packages a receiver together with the calls to make on it,
behind ``execute()`` and ``undo()``. The remote only holds commands and
presses them; it has no idea what a light is. Commands that change state
remember enough to reverse themselves, so the remote can undo the last
button pressed. ``MacroCommand`` strings commands together and undoes them
in reverse order.

Slots that nobody has programmed hold a ``NoCommand``. Without it every
button press would need an "is there a command here?" check, and forgetting
it once means dereferencing nothing. A null object that does nothing removes
the check and the crash.
"""

from .commands import (
    CeilingFanHighCommand,
    CeilingFanMediumCommand,
    CeilingFanOffCommand,
    Command,
    GarageDoorDownCommand,
    GarageDoorUpCommand,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    NoCommand,
    StereoOffCommand,
    StereoOnWithCDCommand,
)
from .receivers import CeilingFan, FanSpeed, GarageDoor, Light, Stereo
from .remote import RemoteControl, SimpleRemoteControl

__all__ = [
    "Light",
    "CeilingFan",
    "FanSpeed",
    "GarageDoor",
    "Stereo",
    "Command",
    "NoCommand",
    "LightOnCommand",
    "LightOffCommand",
    "CeilingFanHighCommand",
    "CeilingFanMediumCommand",
    "CeilingFanOffCommand",
    "GarageDoorUpCommand",
    "GarageDoorDownCommand",
    "StereoOnWithCDCommand",
    "StereoOffCommand",
    "MacroCommand",
    "SimpleRemoteControl",
    "RemoteControl",
]
