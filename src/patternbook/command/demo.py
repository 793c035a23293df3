"""Command demo."""
from patternbook.config.schemas import DemoConfig
from patternbook.registry import demo

from .commands import (
    CeilingFanHighCommand,
    CeilingFanMediumCommand,
    CeilingFanOffCommand,
    GarageDoorDownCommand,
    GarageDoorUpCommand,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    StereoOffCommand,
    StereoOnWithCDCommand,
)
from .receivers import CeilingFan, GarageDoor, Light, Stereo
from .remote import RemoteControl, SimpleRemoteControl


@demo("command", summary="A remote control invoking commands, with undo and a null command")
def run(config: DemoConfig) -> None:
    print("-- Simple remote --")
    simple = SimpleRemoteControl()
    simple.button_was_pressed()
    simple.set_command(LightOnCommand(Light("Garden")))
    simple.button_was_pressed()

    remote = RemoteControl(config.remote_slots)
    living_room_light = Light("Living Room")
    kitchen_light = Light("Kitchen")
    ceiling_fan = CeilingFan("Living Room")
    garage_door = GarageDoor("Main house")
    stereo = Stereo("Living Room")

    assignments = [
        (LightOnCommand(living_room_light), LightOffCommand(living_room_light)),
        (LightOnCommand(kitchen_light), LightOffCommand(kitchen_light)),
        (CeilingFanHighCommand(ceiling_fan), CeilingFanOffCommand(ceiling_fan)),
        (CeilingFanMediumCommand(ceiling_fan), CeilingFanOffCommand(ceiling_fan)),
        (GarageDoorUpCommand(garage_door), GarageDoorDownCommand(garage_door)),
        (StereoOnWithCDCommand(stereo), StereoOffCommand(stereo)),
    ]
    for slot, (on_command, off_command) in enumerate(assignments[: remote.slots]):
        remote.set_command(slot, on_command, off_command)

    print("-- Programmed remote --")
    print(remote.describe())
    for slot in range(remote.slots):
        remote.on_button_was_pushed(slot)
        remote.off_button_was_pushed(slot)

    print("-- Undo --")
    if remote.slots > 3:
        remote.on_button_was_pushed(2)
        remote.on_button_was_pushed(3)
        remote.undo_button_was_pushed()

    print("-- Party mode macro --")
    party_on = MacroCommand([LightOnCommand(living_room_light), StereoOnWithCDCommand(stereo)])
    party_off = MacroCommand([LightOffCommand(living_room_light), StereoOffCommand(stereo)])
    remote.set_command(remote.slots - 1, party_on, party_off)
    remote.on_button_was_pushed(remote.slots - 1)
    remote.undo_button_was_pushed()
