"""Tests for the remote control and its commands."""
import pytest

from patternbook.command import (
    CeilingFan,
    CeilingFanHighCommand,
    CeilingFanMediumCommand,
    CeilingFanOffCommand,
    FanSpeed,
    GarageDoor,
    GarageDoorDownCommand,
    GarageDoorUpCommand,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    NoCommand,
    RemoteControl,
    SimpleRemoteControl,
    Stereo,
    StereoOffCommand,
    StereoOnWithCDCommand,
)
from patternbook.core.exceptions import SlotOutOfRangeError, ValidationError


class TestSimpleRemoteControl:
    def test_unprogrammed_button_does_nothing(self, capsys):
        SimpleRemoteControl().button_was_pressed()
        assert capsys.readouterr().out == ""

    def test_button_executes_command(self, capsys):
        remote = SimpleRemoteControl()
        light = Light("Garden")
        remote.set_command(LightOnCommand(light))
        remote.button_was_pressed()
        assert light.is_on
        assert capsys.readouterr().out == "Garden light is on\n"


class TestRemoteControl:
    def test_slots_start_with_no_command(self, capsys):
        remote = RemoteControl(slots=3)
        for slot in range(3):
            remote.on_button_was_pushed(slot)
            remote.off_button_was_pushed(slot)
        remote.undo_button_was_pushed()
        assert capsys.readouterr().out == ""
        assert isinstance(remote.undo_command, NoCommand)

    def test_on_off_and_undo(self):
        remote = RemoteControl()
        light = Light("Kitchen")
        remote.set_command(0, LightOnCommand(light), LightOffCommand(light))

        remote.on_button_was_pushed(0)
        assert light.is_on
        remote.off_button_was_pushed(0)
        assert not light.is_on
        remote.undo_button_was_pushed()
        assert light.is_on

    def test_undo_only_reverses_once(self):
        remote = RemoteControl()
        door = GarageDoor()
        remote.set_command(1, GarageDoorUpCommand(door), GarageDoorDownCommand(door))

        remote.on_button_was_pushed(1)
        remote.undo_button_was_pushed()
        remote.undo_button_was_pushed()

        assert not door.is_open

    def test_ceiling_fan_undo_restores_previous_speed(self):
        remote = RemoteControl()
        fan = CeilingFan("Living Room")
        remote.set_command(0, CeilingFanMediumCommand(fan), CeilingFanOffCommand(fan))
        remote.set_command(1, CeilingFanHighCommand(fan), CeilingFanOffCommand(fan))

        remote.on_button_was_pushed(0)
        remote.on_button_was_pushed(1)
        assert fan.speed == FanSpeed.HIGH

        remote.undo_button_was_pushed()
        assert fan.speed == FanSpeed.MEDIUM

    def test_missing_off_command_becomes_no_command(self, capsys):
        remote = RemoteControl()
        remote.set_command(0, LightOnCommand(Light("Hall")))
        remote.off_button_was_pushed(0)
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("slot", [-1, 7, 100])
    def test_out_of_range_slot(self, slot):
        remote = RemoteControl()
        with pytest.raises(SlotOutOfRangeError) as exc_info:
            remote.on_button_was_pushed(slot)
        assert exc_info.value.slot == slot
        assert exc_info.value.slots == 7

    def test_out_of_range_slot_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            RemoteControl(slots=2).set_command(2, NoCommand(), NoCommand())

    def test_needs_at_least_one_slot(self):
        with pytest.raises(ValidationError):
            RemoteControl(slots=0)

    def test_describe(self):
        remote = RemoteControl(slots=2)
        light = Light("Kitchen")
        remote.set_command(0, LightOnCommand(light), LightOffCommand(light))
        remote.on_button_was_pushed(0)

        assert remote.describe().splitlines() == [
            "------ Remote Control -------",
            "[slot 0] LightOnCommand    LightOffCommand",
            "[slot 1] NoCommand    NoCommand",
            "[undo] LightOnCommand",
        ]


class TestMacroCommand:
    def test_executes_in_order_and_undoes_in_reverse(self, capsys):
        light = Light("Living Room")
        stereo = Stereo("Living Room")
        macro = MacroCommand([LightOnCommand(light), StereoOnWithCDCommand(stereo, volume=7)])

        macro.execute()
        assert light.is_on and stereo.is_on
        assert stereo.volume == 7

        capsys.readouterr()
        macro.undo()
        assert capsys.readouterr().out.splitlines() == [
            "Living Room stereo is off",
            "Living Room light is off",
        ]

    def test_str_lists_commands(self):
        stereo = Stereo()
        macro = MacroCommand([StereoOnWithCDCommand(stereo), StereoOffCommand(stereo)])
        assert str(macro) == "MacroCommand[StereoOnWithCDCommand, StereoOffCommand]"
