"""Remote controls: the command invokers."""
from typing import List, Optional

from patternbook.core.exceptions import SlotOutOfRangeError, ValidationError
from patternbook.infrastructure.logging.logger import get_logger

from .commands import Command, NoCommand


class SimpleRemoteControl:
    """One slot, one button."""

    def __init__(self):
        self.slot: Command = NoCommand()

    def set_command(self, command: Command) -> None:
        self.slot = command

    def button_was_pressed(self) -> None:
        self.slot.execute()


class RemoteControl:
    """
    A remote with ``slots`` on/off button pairs and a single undo button.

    Every slot starts out holding :class:`NoCommand`, so pressing an
    unprogrammed button is harmless. Undo reverses the last button pressed.
    """

    DEFAULT_SLOTS = 7

    def __init__(self, slots: int = DEFAULT_SLOTS):
        if slots < 1:
            raise ValidationError("A remote control needs at least one slot", {"slots": slots})
        no_command = NoCommand()
        self._on_commands: List[Command] = [no_command] * slots
        self._off_commands: List[Command] = [no_command] * slots
        self._undo_command: Command = no_command
        self._logger = get_logger(__name__)

    @property
    def slots(self) -> int:
        return len(self._on_commands)

    @property
    def undo_command(self) -> Command:
        return self._undo_command

    def set_command(self, slot: int, on_command: Command, off_command: Optional[Command] = None) -> None:
        self._check_slot(slot)
        self._on_commands[slot] = on_command
        self._off_commands[slot] = off_command or NoCommand()
        self._logger.debug(f"Slot {slot} programmed with {on_command} / {self._off_commands[slot]}")

    def on_button_was_pushed(self, slot: int) -> None:
        self._check_slot(slot)
        command = self._on_commands[slot]
        command.execute()
        self._undo_command = command

    def off_button_was_pushed(self, slot: int) -> None:
        self._check_slot(slot)
        command = self._off_commands[slot]
        command.execute()
        self._undo_command = command

    def undo_button_was_pushed(self) -> None:
        self._undo_command.undo()
        self._undo_command = NoCommand()

    def describe(self) -> str:
        lines = ["------ Remote Control -------"]
        for slot, (on_command, off_command) in enumerate(zip(self._on_commands, self._off_commands)):
            lines.append(f"[slot {slot}] {on_command}    {off_command}")
        lines.append(f"[undo] {self._undo_command}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < self.slots:
            raise SlotOutOfRangeError(slot, self.slots)
