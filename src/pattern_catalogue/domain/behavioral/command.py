"""Command pattern - requests as objects, run by a decoupled invoker."""
from abc import ABC, abstractmethod
from typing import Callable, Optional

from pattern_catalogue.domain.exceptions import InvalidOperationError
from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


# Receivers

class Light:
    def __init__(self, emit: Callable[[str], None] = print):
        self._emit = emit

    def turn_on(self) -> None:
        self._emit("Light is ON")

    def turn_off(self) -> None:
        self._emit("Light is OFF")


class TV:
    def __init__(self, emit: Callable[[str], None] = print):
        self._emit = emit

    def turn_on(self) -> None:
        self._emit("TV is ON")

    def turn_off(self) -> None:
        self._emit("TV is OFF")


# Commands

class Command(ABC):
    """Encapsulated action on a receiver."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.turn_on()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.turn_off()


class TVOnCommand(Command):
    def __init__(self, tv: TV):
        self.tv = tv

    def execute(self) -> None:
        self.tv.turn_on()


class TVOffCommand(Command):
    def __init__(self, tv: TV):
        self.tv = tv

    def execute(self) -> None:
        self.tv.turn_off()


# Invoker

class RemoteControl:
    """Holds one replaceable command and runs it when the button is pressed."""

    def __init__(self):
        self.command: Optional[Command] = None

    def set_command(self, command: Command) -> None:
        self.command = command

    def press_button(self) -> None:
        """
        Execute the held command.

        Raises:
            InvalidOperationError: If no command has been set
        """
        if self.command is None:
            raise InvalidOperationError("No command set on remote control")
        logger.debug("Pressing button", command=self.command.__class__.__name__)
        self.command.execute()
