"""Adapter pattern - expose a differently named operation as ``request()``."""
from typing import Protocol


class Target(Protocol):
    """Interface clients expect."""

    def request(self) -> str:
        ...


class OldSystem:
    """Existing implementation of the expected interface."""

    def request(self) -> str:
        return "Old system request"


class NewSystem:
    """Incompatible implementation with its own method name."""

    def specific_request(self) -> str:
        return "New system request"


class Adapter:
    """Makes a ``NewSystem`` usable wherever a ``Target`` is expected."""

    def __init__(self, new_system: NewSystem):
        self.new_system = new_system

    def request(self) -> str:
        return self.new_system.specific_request()
