"""Observer pattern - one subject notifying many observers."""
from typing import Callable, List, Protocol

from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class SupportsUpdate(Protocol):
    """Protocol for anything a subject can notify."""

    def update(self, message: str) -> None:
        ...


class Subject:
    """
    Keeps observers in insertion order and notifies them in that order.

    Observers can be added but not removed; the same observer may be added
    more than once and is then notified once per registration. An exception
    raised by an observer propagates to the caller of ``notify_observers``.
    """

    def __init__(self):
        self.observers: List[SupportsUpdate] = []

    def add_observer(self, observer: SupportsUpdate) -> None:
        self.observers.append(observer)

    def notify_observers(self, message: str) -> None:
        logger.debug("Notifying observers", count=len(self.observers))
        for observer in self.observers:
            observer.update(message)


class Observer:
    """Named observer that emits every message it receives."""

    def __init__(self, name: str, emit: Callable[[str], None] = print):
        self.name = name
        self._emit = emit

    def update(self, message: str) -> None:
        self._emit(f"{self.name} received: {message}")
