"""Chain of Responsibility pattern - pass a request along until handled."""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from pattern_catalogue.domain.exceptions import InvalidOperationError
from pattern_catalogue.infrastructure.logging.logger import get_logger

UNHANDLED = "No handler available for this request."

logger = get_logger(__name__)


class Handler(ABC):
    """
    Link in a chain of handlers.

    Each concrete handler decides through ``can_handle`` whether a request
    is its own. ``handle`` walks the links iteratively, so long chains do not
    grow the call stack.
    """

    # Set once a HandlerChain owns the handler
    chained: bool = False

    def __init__(self, next_handler: Optional["Handler"] = None):
        self.next_handler = next_handler

    @abstractmethod
    def can_handle(self, request: str) -> bool:
        """Whether this handler accepts the request."""

    def process(self, request: str) -> str:
        return f"Handled by {self.__class__.__name__}"

    def handle(self, request: str) -> str:
        handler: Optional[Handler] = self
        while handler is not None:
            if handler.can_handle(request):
                return handler.process(request)
            logger.debug("Forwarding request", handler=handler.__class__.__name__, request=request)
            handler = handler.next_handler
        return UNHANDLED


class LevelHandler(Handler):
    """Handler that accepts requests equal to its ``level``."""

    level: str = ""

    def can_handle(self, request: str) -> bool:
        return request == self.level


class LowLevelHandler(LevelHandler):
    level = "low"


class MediumLevelHandler(LevelHandler):
    level = "medium"


class HighLevelHandler(LevelHandler):
    level = "high"


class HandlerChain:
    """
    Ordered dispatcher over a fixed sequence of handlers.

    Construction links each handler to the one after it, so the first
    handler answers exactly like the chain itself. A handler belongs to at
    most one chain; handlers that are already linked or already chained are
    refused so an existing chain's wiring never changes.
    """

    def __init__(self, *handlers: Handler):
        seen = set()
        for handler in handlers:
            if handler.next_handler is not None or handler.chained or id(handler) in seen:
                raise InvalidOperationError(
                    f"{handler.__class__.__name__} is already part of a chain",
                    details={"handler": handler.__class__.__name__},
                )
            seen.add(id(handler))

        self._handlers: Tuple[Handler, ...] = tuple(handlers)
        for current, following in zip(self._handlers, self._handlers[1:]):
            current.next_handler = following
        for handler in self._handlers:
            handler.chained = True

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        return self._handlers

    @property
    def head(self) -> Optional[Handler]:
        return self._handlers[0] if self._handlers else None

    def handle(self, request: str) -> str:
        for handler in self._handlers:
            if handler.can_handle(request):
                return handler.process(request)
        return UNHANDLED


def build_default_chain() -> HandlerChain:
    """Low -> medium -> high."""
    return HandlerChain(LowLevelHandler(), MediumLevelHandler(), HighLevelHandler())
