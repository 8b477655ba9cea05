"""Singleton pattern - one lazily created, process-wide instance."""
import random
import threading
from typing import Callable, Optional

from pattern_catalogue.domain.exceptions import InvalidOperationError
from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Singleton:
    """
    Holder of a single random value shared by the whole process.

    Callers go through ``get_instance()``. Constructing the class directly
    works only while no instance exists; afterwards it raises
    ``InvalidOperationError``.

    The value source can be injected so the composition root (or a test)
    decides where the value comes from, and ``reset()`` makes the lifecycle
    of the shared slot explicit.
    """

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    def __init__(self, value_factory: Callable[[], float] = random.random):
        if Singleton._instance is not None:
            raise InvalidOperationError(
                "Cannot instantiate directly. Use Singleton.get_instance() instead."
            )
        self.value = value_factory()

    @classmethod
    def get_instance(cls, value_factory: Callable[[], float] = random.random) -> "Singleton":
        """Return the shared instance, creating it on first call."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(value_factory)
                    logger.debug("Singleton instance created", value=cls._instance.value)
        return cls._instance

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next access creates a new one."""
        with cls._lock:
            cls._instance = None
