"""
Dependency Injection Container implementation.

The container is the composition root's single owner of shared objects.
Three registration styles are supported:

- instances: pre-built objects returned as-is
- factories: called with the container on every ``get``
- singletons: factory called on first ``get``, result cached afterwards
"""
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, Type, TypeVar, cast

from pattern_catalogue.infrastructure.di.exceptions import FactoryError, UnregisteredDependencyError
from pattern_catalogue.infrastructure.logging.logger import get_logger

T = TypeVar("T")
Factory = Callable[["DIContainer"], Any]

logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


class DIContainer:
    """Minimal dependency injection container."""

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._factories: Dict[Type, Factory] = {}
        self._singleton_factories: Dict[Type, Factory] = {}
        self._singletons: Dict[Type, Any] = {}

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {cls.__name__}")

    def register_factory(self, cls: Type[T], factory: Callable[["DIContainer"], T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Called with the container to create a new instance per ``get``
        """
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {cls.__name__}")

    def register_singleton(
        self, cls: Type[T], factory: Optional[Callable[["DIContainer"], T]] = None
    ) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            factory: Called with the container on first ``get``; defaults to ``cls()``
        """
        self._singleton_factories[cls] = factory or (lambda _container: cls())
        self._singletons.pop(cls, None)
        logger.debug(f"Registered singleton type {cls.__name__}")

    def has(self, cls: Type) -> bool:
        """Check if a type is registered with the container."""
        return cls in self._instances or cls in self._factories or cls in self._singleton_factories

    def get(self, cls: Type[T]) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get

        Returns:
            Instance of the requested type

        Raises:
            UnregisteredDependencyError: If the type was never registered
            FactoryError: If the registered factory raised
        """
        with timed_operation(f"Resolve {cls.__name__}"):
            if cls in self._instances:
                return cast(T, self._instances[cls])

            if cls in self._singleton_factories:
                if cls not in self._singletons:
                    self._singletons[cls] = self._call_factory(cls, self._singleton_factories[cls])
                    logger.debug(f"Singleton instance created for {cls.__name__}")
                return cast(T, self._singletons[cls])

            if cls in self._factories:
                return cast(T, self._call_factory(cls, self._factories[cls]))

        raise UnregisteredDependencyError(cls)

    def _call_factory(self, cls: Type, factory: Factory) -> Any:
        try:
            return factory(self)
        except Exception as e:
            logger.error(f"Factory failed to create instance of {cls.__name__}: {e}")
            raise FactoryError(cls, e) from e

    def reset(self) -> None:
        """Drop cached singletons; registrations are kept."""
        self._singletons.clear()

    def clear(self) -> None:
        """Remove every registration."""
        self._instances.clear()
        self._factories.clear()
        self._singleton_factories.clear()
        self._singletons.clear()
