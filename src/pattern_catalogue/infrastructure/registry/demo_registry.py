"""Demo Registry - registry pattern for pattern demonstrations.

The registry maps a pattern name to its ``DemoDefinition`` and keeps the
catalogue order: creational, then structural, then behavioral, each in
declaration order.
"""
import threading
from typing import Callable, Dict, List

from pattern_catalogue.application.decorators import CATEGORIES, get_registered_demos
from pattern_catalogue.application.dto import DemoDefinition
from pattern_catalogue.domain.exceptions import ConfigurationError, InvalidArgumentError
from pattern_catalogue.infrastructure.logging.logger import get_logger


class DemoRegistry:
    """Registry of demo definitions keyed by pattern name."""

    def __init__(self):
        self._registrations: Dict[str, DemoDefinition] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(
        self,
        name: str,
        category: str,
        func: Callable[..., None],
        description: str = "",
    ) -> None:
        """
        Register a demo.

        Raises:
            ConfigurationError: If the name is already registered
        """
        self.register_definition(
            DemoDefinition(name=name, category=category, description=description, func=func)
        )

    def register_definition(self, definition: DemoDefinition) -> None:
        with self._registry_lock:
            if definition.name in self._registrations:
                raise ConfigurationError(f"Demo '{definition.name}' is already registered")
            self._registrations[definition.name] = definition
        self.logger.debug("Registered demo", demo=definition.name, category=definition.category)

    def get(self, name: str) -> DemoDefinition:
        """
        Look up a demo by pattern name.

        Raises:
            InvalidArgumentError: If no demo is registered under that name
        """
        definition = self._registrations.get(name)
        if definition is None:
            raise InvalidArgumentError(
                f"Unknown pattern '{name}'. Available: {', '.join(self.names())}",
                argument=name,
            )
        return definition

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def definitions(self) -> List[DemoDefinition]:
        """All definitions in catalogue order."""
        order = {category: index for index, category in enumerate(CATEGORIES)}
        return sorted(self._registrations.values(), key=lambda d: order.get(d.category, len(order)))

    def names(self) -> List[str]:
        return [definition.name for definition in self.definitions()]

    def by_category(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {category: [] for category in CATEGORIES}
        for definition in self.definitions():
            grouped.setdefault(definition.category, []).append(definition.name)
        return grouped

    def clear_registrations(self) -> None:
        with self._registry_lock:
            self._registrations.clear()


def create_demo_registry() -> DemoRegistry:
    """Create a registry holding every demo declared with ``@demo``."""
    # Importing the package runs the @demo decorators
    import pattern_catalogue.application.demos  # noqa: F401

    registry = DemoRegistry()
    for definition in get_registered_demos():
        registry.register_definition(definition)
    return registry
