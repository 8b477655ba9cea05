"""
Application layer decorators for demo registration.

Demos mark themselves with ``@demo(...)``; the infrastructure registry
consumes the collected definitions at bootstrap time, so demo modules never
import the registry.
"""
from typing import Callable, Dict, List, TypeVar

from pattern_catalogue.application.dto import DemoDefinition
from pattern_catalogue.domain.exceptions import ConfigurationError

DemoFunc = TypeVar("DemoFunc", bound=Callable[..., None])

CATEGORIES = ("creational", "structural", "behavioral")

# Demo definitions in declaration order
_demo_definitions: Dict[str, DemoDefinition] = {}


def demo(name: str, category: str, description: str = "") -> Callable[[DemoFunc], DemoFunc]:
    """
    Mark a function as the usage demonstration of one pattern.

    Usage:
        @demo("facade", category="structural", description="...")
        def facade_demo(console, container):
            console.emit(ComputerFacade().start_system())

    Args:
        name: Pattern name used on the command line
        category: One of ``CATEGORIES``
        description: One-line summary shown by ``list``

    Returns:
        The undecorated function, with ``_demo_name`` set

    Raises:
        ValueError: If the category is unknown
        ConfigurationError: If a demo with the same name was already declared
    """
    if category not in CATEGORIES:
        raise ValueError(f"Category must be one of {CATEGORIES}, got '{category}'")

    def decorator(func: DemoFunc) -> DemoFunc:
        if name in _demo_definitions:
            raise ConfigurationError(f"Demo '{name}' is already declared")
        _demo_definitions[name] = DemoDefinition(
            name=name, category=category, description=description, func=func
        )
        func._demo_name = name
        return func

    return decorator


def get_registered_demos() -> List[DemoDefinition]:
    """Get all decorated demos (for infrastructure consumption)."""
    return list(_demo_definitions.values())
