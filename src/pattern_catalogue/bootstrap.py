"""Composition root - wires configuration, registry and shared instances."""
from typing import Callable, Optional

from pattern_catalogue.application.runner import DemoRunner
from pattern_catalogue.config.schemas import AppConfig
from pattern_catalogue.domain.creational import Singleton
from pattern_catalogue.infrastructure.di import DIContainer
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.infrastructure.registry import DemoRegistry, create_demo_registry

logger = get_logger(__name__)


def create_container(
    config: Optional[AppConfig] = None,
    echo: Optional[Callable[[str], None]] = None,
) -> DIContainer:
    """
    Build the application container.

    Args:
        config: Application configuration; defaults when omitted
        echo: Optional callable receiving every demo line as it is emitted

    Returns:
        Container holding ``AppConfig``, ``DemoRegistry``, ``Singleton``
        and ``DemoRunner``
    """
    container = DIContainer()
    container.register_instance(AppConfig, config or AppConfig())
    container.register_instance(DemoRegistry, create_demo_registry())

    # The container owns the one Singleton for the application's lifetime
    container.register_singleton(Singleton, lambda _c: Singleton.get_instance())

    container.register_singleton(
        DemoRunner,
        lambda c: DemoRunner(c.get(DemoRegistry), c, echo=echo),
    )

    logger.debug("Container created")
    return container
