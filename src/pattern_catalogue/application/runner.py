"""Demo runner - executes registered demos and records their output."""
import time
from typing import Callable, Iterable, List, Optional

from pattern_catalogue.application.console import DemoConsole
from pattern_catalogue.application.dto import DemoResult
from pattern_catalogue.infrastructure.di import DIContainer
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.infrastructure.registry import DemoRegistry


class DemoRunner:
    """
    Runs demos looked up in a ``DemoRegistry``.

    Each run gets a fresh ``DemoConsole``; demos that need shared objects
    resolve them from the container. Errors raised by a demo propagate.
    """

    def __init__(
        self,
        registry: DemoRegistry,
        container: DIContainer,
        echo: Optional[Callable[[str], None]] = None,
    ):
        self.registry = registry
        self.container = container
        self.echo = echo
        self.logger = get_logger(__name__)

    def run(self, name: str) -> DemoResult:
        definition = self.registry.get(name)
        console = DemoConsole(echo=self.echo)

        self.logger.info("Starting demo", demo=name, category=definition.category)
        start_time = time.time()
        try:
            definition.func(console, self.container)
        except Exception as e:
            self.logger.error("Demo failed", demo=name, error=str(e))
            raise
        duration_ms = (time.time() - start_time) * 1000
        self.logger.info("Completed demo", demo=name, duration_ms=round(duration_ms, 3))

        return DemoResult(
            pattern=definition.name,
            category=definition.category,
            lines=console.lines,
            duration_ms=duration_ms,
        )

    def run_many(self, names: Iterable[str]) -> List[DemoResult]:
        """Run demos in the given order; unknown names fail before anything runs."""
        names = list(names)
        for name in names:
            self.registry.get(name)
        return [self.run(name) for name in names]

    def run_all(self, enabled: Optional[List[str]] = None) -> List[DemoResult]:
        return self.run_many(enabled if enabled is not None else self.registry.names())
