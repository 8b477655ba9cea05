"""Usage demonstrations for the structural patterns."""
from pattern_catalogue.application.console import DemoConsole
from pattern_catalogue.application.decorators import demo
from pattern_catalogue.domain.structural import (
    Adapter,
    Coffee,
    Composite,
    ComputerFacade,
    Leaf,
    MilkDecorator,
    NewSystem,
    OldSystem,
    SugarDecorator,
)
from pattern_catalogue.infrastructure.di import DIContainer


@demo("adapter", category="structural", description="Interface translation between incompatible types")
def adapter_demo(console: DemoConsole, container: DIContainer) -> None:
    old_system = OldSystem()
    console.emit(old_system.request())

    adapter = Adapter(NewSystem())
    console.emit(adapter.request())


@demo("decorator", category="structural", description="Compositional behavior layering")
def decorator_demo(console: DemoConsole, container: DIContainer) -> None:
    coffee = Coffee()
    console.emit(coffee.cost())

    milk_coffee = MilkDecorator(coffee)
    console.emit(milk_coffee.cost())

    milk_sugar_coffee = SugarDecorator(milk_coffee)
    console.emit(milk_sugar_coffee.cost())


@demo("composite", category="structural", description="Uniform treatment of leaf and group nodes")
def composite_demo(console: DemoConsole, container: DIContainer) -> None:
    composite = Composite()
    composite.add(Leaf("Leaf 1"))
    composite.add(Leaf("Leaf 2"))

    console.emit(composite.get_names())


@demo("facade", category="structural", description="Simplified entry point over several subsystems")
def facade_demo(console: DemoConsole, container: DIContainer) -> None:
    facade = ComputerFacade()
    console.emit(facade.start_system())
