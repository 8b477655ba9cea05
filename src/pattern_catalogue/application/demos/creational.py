"""Usage demonstrations for the creational patterns."""
from pattern_catalogue.application.console import DemoConsole
from pattern_catalogue.application.decorators import demo
from pattern_catalogue.domain.creational import Singleton, VehicleFactory
from pattern_catalogue.infrastructure.di import DIContainer


@demo("singleton", category="creational", description="Lazy single shared instance")
def singleton_demo(console: DemoConsole, container: DIContainer) -> None:
    instance1 = container.get(Singleton)
    console.emit(instance1.value)

    instance2 = container.get(Singleton)
    console.emit(instance2.value)


@demo("factory", category="creational", description="Type-keyed object creation")
def factory_demo(console: DemoConsole, container: DIContainer) -> None:
    car = VehicleFactory.get_vehicle("car")
    console.emit(car.create())

    bike = VehicleFactory.get_vehicle("bike")
    console.emit(bike.create())
