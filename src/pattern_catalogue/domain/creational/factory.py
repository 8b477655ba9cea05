"""Factory Method pattern - type-keyed vehicle creation."""
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from pattern_catalogue.domain.exceptions import InvalidArgumentError
from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Vehicle(ABC):
    """Product interface created by the factory."""

    @abstractmethod
    def create(self) -> str:
        """Describe the created vehicle."""


class Car(Vehicle):
    def create(self) -> str:
        return "Car created"


class Bike(Vehicle):
    def create(self) -> str:
        return "Bike created"


class VehicleFactory:
    """
    Creates vehicles from a type key.

    The key-to-class mapping is fixed; every call returns a new instance.
    """

    _vehicle_types: Dict[str, Type[Vehicle]] = {
        "car": Car,
        "bike": Bike,
    }

    @classmethod
    def get_vehicle(cls, vehicle_type: str) -> Vehicle:
        """
        Create a vehicle for the given type key.

        Args:
            vehicle_type: One of ``available_types()``

        Returns:
            A new vehicle instance

        Raises:
            InvalidArgumentError: If the type key is not recognised
        """
        vehicle_class = cls._vehicle_types.get(vehicle_type)
        if vehicle_class is None:
            raise InvalidArgumentError("Unknown vehicle type", argument=vehicle_type)
        logger.debug("Creating vehicle", vehicle_type=vehicle_type)
        return vehicle_class()

    @classmethod
    def available_types(cls) -> List[str]:
        return sorted(cls._vehicle_types)
