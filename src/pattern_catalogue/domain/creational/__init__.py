"""Creational patterns."""

from .factory import Bike, Car, Vehicle, VehicleFactory
from .singleton import Singleton

__all__ = ["Singleton", "Vehicle", "Car", "Bike", "VehicleFactory"]
