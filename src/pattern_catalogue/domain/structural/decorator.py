"""Decorator pattern - layer cost increments over a beverage."""
from abc import ABC, abstractmethod


class Beverage(ABC):
    """Component interface shared by the base drink and its decorators."""

    @abstractmethod
    def cost(self) -> int:
        """Total cost of the drink."""


class Coffee(Beverage):
    def cost(self) -> int:
        return 5


class BeverageDecorator(Beverage):
    """Wraps exactly one beverage and adds ``increment`` to its cost."""

    increment: int = 0

    def __init__(self, coffee: Beverage):
        self.coffee = coffee

    def cost(self) -> int:
        return self.coffee.cost() + self.increment


class MilkDecorator(BeverageDecorator):
    increment = 2


class SugarDecorator(BeverageDecorator):
    increment = 1
