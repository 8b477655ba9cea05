"""Structural patterns."""

from .adapter import Adapter, NewSystem, OldSystem, Target
from .composite import Component, Composite, Leaf
from .decorator import Beverage, BeverageDecorator, Coffee, MilkDecorator, SugarDecorator
from .facade import Computer, ComputerFacade, Monitor

__all__ = [
    # Adapter
    "Target",
    "OldSystem",
    "NewSystem",
    "Adapter",
    # Decorator
    "Beverage",
    "Coffee",
    "BeverageDecorator",
    "MilkDecorator",
    "SugarDecorator",
    # Composite
    "Component",
    "Leaf",
    "Composite",
    # Facade
    "Computer",
    "Monitor",
    "ComputerFacade",
]
