"""Composite pattern - leaves and groups behind one interface."""
from abc import ABC, abstractmethod
from typing import List


class Component(ABC):
    @abstractmethod
    def get_name(self) -> str:
        """Name reported to the parent."""


class Leaf(Component):
    def __init__(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name


class Composite(Component):
    """Ordered group of child components."""

    def __init__(self, name: str = "Composite"):
        self.name = name
        self.children: List[Component] = []

    def add(self, child: Component) -> None:
        self.children.append(child)

    def get_name(self) -> str:
        return self.name

    def get_names(self) -> List[str]:
        """Names of the direct children, in insertion order."""
        return [child.get_name() for child in self.children]

    def flatten_names(self) -> List[str]:
        """Leaf names across all nested composites, depth first."""
        names: List[str] = []
        for child in self.children:
            if isinstance(child, Composite):
                names.extend(child.flatten_names())
            else:
                names.append(child.get_name())
        return names
