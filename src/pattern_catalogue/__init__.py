"""Pattern Catalogue - Root Package.

Ten classic object-oriented design patterns, each a small self-contained
group of classes with a usage demonstration.

Key Components:
    - domain: one module per pattern, grouped as creational, structural
      and behavioral
    - application: demo scripts, the demo runner and its result objects
    - infrastructure: logging, dependency injection and the demo registry
    - config: pydantic configuration schemas and loader
    - cli: command-line entry point

Usage:
    >>> pattern-catalogue list
    >>> pattern-catalogue run chain
    >>> pattern-catalogue --format table run --all
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "__package_name__"]
