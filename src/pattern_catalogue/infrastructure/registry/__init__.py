"""Infrastructure registry patterns."""

from .demo_registry import DemoRegistry, create_demo_registry

__all__ = [
    'DemoRegistry',
    'create_demo_registry'
]
