"""Domain layer - one self-contained module per design pattern."""

from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidOperationError,
    OutOfRangeError,
    PatternError,
)

__all__ = [
    "PatternError",
    "InvalidOperationError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ConfigurationError",
]
