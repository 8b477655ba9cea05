# src/pattern_catalogue/domain/exceptions.py
from typing import Any, Optional


class PatternError(Exception):
    """Base exception for all pattern catalogue errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class InvalidOperationError(PatternError):
    """Raised when an operation is not allowed in the object's current state."""
    pass


class InvalidArgumentError(PatternError, ValueError):
    """Raised when a caller passes a key or value the pattern does not recognise."""
    def __init__(self, message: str, argument: Any = None):
        super().__init__(message, details={"argument": argument})
        self.argument = argument


class OutOfRangeError(PatternError, IndexError):
    """Raised when a cursor is advanced past the end of its sequence."""
    def __init__(self, message: str, position: int, size: int):
        super().__init__(message, details={"position": position, "size": size})
        self.position = position
        self.size = size


class ConfigurationError(PatternError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, source: Optional[str] = None, details: Any = None):
        super().__init__(message, details)
        self.source = source
