"""Dependency injection exceptions."""
from typing import Any, Optional, Type

from pattern_catalogue.domain.exceptions import PatternError


class DependencyResolutionError(PatternError):
    """Raised when the container cannot provide an instance of a type."""
    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        super().__init__(message, details={"dependency": _type_name(dependency_type)})
        self.dependency_type = dependency_type
        self.cause = cause


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type was never registered with the container."""
    def __init__(self, dependency_type: Type):
        super().__init__(
            dependency_type,
            f"No registration found for {_type_name(dependency_type)}",
        )


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""
    def __init__(self, dependency_type: Type, cause: Exception):
        super().__init__(
            dependency_type,
            f"Factory for {_type_name(dependency_type)} failed: {cause}",
            cause,
        )


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, "__name__") else str(cls)
