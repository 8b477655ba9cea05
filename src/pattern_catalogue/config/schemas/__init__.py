"""Configuration schemas package."""

from .app_schema import OUTPUT_FORMATS, AppConfig, DemoConfig, OutputConfig, validate_config
from .logging_schema import LoggingConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Sections
    "LoggingConfig",
    "OutputConfig",
    "DemoConfig",
    "OUTPUT_FORMATS",
]
