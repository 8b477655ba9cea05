"""Configuration package.

Schemas are re-exported here; the loader lives in
``pattern_catalogue.config.manager`` so the logging setup can import the
schemas without pulling in the manager.
"""

from .schemas import OUTPUT_FORMATS, AppConfig, DemoConfig, LoggingConfig, OutputConfig, validate_config

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
    "OutputConfig",
    "OUTPUT_FORMATS",
    "validate_config",
]
