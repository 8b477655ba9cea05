"""Logging configuration schema."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_DESTINATIONS = ["console", "file", "both", "none"]


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("console", description="Where log records go (console, file, both, none)")
    file_path: str = Field("logs/pattern_catalogue.log", description="Log file path, env vars expanded")
    max_size_mb: int = Field(10, description="Rotate the log file after this many megabytes")
    backup_count: int = Field(3, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and validate the log level."""
        level = v.upper()
        if level not in VALID_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v not in VALID_DESTINATIONS:
            raise ValueError(f"Log destination must be one of {VALID_DESTINATIONS}")
        return v

    @field_validator("max_size_mb")
    @classmethod
    def validate_max_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Maximum log file size must be at least 1 MB")
        return v

    @field_validator("backup_count")
    @classmethod
    def validate_backup_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Backup count cannot be negative")
        return v
