"""Main application configuration schema."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging_schema import LoggingConfig

OUTPUT_FORMATS = ["text", "json", "yaml", "table"]


class OutputConfig(BaseModel):
    """Console output configuration."""
    model_config = ConfigDict(extra="forbid")

    format: str = Field("text", description="Output format (text, json, yaml, table)")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """
        Validate output format.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If the format is not supported
        """
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v


class DemoConfig(BaseModel):
    """Selection of demos run by ``run --all``."""
    model_config = ConfigDict(extra="forbid")

    enabled: Optional[List[str]] = Field(
        None, description="Pattern names to run; every registered pattern when unset"
    )


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
    demos: DemoConfig = Field(default_factory=lambda: DemoConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
