"""Configuration loading for the pattern catalogue."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from pattern_catalogue.config.schemas import AppConfig, validate_config
from pattern_catalogue.domain.exceptions import ConfigurationError
from pattern_catalogue.infrastructure.logging.logger import get_logger

CONFIG_FILE_ENV = "PATTERN_CATALOGUE_CONFIG"

# Environment variable -> nested configuration path
ENV_OVERRIDES = {
    "PATTERN_CATALOGUE_LOG_LEVEL": ("logging", "level"),
    "PATTERN_CATALOGUE_LOG_DESTINATION": ("logging", "destination"),
    "PATTERN_CATALOGUE_OUTPUT_FORMAT": ("output", "format"),
}

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is assembled lazily from, in increasing priority:
    - schema defaults
    - a YAML or JSON file (explicit path or ``PATTERN_CATALOGUE_CONFIG``)
    - environment variable overrides

    and validated against ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)

        try:
            app_config = validate_config(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                source=self._config_file,
                details=e.errors(),
            ) from e

        logger.debug("Configuration loaded", source=self._config_file or "defaults")
        return app_config

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Read a configuration file.

        Args:
            config_file: Path to a ``.yml``/``.yaml`` or ``.json`` file

        Returns:
            Raw configuration dictionary

        Raises:
            ConfigurationError: If the file is missing, unreadable, unparsable or not a mapping
        """
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}", source=config_file)

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse configuration file {config_file}: {e}", source=config_file
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file {config_file}: {e}", source=config_file
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping", source=config_file
            )
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of the configuration with environment overrides applied."""
        result = {key: dict(value) if isinstance(value, dict) else value
                  for key, value in config_data.items()}
        for env_var, (section, key) in ENV_OVERRIDES.items():
            if env_var in os.environ:
                if not isinstance(result.get(section), dict):
                    result[section] = {}
                result[section][key] = os.environ[env_var]
        return result

    def get_config(self) -> AppConfig:
        return self.app_config

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
