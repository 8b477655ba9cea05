"""Structured logging built on structlog over the standard logging module."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from pattern_catalogue.config.schemas.logging_schema import LoggingConfig
from pattern_catalogue.domain.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
]


class DetailedFormatter(logging.Formatter):
    """Formatter that adds module, function and line of the caller."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    structlog.configure(
        processors=_PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    formatter = DetailedFormatter(LOG_FORMAT)

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {log_path}: {e}", source=log_path) from e
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("console", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if config.destination == "none":
        handlers.append(logging.NullHandler())

    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. Defaults are used when omitted.

    Returns:
        Configured structlog logger for the package.

    Raises:
        ConfigurationError: If the log file cannot be opened
    """
    config = config or LoggingConfig()

    # Build first so a bad file path leaves the current handlers in place
    handlers = _build_handlers(config)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    # Replace whatever handlers a previous call installed
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("pattern_catalogue")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given module name."""
    return structlog.get_logger(name)


# Route structlog through stdlib before anything logs; only WARNING and above
# reach the console until setup_logging installs handlers.
_configure_structlog()
