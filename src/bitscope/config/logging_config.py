"""Centralized logging configuration for bitscope.

Provides consistent, configurable logging with environment-based control
over verbosity and format. The library never configures logging on import;
applications call ``setup_logging()`` once at startup.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import BitscopeSettings, get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes for the bitscope loggers."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Allocation, transitions and decode traces


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    return verbosity_map.get(LogVerbosity(verbosity.upper()), LogLevel.WARNING.value)


class LoggingConfig:
    """Centralized logging configuration manager."""

    LIBRARY_LOGGER = "bitscope"

    @classmethod
    def build(cls, settings: BitscopeSettings) -> Dict[str, Any]:
        """Build a dictConfig mapping from settings.

        The root logger follows ``log_level``; the ``bitscope`` logger
        follows ``log_verbosity``.
        """
        library_level = get_log_level_from_verbosity(settings.log_verbosity)
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[LogFormat(settings.log_format)],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": LogLevel.DEBUG.value,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": settings.log_level,
                "handlers": ["console"],
            },
            "loggers": {
                cls.LIBRARY_LOGGER: {
                    "level": library_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    @classmethod
    def configure(cls, settings: Optional[BitscopeSettings] = None) -> None:
        """Configure logging from settings (environment by default)."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build(settings))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={settings.log_level}, "
            f"verbosity={settings.log_verbosity}, format={settings.log_format}"
        )

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        """Silence all logging from a module."""
        cls.set_module_level(module_name, "CRITICAL")


def setup_logging(settings: Optional[BitscopeSettings] = None) -> None:
    """Setup logging configuration from settings.

    This is the main entry point for configuring logging in an application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name (usually ``__name__``)."""
    return logging.getLogger(name)
