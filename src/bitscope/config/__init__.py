"""Configuration module for bitscope."""

from .settings import BitscopeSettings, get_settings, reset_settings
from .logging_config import (
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
    setup_logging,
    get_logger,
)

__all__ = [
    "BitscopeSettings",
    "get_settings",
    "reset_settings",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
