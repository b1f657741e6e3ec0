"""Settings for bitscope.

Environment-driven configuration using Pydantic settings. Every field can be
set through a ``BITSCOPE_``-prefixed environment variable or a ``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BitscopeSettings(BaseSettings):
    """Library settings for logging and document formatting."""

    model_config = SettingsConfigDict(
        env_prefix="BITSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")

    # Document Configuration
    json_indent: Optional[int] = Field(default=None, ge=0)
    json_sort_keys: bool = Field(default=False)

    @field_validator("log_level", "log_verbosity")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("log_verbosity")
    @classmethod
    def _known_verbosity(cls, value: str) -> str:
        if value not in ("QUIET", "NORMAL", "VERBOSE", "DEBUG"):
            raise ValueError(f"Unknown log verbosity: {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("simple", "detailed", "json"):
            raise ValueError(f"Unknown log format: {value}")
        return value


@lru_cache()
def get_settings() -> BitscopeSettings:
    """Get cached settings instance."""
    return BitscopeSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
