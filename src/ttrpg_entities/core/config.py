"""Configuration management for ttrpg-entities.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file. Explicit arguments passed to codec functions
always take precedence over these values.

Example:
    >>> from ttrpg_entities.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.strict_enums
    False

Environment Variables:
    TTRPG_ENTITIES_STRICT_ENUMS: Reject non-canonical enumeration values
    TTRPG_ENTITIES_JSON_INDENT: Indentation used when encoding JSON
    TTRPG_ENTITIES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    TTRPG_ENTITIES_LOG_JSON: Emit logs as JSON lines
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ttrpg_entities.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Library settings.

    Attributes:
        strict_enums: Accept only documented wire codes for closed enumerations.
        json_indent: Indentation for encoded JSON; None produces compact output.
        log_level: Logging level.
        log_json: Render logs as JSON instead of console text.
    """

    model_config = SettingsConfigDict(
        env_prefix="TTRPG_ENTITIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_enums: bool = Field(
        default=False,
        description="Reject enumeration values outside their documented codes",
    )
    json_indent: int | None = Field(
        default=4,
        ge=0,
        le=8,
        description="JSON indentation for encoded entities",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration values are invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
