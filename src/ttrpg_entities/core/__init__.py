"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        EntitiesError: Base exception for all library errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Schema validation errors.
        EntityDecodeError: Payload could not be decoded.
        EntityEncodeError: Entity could not be encoded or written.
        FixtureNotFoundError: Unknown conformance fixture.

    Configuration:
        Settings: Library settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from ttrpg_entities.core.config import (
    Settings,
    clear_settings_cache,
    get_settings,
)
from ttrpg_entities.core.exceptions import (
    ConfigurationError,
    EntitiesError,
    EntityDecodeError,
    EntityEncodeError,
    FixtureNotFoundError,
    ValidationError,
)
from ttrpg_entities.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "EntitiesError",
    "ConfigurationError",
    "ValidationError",
    "EntityDecodeError",
    "EntityEncodeError",
    "FixtureNotFoundError",
    # Configuration
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
