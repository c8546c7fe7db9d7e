"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        GamemstrError: Base exception for all library errors.
        EntityConstructionError: Request-to-entity conversion failures.
        RenderError: Text rendering failures.

    Configuration:
        Settings: Main library settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up library logging.
        reset_logging: Close the log file and restore defaults.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from gamemstr.core.config import (
    RenderSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from gamemstr.core.exceptions import (
    ConfigurationError,
    EntityConstructionError,
    GamemstrError,
    InvalidIdentifierError,
    MapBoundsError,
    RecordDecodeError,
    RenderError,
)
from gamemstr.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
)


__all__ = [
    # Exceptions
    "GamemstrError",
    "ConfigurationError",
    "EntityConstructionError",
    "InvalidIdentifierError",
    "RenderError",
    "RecordDecodeError",
    "MapBoundsError",
    # Configuration
    "Settings",
    "RenderSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "reset_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
