"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        RealmError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        GameEngineError: Simulation engine errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from endless_realms.core.config import (
    AISettings,
    InventorySettings,
    ProgressionSettings,
    Settings,
    SpawnSettings,
    WorldSettings,
    clear_settings_cache,
    get_settings,
)
from endless_realms.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    GameEngineError,
    InvalidGameStateError,
    RealmError,
)
from endless_realms.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "RealmError",
    "ConfigurationError",
    "GameEngineError",
    "InvalidGameStateError",
    "DiceRollError",
    # Configuration
    "Settings",
    "WorldSettings",
    "SpawnSettings",
    "AISettings",
    "ProgressionSettings",
    "InventorySettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
