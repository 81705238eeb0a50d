"""Configuration management for Endless Realms.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from endless_realms.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.world.view_radius
    5

Environment Variables:
    ENDLESS_REALMS_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    ENDLESS_REALMS_WORLD_VIEW_RADIUS: Half-width of the visible window
    ENDLESS_REALMS_WORLD_SEED: Seed for the session dice roller
    ENDLESS_REALMS_SPAWN_MAX_MONSTERS: Live monster cap for the spawner
    ENDLESS_REALMS_PROGRESSION_MULTI_LEVEL_UP: Loop level-ups on large XP grants
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from endless_realms.core.exceptions import ConfigurationError


class WorldSettings(BaseSettings):
    """Configuration for the procedural world.

    Attributes:
        view_radius: Half-width of the square window around the player.
        seed: Optional seed for reproducible sessions.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDLESS_REALMS_WORLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    view_radius: int = Field(
        default=5,
        ge=1,
        le=30,
        description="Visible window half-width (5 gives an 11x11 grid)",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the session dice roller",
    )


class SpawnSettings(BaseSettings):
    """Configuration for spawning, despawning and loot.

    Attributes:
        max_monsters: No spawn attempts while this many monsters are alive.
        spawn_chance: Percent chance per turn to attempt a spawn.
        npc_chance: Percent of spawn attempts that produce an NPC.
        despawn_margin: Cells beyond the view radius before despawn.
        loot_chance: Percent chance a defeated monster drops an item.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDLESS_REALMS_SPAWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_monsters: int = Field(default=8, ge=0, le=100, description="Live monster cap")
    spawn_chance: int = Field(default=35, ge=0, le=100, description="Spawn attempt chance (%)")
    npc_chance: int = Field(default=10, ge=0, le=100, description="NPC share of spawns (%)")
    despawn_margin: int = Field(default=6, ge=0, le=50, description="Despawn distance margin")
    loot_chance: int = Field(default=70, ge=0, le=100, description="Loot drop chance (%)")


class AISettings(BaseSettings):
    """Configuration for monster behavior.

    Attributes:
        hunter_range: Manhattan distance at which hunters engage.
        guardian_range: Manhattan distance at which guardians engage.
        guardian_leash: Max distance from spawn origin a guardian will chase.
        guardian_regen: HP regenerated per turn while returning home.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDLESS_REALMS_AI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hunter_range: int = Field(default=8, ge=1, description="Hunter engage distance")
    guardian_range: int = Field(default=4, ge=1, description="Guardian engage distance")
    guardian_leash: int = Field(default=7, ge=1, description="Guardian leash length")
    guardian_regen: int = Field(default=2, ge=0, description="Guardian regen while returning")

    @model_validator(mode="after")
    def validate_guardian_leash(self) -> "AISettings":
        """Ensure a guardian can engage without immediately breaking its leash.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If guardian_range exceeds guardian_leash.
        """
        if self.guardian_range > self.guardian_leash:
            raise ConfigurationError(
                f"guardian_range ({self.guardian_range}) must not exceed "
                f"guardian_leash ({self.guardian_leash})",
                config_key="guardian_range",
            )
        return self


class ProgressionSettings(BaseSettings):
    """Configuration for experience and level growth.

    Attributes:
        xp_per_level: Threshold multiplier (threshold = level * xp_per_level).
        hp_growth: Max HP gained per level.
        attack_growth: Attack gained per level.
        defense_growth: Defense gained per level.
        multi_level_up: Apply every crossed threshold from a single grant.
            When False only one level is gained per grant.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDLESS_REALMS_PROGRESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    xp_per_level: int = Field(default=100, ge=1, description="XP threshold per level")
    hp_growth: int = Field(default=20, ge=0, description="Max HP per level")
    attack_growth: int = Field(default=2, ge=0, description="Attack per level")
    defense_growth: int = Field(default=1, ge=0, description="Defense per level")
    multi_level_up: bool = Field(
        default=True,
        description="Loop level-ups when one grant crosses several thresholds",
    )


class InventorySettings(BaseSettings):
    """Configuration for bounded player-facing collections.

    Attributes:
        capacity: Maximum number of items in the inventory.
        log_capacity: Maximum number of retained log entries.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDLESS_REALMS_INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    capacity: int = Field(default=20, ge=2, le=200, description="Inventory capacity")
    log_capacity: int = Field(default=30, ge=1, le=1000, description="Game log capacity")


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        debug: Enable debug mode; forces DEBUG diagnostic logging.
        log_level: Diagnostic logging level.
        log_json: Render diagnostic logs as JSON lines.
        log_file: Optional file that also receives diagnostic logs.
        world: Procedural world settings.
        spawn: Spawner and loot settings.
        ai: Monster behavior settings.
        progression: Experience and level growth settings.
        inventory: Inventory and log capacities.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDLESS_REALMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(default=False, description="JSON log output")
    log_file: str | None = Field(default=None, description="Log file path")

    world: WorldSettings = Field(default_factory=WorldSettings)
    spawn: SpawnSettings = Field(default_factory=SpawnSettings)
    ai: AISettings = Field(default_factory=AISettings)
    progression: ProgressionSettings = Field(default_factory=ProgressionSettings)
    inventory: InventorySettings = Field(default_factory=InventorySettings)

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def despawn_distance(self) -> int:
        """Chebyshev distance beyond which entities are removed."""
        return self.world.view_radius + self.spawn.despawn_margin


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    This is primarily useful for testing or when environment variables
    have changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "WorldSettings",
    "SpawnSettings",
    "AISettings",
    "ProgressionSettings",
    "InventorySettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
