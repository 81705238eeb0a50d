"""Tests for configuration management."""

from __future__ import annotations

import pytest

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
from endless_realms.core.exceptions import ConfigurationError


class TestWorldSettings:
    """Tests for WorldSettings configuration."""

    def test_default_values(self) -> None:
        settings = WorldSettings()

        assert settings.view_radius == 5
        assert settings.seed is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENDLESS_REALMS_WORLD_VIEW_RADIUS", "7")
        monkeypatch.setenv("ENDLESS_REALMS_WORLD_SEED", "99")

        settings = WorldSettings()

        assert settings.view_radius == 7
        assert settings.seed == 99


class TestSpawnSettings:
    def test_default_values(self) -> None:
        settings = SpawnSettings()

        assert settings.max_monsters == 8
        assert settings.spawn_chance == 35
        assert settings.npc_chance == 10
        assert settings.despawn_margin == 6
        assert settings.loot_chance == 70

    def test_chance_bounds(self) -> None:
        with pytest.raises(ValueError):
            SpawnSettings(spawn_chance=150)


class TestAISettings:
    """Tests for AISettings validation."""

    def test_default_values(self) -> None:
        settings = AISettings()

        assert settings.hunter_range == 8
        assert settings.guardian_range == 4
        assert settings.guardian_leash == 7
        assert settings.guardian_regen == 2

    def test_guardian_range_must_fit_leash(self) -> None:
        """Test that an engage range beyond the leash is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            AISettings(guardian_range=9, guardian_leash=7)

        assert exc_info.value.details["config_key"] == "guardian_range"


class TestProgressionAndInventorySettings:
    def test_progression_defaults(self) -> None:
        settings = ProgressionSettings()

        assert settings.xp_per_level == 100
        assert settings.hp_growth == 20
        assert settings.attack_growth == 2
        assert settings.defense_growth == 1
        assert settings.multi_level_up is True

    def test_inventory_defaults(self) -> None:
        settings = InventorySettings()

        assert settings.capacity == 20
        assert settings.log_capacity == 30


class TestSettings:
    """Tests for main Settings class."""

    def test_default_settings(self) -> None:
        settings = Settings()

        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.log_file is None
        assert settings.effective_log_level == "INFO"
        assert settings.despawn_distance == 11

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENDLESS_REALMS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ENDLESS_REALMS_SPAWN_MAX_MONSTERS", "3")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.spawn.max_monsters == 3

    def test_debug_forces_debug_level(self) -> None:
        settings = Settings(debug=True, log_level="ERROR")

        assert settings.effective_log_level == "DEBUG"

    def test_settings_caching(self) -> None:
        """Test that settings are cached."""
        first = get_settings()
        second = get_settings()
        assert first is second

    def test_clear_cache(self) -> None:
        first = get_settings()
        clear_settings_cache()
        second = get_settings()
        assert first is not second

    def test_invalid_env_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that invalid environment values surface as ConfigurationError."""
        monkeypatch.setenv("ENDLESS_REALMS_LOG_LEVEL", "CHATTY")

        with pytest.raises(ConfigurationError):
            get_settings()
