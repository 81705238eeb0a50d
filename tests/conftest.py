"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Endless Realms test suite.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from endless_realms.core.config import Settings, SpawnSettings
from endless_realms.engine.dice import DiceRoller
from endless_realms.engine.forge import ItemForge
from endless_realms.engine.inventory import InventoryManager
from endless_realms.engine.session import GameSession
from endless_realms.engine.turn_manager import TurnEngine
from endless_realms.models.entities import Position
from endless_realms.models.game_state import GameState, create_game_state


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Dice Helpers
# =============================================================================


class ScriptedRoller(DiceRoller):
    """DiceRoller with forced outcomes.

    Percentage checks pop from chance_queue and fall back to
    chance_default; zero and certain chances keep their real meaning.
    variance always returns variance_value and fraction returns
    fraction_value. between is forced when between_value is set.
    """

    def __init__(self) -> None:
        super().__init__(seed=1234)
        self.chance_default = False
        self.chance_queue: list[bool] = []
        self.variance_value = 0
        self.fraction_value = 0.0
        self.between_value: int | None = None
        self.chance_calls: list[float] = []

    def chance(self, percent: float) -> bool:
        self.chance_calls.append(percent)
        if percent <= 0:
            return False
        if percent >= 100:
            return True
        if self.chance_queue:
            return self.chance_queue.pop(0)
        return self.chance_default

    def variance(self, spread: int) -> int:
        return min(self.variance_value, max(spread - 1, 0))

    def fraction(self) -> float:
        return self.fraction_value

    def between(self, low: int, high: int) -> int:
        if self.between_value is None:
            return super().between(low, high)
        return max(low, min(self.between_value, high))


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from endless_realms.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings with random spawning switched off.

    Returns:
        Settings instance.
    """
    return Settings(spawn=SpawnSettings(spawn_chance=0))


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests.

    Returns:
        DiceRoller instance with fixed seed.
    """
    return DiceRoller(seed=42)


@pytest.fixture
def scripted_roller() -> ScriptedRoller:
    """Create a ScriptedRoller: no checks succeed, no variance."""
    return ScriptedRoller()


@pytest.fixture
def game_state() -> GameState:
    return create_game_state()


@pytest.fixture
def forge(scripted_roller: ScriptedRoller) -> ItemForge:
    return ItemForge(scripted_roller)


@pytest.fixture
def inventory_manager(
    game_state: GameState,
    forge: ItemForge,
    scripted_roller: ScriptedRoller,
    settings: Settings,
) -> InventoryManager:
    return InventoryManager(game_state, forge, scripted_roller, settings)


@pytest.fixture
def turn_engine(
    game_state: GameState,
    scripted_roller: ScriptedRoller,
    forge: ItemForge,
    inventory_manager: InventoryManager,
    settings: Settings,
) -> TurnEngine:
    """TurnEngine over a bare state with scripted dice."""
    engine = TurnEngine(game_state, scripted_roller, forge, inventory_manager, settings)
    engine.refresh_view()
    return engine


@pytest.fixture
def session(settings: Settings) -> GameSession:
    """Fresh seeded session without random spawns."""
    return GameSession(settings, seed=42)


# =============================================================================
# Terrain Fixtures
# =============================================================================


_PASSABILITY_MODULES = (
    "endless_realms.engine.ai",
    "endless_realms.engine.spawner",
    "endless_realms.engine.turn_manager",
)


@pytest.fixture
def open_terrain(monkeypatch: pytest.MonkeyPatch) -> Callable[[set[Position]], None]:
    """Make every cell passable for the engine.

    The returned function marks specific cells as walls.

    Returns:
        Function taking the set of blocked cells.
    """
    blocked: set[Position] = set()

    def passable(x: int, y: int) -> bool:
        return Position(x=x, y=y) not in blocked

    for module in _PASSABILITY_MODULES:
        monkeypatch.setattr(f"{module}.is_passable", passable)

    def block(cells: set[Position]) -> None:
        blocked.update(cells)

    return block
