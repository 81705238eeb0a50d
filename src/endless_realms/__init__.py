"""Endless Realms - turn-based roguelike simulation core.

An unbounded procedural grid world explored one turn at a time: the
player moves, bumps monsters to fight them, collects generated loot,
equips and synthesizes items, and levels up. The package holds the rules
and state only; rendering and input belong to the host.

Example:
    >>> from endless_realms import GameSession, configure_from_settings, get_settings
    >>>
    >>> configure_from_settings(get_settings())
    >>> session = GameSession(seed=1234)
    >>> session.move(1, 0)
    >>> for entry in session.logs[:3]:
    ...     print(entry.message)

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Pydantic V2 models for items, entities, the log and game state.
    engine: Dice, world, forge, combat, AI, turns and the session facade.
"""

from __future__ import annotations

# Core
from endless_realms.core.config import Settings, get_settings
from endless_realms.core.exceptions import RealmError
from endless_realms.core.logging import configure_from_settings, configure_logging, get_logger

# Engine
from endless_realms.engine.session import CommandResult, GameSession

# Models
from endless_realms.models.game_state import GameState


__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "RealmError",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    # Session
    "GameSession",
    "CommandResult",
    "GameState",
]
