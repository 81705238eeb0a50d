"""Pydantic models for Endless Realms.

Enums, stat blocks, items, entities, tiles, the event log and the
session state container.
"""

from __future__ import annotations

from endless_realms.models.directory import EntityDirectory
from endless_realms.models.entities import (
    MONSTER_TEMPLATES,
    Entity,
    Position,
    create_monster,
    create_npc,
    create_player,
)
from endless_realms.models.enums import (
    AIKind,
    EntityKind,
    EquipmentSlot,
    ItemKind,
    LogCategory,
    Rarity,
    SpecialEffect,
    TerrainKind,
    TurnPhase,
    VisualTag,
)
from endless_realms.models.game_log import GameLog, LogEntry
from endless_realms.models.game_state import GameState, create_game_state
from endless_realms.models.items import Equipment, Inventory, Item
from endless_realms.models.stats import EffectiveStats, StatBlock, StatBonus
from endless_realms.models.world import Tile


__all__ = [
    # Enums
    "AIKind",
    "EntityKind",
    "EquipmentSlot",
    "ItemKind",
    "LogCategory",
    "Rarity",
    "SpecialEffect",
    "TerrainKind",
    "TurnPhase",
    "VisualTag",
    # Stats
    "StatBlock",
    "StatBonus",
    "EffectiveStats",
    # Items
    "Item",
    "Equipment",
    "Inventory",
    # Entities
    "Position",
    "Entity",
    "MONSTER_TEMPLATES",
    "create_player",
    "create_monster",
    "create_npc",
    "EntityDirectory",
    # World
    "Tile",
    # Log
    "LogEntry",
    "GameLog",
    # State
    "GameState",
    "create_game_state",
]
