"""Enumeration types for Endless Realms.

All enums are StrEnum so values serialize cleanly and compare equal to
their plain string form.
"""

from __future__ import annotations

from enum import StrEnum


class TerrainKind(StrEnum):
    """Terrain classification of a world cell."""

    GRASS = "grass"
    WATER = "water"
    MOUNTAIN = "mountain"
    SAND = "sand"
    FOREST = "forest"

    @property
    def is_passable(self) -> bool:
        """Whether entities may stand on this terrain."""
        return self not in (TerrainKind.WATER, TerrainKind.MOUNTAIN)


class ItemKind(StrEnum):
    """Item categories. The four equipment kinds double as slot names."""

    WEAPON = "weapon"
    ARMOR = "armor"
    HELM = "helm"
    ACCESSORY = "accessory"
    CONSUMABLE = "consumable"


class EquipmentSlot(StrEnum):
    """The four equipment slots."""

    WEAPON = "weapon"
    ARMOR = "armor"
    HELM = "helm"
    ACCESSORY = "accessory"


class Rarity(StrEnum):
    """Item rarity tiers, lowest first."""

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def next_tier(self) -> Rarity | None:
        """The rarity one step up, or None at the top."""
        tiers = list(Rarity)
        index = tiers.index(self)
        if index + 1 >= len(tiers):
            return None
        return tiers[index + 1]


class SpecialEffect(StrEnum):
    """Non-numeric consumable effects."""

    TELEPORT = "teleport"
    """Return the player to the world origin."""

    GRANT_XP = "grant_xp"
    """Grant the experience stored on the item."""

    FULL_HEAL = "full_heal"
    """Restore the player to effective max HP."""


class VisualTag(StrEnum):
    """Elemental auras carried by items and shown on their wearer."""

    FIRE = "fire"
    ICE = "ice"
    LIGHTNING = "lightning"
    POISON = "poison"


class EntityKind(StrEnum):
    """Type of entity for interaction and AI handling."""

    PLAYER = "player"
    MONSTER = "monster"
    NPC = "npc"


class AIKind(StrEnum):
    """Monster behavior profiles."""

    HUNTER = "hunter"
    """Chases the player whenever it is within range."""

    GUARDIAN = "guardian"
    """Defends its spawn origin and returns home when drawn away."""


class LogCategory(StrEnum):
    """Category of a narrated game log entry."""

    INFO = "info"
    COMBAT = "combat"
    LOOT = "loot"
    LEVEL = "level"
    CRIT = "crit"


class TurnPhase(StrEnum):
    """Turn engine state machine phases."""

    IDLE = "idle"
    """Awaiting player input."""

    RESOLVING_PLAYER_ACTION = "resolving_player_action"
    """Applying a move or attack."""

    PROCESSING_TURN = "processing_turn"
    """Advancing regen, AI, spawns and despawns."""

    GAME_OVER = "game_over"
    """Player died. Terminal until restart."""


__all__ = [
    "TerrainKind",
    "ItemKind",
    "EquipmentSlot",
    "Rarity",
    "SpecialEffect",
    "VisualTag",
    "EntityKind",
    "AIKind",
    "LogCategory",
    "TurnPhase",
]
