"""Entity models and factories.

Entities are the player, monsters and NPCs standing on the grid. The
player is a singleton held on GameState; monsters and NPCs live in the
EntityDirectory. Monster templates are static data, scaled by level when a
monster is created.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from endless_realms.core.constants import (
    ORIGIN,
    PLAYER_COLOR,
    PLAYER_NAME,
    PLAYER_START_ATTACK,
    PLAYER_START_DEFENSE,
    PLAYER_START_HP,
    PLAYER_SYMBOL,
)
from endless_realms.models.enums import AIKind, EntityKind, VisualTag
from endless_realms.models.stats import StatBlock


# =============================================================================
# Position
# =============================================================================


class Position(BaseModel):
    """An integer cell on the unbounded grid."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @classmethod
    def of(cls, x: int, y: int) -> Position:
        return cls(x=x, y=y)

    def offset(self, dx: int, dy: int) -> Position:
        return Position(x=self.x + dx, y=self.y + dy)

    def manhattan(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def chebyshev(self, other: Position) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


# =============================================================================
# Entity
# =============================================================================


class Entity(BaseModel):
    """Anything that occupies a cell: the player, a monster or an NPC.

    Stats are owned by the entity and mutated in place by combat, AI
    regen and progression.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    position: Position = Field(default_factory=lambda: Position.of(*ORIGIN))
    kind: EntityKind = Field(default=EntityKind.MONSTER)
    name: str = Field(default="Unknown")
    symbol: str = Field(default="?")
    color: str = Field(default="#ffffff")
    stats: StatBlock
    ai: AIKind | None = Field(default=None, description="Behavior profile (monsters only)")
    spawn_origin: Position | None = Field(default=None, description="Where a monster spawned")
    tags: set[VisualTag] = Field(default_factory=set, description="Active visual auras")

    @property
    def is_monster(self) -> bool:
        return self.kind == EntityKind.MONSTER

    @property
    def is_npc(self) -> bool:
        return self.kind == EntityKind.NPC

    @property
    def home(self) -> Position:
        """Spawn origin, falling back to the current position."""
        return self.spawn_origin or self.position


# =============================================================================
# Monster Templates
# =============================================================================

# Stat formulas are base + per_level * level
MONSTER_TEMPLATES: dict[str, dict[str, Any]] = {
    "wild_dog": {
        "name": "Wild Dog",
        "symbol": "🐕",
        "color": "#a8a29e",
        "ai": AIKind.HUNTER,
        "hp": (20, 5),
        "attack": (5, 1),
        "defense": (0, 1),
    },
    "bandit": {
        "name": "Bandit",
        "symbol": "🥷",
        "color": "#ef4444",
        "ai": AIKind.GUARDIAN,
        "hp": (40, 8),
        "attack": (8, 2),
        "defense": (2, 1),
    },
    "tiger_king": {
        "name": "Tiger King",
        "symbol": "🐯",
        "color": "#f59e0b",
        "ai": AIKind.GUARDIAN,
        "hp": (100, 10),
        "attack": (15, 2),
        "defense": (5, 1),
    },
}

NPC_TEMPLATE: dict[str, Any] = {
    "name": "Village Elder",
    "symbol": "👴",
    "color": "#22c55e",
}


# =============================================================================
# Factory Functions
# =============================================================================


def create_player(position: Position | None = None) -> Entity:
    """Create the player at the start of a session."""
    return Entity(
        id=uuid4(),
        position=position or Position.of(*ORIGIN),
        kind=EntityKind.PLAYER,
        name=PLAYER_NAME,
        symbol=PLAYER_SYMBOL,
        color=PLAYER_COLOR,
        stats=StatBlock(
            hp=PLAYER_START_HP,
            max_hp=PLAYER_START_HP,
            attack=PLAYER_START_ATTACK,
            defense=PLAYER_START_DEFENSE,
        ),
    )


def create_monster(template_key: str, level: int, position: Position) -> Entity:
    """Create a monster from a template, scaled to a level.

    Args:
        template_key: Key into MONSTER_TEMPLATES.
        level: Monster level, normally the player's level.
        position: Spawn cell, also recorded as the spawn origin.

    Returns:
        A monster entity at full health.
    """
    template = MONSTER_TEMPLATES[template_key]

    def scaled(stat: str) -> int:
        base, per_level = template[stat]
        return base + per_level * level

    hp = scaled("hp")
    return Entity(
        position=position,
        kind=EntityKind.MONSTER,
        name=template["name"],
        symbol=template["symbol"],
        color=template["color"],
        stats=StatBlock(
            hp=hp,
            max_hp=hp,
            attack=scaled("attack"),
            defense=scaled("defense"),
            level=level,
        ),
        ai=template["ai"],
        spawn_origin=position,
    )


def create_npc(position: Position, level: int = 1) -> Entity:
    """Create a friendly NPC that heals the player on contact."""
    return Entity(
        position=position,
        kind=EntityKind.NPC,
        name=NPC_TEMPLATE["name"],
        symbol=NPC_TEMPLATE["symbol"],
        color=NPC_TEMPLATE["color"],
        stats=StatBlock(hp=50, max_hp=50, level=level),
        spawn_origin=position,
    )


__all__ = [
    "Position",
    "Entity",
    "MONSTER_TEMPLATES",
    "NPC_TEMPLATE",
    "create_player",
    "create_monster",
    "create_npc",
]
