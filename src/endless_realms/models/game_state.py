"""Game state container for a single session.

GameState is the single source of truth for one play session: the player,
their gear, the entities around them, the visible window and the log. Only
the engine mutates it; presentation code reads it through GameSession.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from endless_realms.models.directory import EntityDirectory
from endless_realms.models.entities import Entity, create_player
from endless_realms.models.enums import TurnPhase
from endless_realms.models.game_log import GameLog
from endless_realms.models.items import Equipment, Inventory
from endless_realms.models.world import Tile


class GameState(BaseModel):
    """The complete mutable state of a session."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    session_id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=datetime.now)

    player: Entity = Field(default_factory=create_player)
    equipment: Equipment = Field(default_factory=Equipment)
    inventory: Inventory = Field(default_factory=Inventory)
    directory: EntityDirectory = Field(default_factory=EntityDirectory)
    tiles: list[Tile] = Field(default_factory=list, description="Visible window")
    log: GameLog = Field(default_factory=GameLog)

    phase: TurnPhase = Field(default=TurnPhase.IDLE)
    turn: int = Field(default=0, ge=0, description="Consumed turns since start")

    @property
    def game_over(self) -> bool:
        return self.phase == TurnPhase.GAME_OVER


def create_game_state(*, inventory_capacity: int = 20, log_capacity: int = 30) -> GameState:
    """Create an empty state with configured capacities."""
    return GameState(
        inventory=Inventory(capacity=inventory_capacity),
        log=GameLog(capacity=log_capacity),
    )


__all__ = [
    "GameState",
    "create_game_state",
]
