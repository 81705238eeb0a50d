"""Entity Directory: the monsters and NPCs currently in the world.

Entities are stored in insertion order so AI passes and rendering see a
stable ordering. The player is not stored here.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from endless_realms.models.entities import Entity, Position


class EntityDirectory(BaseModel):
    """Owns the non-player entities and answers spatial queries."""

    model_config = ConfigDict(validate_assignment=True)

    entities: dict[UUID, Entity] = Field(default_factory=dict)

    def add(self, entity: Entity) -> None:
        self.entities[entity.id] = entity

    def remove(self, entity_id: UUID) -> Entity | None:
        """Remove an entity and return it."""
        return self.entities.pop(entity_id, None)

    def get(self, entity_id: UUID) -> Entity | None:
        return self.entities.get(entity_id)

    def all(self) -> list[Entity]:
        """Snapshot of every entity, in insertion order."""
        return list(self.entities.values())

    def monsters(self) -> list[Entity]:
        return [e for e in self.entities.values() if e.is_monster]

    @property
    def monster_count(self) -> int:
        return sum(1 for e in self.entities.values() if e.is_monster)

    def occupant_at(self, position: Position) -> Entity | None:
        """The entity standing on a cell, if any."""
        for entity in self.entities.values():
            if entity.position == position:
                return entity
        return None

    def nearby(self, center: Position, radius: int) -> list[Entity]:
        """Entities within a Chebyshev radius of a cell."""
        return [e for e in self.entities.values() if e.position.chebyshev(center) <= radius]

    def occupied_cells(self) -> set[Position]:
        return {e.position for e in self.entities.values()}

    def clear(self) -> None:
        self.entities.clear()


__all__ = ["EntityDirectory"]
