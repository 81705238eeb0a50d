"""World tile model.

Tiles are derived views of the procedural terrain function and are never
the authoritative copy of the map.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from endless_realms.models.entities import Position
from endless_realms.models.enums import TerrainKind


class Tile(BaseModel):
    """A single visible cell."""

    model_config = ConfigDict(frozen=True)

    position: Position
    terrain: TerrainKind
    visible: bool = Field(default=True)

    @property
    def is_passable(self) -> bool:
        return self.terrain.is_passable


__all__ = ["Tile"]
