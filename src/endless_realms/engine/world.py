"""Procedural world generation.

Terrain is a pure function of integer coordinates: a hashed sine of
(x, y) folded into [0, 1) and bucketed by fixed thresholds. Nothing is
stored, so the world is unbounded and only the visible window is ever
materialized.
"""

from __future__ import annotations

import math

from endless_realms.models.entities import Position
from endless_realms.models.enums import TerrainKind
from endless_realms.models.world import Tile


# Checked top to bottom; the first threshold the value exceeds wins
TERRAIN_THRESHOLDS: tuple[tuple[float, TerrainKind], ...] = (
    (0.85, TerrainKind.MOUNTAIN),
    (0.80, TerrainKind.WATER),
    (0.70, TerrainKind.FOREST),
    (0.60, TerrainKind.SAND),
)


def terrain_noise(x: int, y: int) -> float:
    """Deterministic pseudo-random value in [0, 1) for a cell."""
    return abs(math.sin(x * 12.9898 + y * 78.233) * 43758.5453) % 1


def terrain_at(x: int, y: int) -> TerrainKind:
    """Classify the terrain of a cell.

    Args:
        x: Cell column.
        y: Cell row.

    Returns:
        The terrain kind. Identical coordinates always give the same kind.
    """
    value = terrain_noise(x, y)
    for threshold, kind in TERRAIN_THRESHOLDS:
        if value > threshold:
            return kind
    return TerrainKind.GRASS


def is_passable(x: int, y: int) -> bool:
    return terrain_at(x, y).is_passable


def generate_area(center: Position, radius: int) -> list[Tile]:
    """Build the square window of (2 * radius + 1)^2 tiles around a cell.

    Tiles are ordered row by row, top to bottom and left to right.
    """
    return [
        Tile(position=Position(x=x, y=y), terrain=terrain_at(x, y))
        for y in range(center.y - radius, center.y + radius + 1)
        for x in range(center.x - radius, center.x + radius + 1)
    ]


__all__ = [
    "TERRAIN_THRESHOLDS",
    "terrain_noise",
    "terrain_at",
    "is_passable",
    "generate_area",
]
