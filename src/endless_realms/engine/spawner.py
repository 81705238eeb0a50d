"""Spawning and despawning around the player."""

from __future__ import annotations

from endless_realms.core.config import Settings
from endless_realms.core.logging import get_logger
from endless_realms.engine.dice import DiceRoller
from endless_realms.engine.world import is_passable
from endless_realms.models.entities import Entity, Position, create_monster, create_npc
from endless_realms.models.game_state import GameState


logger = get_logger(__name__)


# Checked top to bottom against a uniform draw; the first threshold exceeded wins
MONSTER_ROLL_TABLE: tuple[tuple[float, str], ...] = (
    (0.9, "tiger_king"),
    (0.6, "bandit"),
)
DEFAULT_MONSTER = "wild_dog"


def monster_for_roll(roll: float) -> str:
    """Template key for a uniform roll in [0, 1)."""
    for threshold, template_key in MONSTER_ROLL_TABLE:
        if roll > threshold:
            return template_key
    return DEFAULT_MONSTER


class Spawner:
    """Populate the visible window and cull entities that fell behind."""

    def __init__(self, dice: DiceRoller, settings: Settings) -> None:
        self._dice = dice
        self._settings = settings

    def maybe_spawn(self, state: GameState) -> Entity | None:
        """Roll for a spawn and place it if the drawn cell is valid.

        A single cell is drawn per attempt. If it is the player's cell,
        impassable, or occupied, nothing spawns this turn.

        Returns:
            The spawned entity, or None.
        """
        spawn = self._settings.spawn
        if state.directory.monster_count >= spawn.max_monsters:
            return None
        if not self._dice.chance(spawn.spawn_chance):
            return None

        radius = self._settings.world.view_radius
        player_cell = state.player.position
        cell = player_cell.offset(
            self._dice.between(-radius, radius),
            self._dice.between(-radius, radius),
        )
        if not self.is_valid_cell(state, cell):
            return None

        level = state.player.stats.level
        if self._dice.chance(spawn.npc_chance):
            entity = create_npc(cell, level=level)
        else:
            entity = create_monster(monster_for_roll(self._dice.fraction()), level, cell)

        state.directory.add(entity)
        logger.info(
            "Entity spawned",
            name=entity.name,
            kind=entity.kind,
            position=cell.as_tuple(),
            level=level,
        )
        return entity

    def is_valid_cell(self, state: GameState, cell: Position) -> bool:
        """A spawn cell must be passable, empty, and not the player's."""
        if cell == state.player.position:
            return False
        if not is_passable(cell.x, cell.y):
            return False
        return state.directory.occupant_at(cell) is None

    def despawn_distant(self, state: GameState) -> list[Entity]:
        """Remove every entity beyond the despawn distance from the player."""
        limit = self._settings.despawn_distance
        player_cell = state.player.position
        removed = []
        for entity in state.directory.all():
            if entity.position.chebyshev(player_cell) > limit:
                state.directory.remove(entity.id)
                removed.append(entity)

        if removed:
            logger.debug("Entities despawned", count=len(removed), names=[e.name for e in removed])
        return removed


__all__ = [
    "MONSTER_ROLL_TABLE",
    "monster_for_roll",
    "Spawner",
]
