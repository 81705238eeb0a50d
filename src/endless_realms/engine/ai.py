"""Monster behavior.

One AI pass walks a snapshot of the live monsters in directory order.
Each monster either queues an attack on the player, steps one cell, or
stays put. Cells are reserved incrementally so two monsters never end a
pass on the same cell and none steps onto the player.

Hunters chase the player inside their engage range. Guardians only
engage while near both the player and their spawn origin; otherwise they
walk back home, regenerating on the way.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from endless_realms.core.config import AISettings
from endless_realms.core.logging import get_logger
from endless_realms.engine.world import is_passable
from endless_realms.models.entities import Entity, Position
from endless_realms.models.enums import AIKind
from endless_realms.models.game_state import GameState


logger = get_logger(__name__)


@dataclass
class AIPlan:
    """Result of one AI pass.

    Attributes:
        attackers: Monsters adjacent to the player that will attack, in
            directory order.
        moved: Number of monsters that changed cell.
    """

    attackers: list[Entity] = field(default_factory=list)
    moved: int = 0


def step_candidates(origin: Position, target: Position) -> list[Position]:
    """Cells to try when stepping toward a target, best first.

    The axis with the larger absolute delta goes first (x on ties), then
    the other axis. Axes with zero delta are skipped.
    """
    dx = target.x - origin.x
    dy = target.y - origin.y

    x_step = origin.offset((dx > 0) - (dx < 0), 0) if dx else None
    y_step = origin.offset(0, (dy > 0) - (dy < 0)) if dy else None

    ordered = (x_step, y_step) if abs(dx) >= abs(dy) else (y_step, x_step)
    return [cell for cell in ordered if cell is not None]


class MonsterAI:
    """Plans and applies monster movement for one turn."""

    def __init__(self, settings: AISettings | None = None) -> None:
        self._settings = settings or AISettings()

    def run(self, state: GameState) -> AIPlan:
        """Run one AI pass over the current monsters.

        Positions and guardian regen are applied immediately; attacks are
        returned for the TurnEngine to resolve.
        """
        plan = AIPlan()
        player_cell = state.player.position
        reserved = state.directory.occupied_cells() | {player_cell}

        for monster in state.directory.monsters():
            if monster.ai is None:
                continue

            target, engaged = self._choose_target(monster, player_cell)
            if target is None:
                continue

            if engaged and monster.position.manhattan(player_cell) == 1:
                plan.attackers.append(monster)
                continue

            if self._step(monster, target, reserved):
                plan.moved += 1

        logger.debug(
            "AI pass complete",
            monsters=state.directory.monster_count,
            attackers=len(plan.attackers),
            moved=plan.moved,
        )
        return plan

    def _choose_target(self, monster: Entity, player_cell: Position) -> tuple[Position | None, bool]:
        """Return (target cell, engaged) for a monster; None target means idle."""
        distance = monster.position.manhattan(player_cell)

        if monster.ai == AIKind.HUNTER:
            if distance <= self._settings.hunter_range:
                return player_cell, True
            return None, False

        home = monster.home
        if (
            distance <= self._settings.guardian_range
            and monster.position.manhattan(home) <= self._settings.guardian_leash
        ):
            return player_cell, True

        if monster.position == home:
            return None, False

        monster.stats.heal(self._settings.guardian_regen)
        return home, False

    def _step(self, monster: Entity, target: Position, reserved: set[Position]) -> bool:
        for cell in step_candidates(monster.position, target):
            if cell in reserved or not is_passable(cell.x, cell.y):
                continue
            reserved.discard(monster.position)
            reserved.add(cell)
            monster.position = cell
            return True
        return False


__all__ = [
    "AIPlan",
    "MonsterAI",
    "step_candidates",
]
