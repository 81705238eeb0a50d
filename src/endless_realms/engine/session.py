"""Game session facade.

GameSession is the public entry point: it owns one GameState and the
engine components that mutate it, exposes read-only views for a
presentation layer, and notifies subscribers after every command.

Example:
    >>> session = GameSession(seed=42)
    >>> unsubscribe = session.subscribe(lambda result: print(result.command))
    >>> session.move(1, 0)
    >>> session.player.position
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from endless_realms.core.config import Settings, get_settings
from endless_realms.core.constants import WELCOME_MESSAGES
from endless_realms.core.logging import bind_context, get_logger
from endless_realms.engine.dice import DiceRoller
from endless_realms.engine.forge import ItemForge
from endless_realms.engine.inventory import InventoryManager
from endless_realms.engine.turn_manager import TurnEngine
from endless_realms.models.entities import Entity
from endless_realms.models.enums import EquipmentSlot, ItemKind, LogCategory, Rarity, TurnPhase
from endless_realms.models.game_log import LogEntry
from endless_realms.models.game_state import GameState, create_game_state
from endless_realms.models.items import Equipment, Item
from endless_realms.models.stats import EffectiveStats
from endless_realms.models.world import Tile


logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """What a command did, delivered to subscribers.

    Attributes:
        command: Command name (move, equip, unequip, synthesize, restart).
        accepted: Whether the command changed state.
        turn_consumed: Whether a world turn was processed.
        phase: Engine phase after the command.
        turn: Turn counter after the command.
    """

    command: str
    accepted: bool
    turn_consumed: bool
    phase: TurnPhase
    turn: int


Observer = Callable[[CommandResult], None]


class GameSession:
    """One play session: state, engine and observers.

    Args:
        settings: Settings to use; defaults to the cached application
            settings.
        seed: Dice seed; defaults to settings.world.seed.
    """

    def __init__(self, settings: Settings | None = None, *, seed: int | None = None) -> None:
        self._settings = settings or get_settings()
        if seed is None:
            seed = self._settings.world.seed
        self._dice = DiceRoller(seed=seed)
        self._forge = ItemForge(self._dice)
        self._observers: list[Observer] = []
        self._start()

    def _start(self) -> None:
        settings = self._settings
        self._state = create_game_state(
            inventory_capacity=settings.inventory.capacity,
            log_capacity=settings.inventory.log_capacity,
        )
        self._inventory = InventoryManager(self._state, self._forge, self._dice, settings)
        self._engine = TurnEngine(self._state, self._dice, self._forge, self._inventory, settings)

        for message in WELCOME_MESSAGES:
            self._state.log.add(message, LogCategory.INFO)
        self._engine.refresh_view()

        self._state.inventory.add(self._forge.generate_item(1, ItemKind.WEAPON, Rarity.COMMON))
        self._state.inventory.add(self._forge.health_potion(1))

        bind_context(session_id=str(self._state.session_id))
        logger.info("Session started", seed=self._dice.seed)

    # -------------------------------------------------------------------------
    # Read Views
    # -------------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def player(self) -> Entity:
        return self._state.player

    @property
    def equipment(self) -> Equipment:
        return self._state.equipment

    @property
    def inventory(self) -> list[Item]:
        return list(self._state.inventory.items)

    @property
    def visible_tiles(self) -> list[Tile]:
        return list(self._state.tiles)

    @property
    def visible_entities(self) -> list[Entity]:
        """Non-player entities inside the view window."""
        return self._state.directory.nearby(
            self._state.player.position,
            self._settings.world.view_radius,
        )

    @property
    def logs(self) -> list[LogEntry]:
        """Log entries, newest first."""
        return list(self._state.log.entries)

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def effective_stats(self) -> EffectiveStats:
        return self._engine.effective_stats()

    @property
    def phase(self) -> TurnPhase:
        return self._state.phase

    @property
    def turn(self) -> int:
        return self._state.turn

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def move(self, dx: int, dy: int) -> CommandResult:
        """Move, attack or interact in a direction."""
        consumed = self._engine.move(dx, dy)
        return self._publish("move", accepted=consumed, turn_consumed=consumed)

    def equip(self, item_id: UUID) -> CommandResult:
        """Equip an inventory item; consumables are used instead."""
        return self._publish("equip", accepted=self._inventory.equip(item_id))

    def unequip(self, slot: EquipmentSlot | str) -> CommandResult:
        return self._publish("unequip", accepted=self._inventory.unequip(slot))

    def synthesize(self, first_id: UUID, second_id: UUID) -> CommandResult:
        """Merge two same-rarity items into one of the next tier."""
        result = self._inventory.synthesize(first_id, second_id)
        return self._publish("synthesize", accepted=result is not None)

    def restart(self) -> CommandResult:
        """Discard all state and begin a fresh session.

        Observers stay subscribed and the dice stream continues.
        """
        logger.info("Session restarting", turn=self._state.turn)
        self._start()
        return self._publish("restart", accepted=True)

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Register a callback invoked after every command.

        Returns:
            A function that removes the subscription.
        """
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _publish(self, command: str, *, accepted: bool, turn_consumed: bool = False) -> CommandResult:
        result = CommandResult(
            command=command,
            accepted=accepted,
            turn_consumed=turn_consumed,
            phase=self._state.phase,
            turn=self._state.turn,
        )
        for callback in list(self._observers):
            try:
                callback(result)
            except Exception:
                logger.exception("Session observer failed", command=command)
        return result


__all__ = [
    "CommandResult",
    "Observer",
    "GameSession",
]
