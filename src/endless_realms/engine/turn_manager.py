"""Turn engine: the player-action and world-update state machine.

A command moves the engine through its phases:

    IDLE -> RESOLVING_PLAYER_ACTION -> PROCESSING_TURN -> IDLE

and any point where the player dies lands in GAME_OVER, which rejects
every further action until the session restarts.

Turn processing order:
    1. Player passive regen.
    2. Monster AI pass (moves and queued attacks).
    3. Queued monster attacks; stops at player death.
    4. Spawn attempt.
    5. Despawn of distant entities.
"""

from __future__ import annotations

from endless_realms.core.config import Settings
from endless_realms.core.constants import DIRECTIONS, NPC_GREETING, PLAYER_REGEN_PER_TURN
from endless_realms.core.exceptions import InvalidGameStateError
from endless_realms.core.logging import get_logger
from endless_realms.engine.ai import MonsterAI
from endless_realms.engine.combat import AttackOutcome, CombatResolver, experience_reward
from endless_realms.engine.dice import DiceRoller
from endless_realms.engine.forge import ItemForge
from endless_realms.engine.inventory import InventoryManager
from endless_realms.engine.progression import gain_experience
from endless_realms.engine.spawner import Spawner
from endless_realms.engine.stats import effective_stats
from endless_realms.engine.world import generate_area, is_passable
from endless_realms.models.entities import Entity
from endless_realms.models.enums import LogCategory, TurnPhase
from endless_realms.models.game_state import GameState
from endless_realms.models.stats import EffectiveStats


logger = get_logger(__name__)


class TurnEngine:
    """Drive one session's turns.

    The engine mutates the GameState it was built with. Every random
    draw goes through the shared DiceRoller.
    """

    def __init__(
        self,
        state: GameState,
        dice: DiceRoller,
        forge: ItemForge,
        inventory: InventoryManager,
        settings: Settings,
    ) -> None:
        self._state = state
        self._dice = dice
        self._forge = forge
        self._inventory = inventory
        self._settings = settings
        self._combat = CombatResolver(dice)
        self._ai = MonsterAI(settings.ai)
        self._spawner = Spawner(dice, settings)

    @property
    def phase(self) -> TurnPhase:
        return self._state.phase

    def effective_stats(self) -> EffectiveStats:
        return effective_stats(self._state.player.stats, self._state.equipment)

    def _transition(self, phase: TurnPhase) -> None:
        if self._state.phase == TurnPhase.GAME_OVER:
            return
        logger.debug("Turn phase transition", from_phase=self._state.phase, to_phase=phase)
        self._state.phase = phase

    # -------------------------------------------------------------------------
    # Player Actions
    # -------------------------------------------------------------------------

    def move(self, dx: int, dy: int) -> bool:
        """Handle a directional input.

        Bumping an entity attacks or talks to it; moving onto an
        impassable cell is refused with a log entry.

        Args:
            dx: Column delta, one of -1, 0, 1.
            dy: Row delta, one of -1, 0, 1.

        Returns:
            True if a turn was consumed.
        """
        state = self._state
        if state.game_over:
            return False
        if (dx, dy) not in DIRECTIONS:
            logger.warning("Rejected move direction", dx=dx, dy=dy)
            return False

        target = state.player.position.offset(dx, dy)
        occupant = state.directory.occupant_at(target)

        if occupant is None and not is_passable(target.x, target.y):
            state.log.add("Blocked by terrain.", LogCategory.INFO)
            return False

        self._transition(TurnPhase.RESOLVING_PLAYER_ACTION)
        if occupant is None:
            state.player.position = target
            self.refresh_view()
        elif occupant.is_npc:
            self._interact(occupant)
        else:
            self._attack(occupant)

        self.process_turn()
        return True

    def _interact(self, npc: Entity) -> None:
        state = self._state
        state.log.add(f'{npc.name} says: "{NPC_GREETING}"', LogCategory.INFO)
        state.player.stats.hp = max(state.player.stats.hp, self.effective_stats().max_hp)
        state.log.add("You have been fully healed.", LogCategory.INFO)

    def _attack(self, monster: Entity) -> None:
        state = self._state
        outcome = self._combat.player_attack(state.player, self.effective_stats(), monster)
        self._narrate_player_attack(monster, outcome)
        if outcome.defender_defeated:
            self._handle_monster_death(monster)

    def _narrate_player_attack(self, monster: Entity, outcome: AttackOutcome) -> None:
        log = self._state.log
        if outcome.was_critical:
            log.add(
                f"CRITICAL! You hit {monster.name} for {outcome.damage_dealt} dmg!",
                LogCategory.CRIT,
            )
        else:
            log.add(f"You hit {monster.name} for {outcome.damage_dealt} dmg!", LogCategory.COMBAT)
        if outcome.strikes > 1:
            log.add("Double strike!", LogCategory.COMBAT)
        if outcome.healed:
            log.add(f"You drain {outcome.healed} HP.", LogCategory.COMBAT)

    def _handle_monster_death(self, monster: Entity) -> None:
        state = self._state
        state.directory.remove(monster.id)
        state.log.add(f"Defeated {monster.name}!", LogCategory.COMBAT)

        if self._dice.chance(self._settings.spawn.loot_chance):
            self._inventory.add_item(self._forge.generate_item(state.player.stats.level))

        reward = experience_reward(monster)
        gain_experience(state.player, reward, state.log, self._settings.progression)
        logger.info("Monster defeated", name=monster.name, level=monster.stats.level, xp=reward)

    def _handle_player_death(self) -> None:
        state = self._state
        state.log.add("YOU HAVE DIED.", LogCategory.COMBAT)
        state.phase = TurnPhase.GAME_OVER
        logger.info("Player died", turn=state.turn, level=state.player.stats.level)

    # -------------------------------------------------------------------------
    # World Update
    # -------------------------------------------------------------------------

    def refresh_view(self) -> None:
        """Regenerate the visible window around the player."""
        self._state.tiles = generate_area(
            self._state.player.position,
            self._settings.world.view_radius,
        )

    def process_turn(self) -> None:
        """Advance the world by one turn.

        Raises:
            InvalidGameStateError: If called after the game is over.
        """
        state = self._state
        if state.game_over:
            raise InvalidGameStateError(
                "Cannot process a turn after game over",
                current_state=state.phase.value,
                expected_states=[TurnPhase.IDLE.value, TurnPhase.RESOLVING_PLAYER_ACTION.value],
            )

        self._transition(TurnPhase.PROCESSING_TURN)
        state.turn += 1

        player = state.player
        player.stats.heal(PLAYER_REGEN_PER_TURN, cap=self.effective_stats().max_hp)

        plan = self._ai.run(state)
        for monster in plan.attackers:
            outcome = self._combat.monster_attack(monster, player, self.effective_stats())
            if outcome.dodged:
                state.log.add(f"You evaded {monster.name}'s attack!", LogCategory.COMBAT)
                continue
            state.log.add(
                f"{monster.name} hits you for {outcome.damage_dealt} dmg!",
                LogCategory.COMBAT,
            )
            if outcome.defender_defeated:
                self._handle_player_death()
                return

        self._spawner.maybe_spawn(state)
        self._spawner.despawn_distant(state)

        self._transition(TurnPhase.IDLE)
        logger.debug(
            "Turn processed",
            turn=state.turn,
            player_hp=player.stats.hp,
            position=player.position.as_tuple(),
            entities=len(state.directory.entities),
        )


__all__ = ["TurnEngine"]
