"""Combat resolution.

The resolver computes damage and mutates the defender's hit points in
place. It does not narrate, remove dead entities or grant rewards; the
TurnEngine reads the AttackOutcome and does that.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from endless_realms.core.constants import (
    BASE_ATTACK_SPEED,
    MONSTER_DAMAGE_VARIANCE,
    XP_BASE_REWARD,
    XP_PER_MONSTER_LEVEL,
)
from endless_realms.core.logging import get_logger
from endless_realms.engine.dice import DiceRoller
from endless_realms.models.entities import Entity
from endless_realms.models.stats import EffectiveStats, StatBlock


logger = get_logger(__name__)


@dataclass(frozen=True)
class StrikeResult:
    """A single resolved hit."""

    damage_dealt: int
    was_critical: bool


@dataclass
class AttackOutcome:
    """Aggregate result of one attack action.

    Attributes:
        damage_dealt: Total damage across all strikes.
        was_critical: Whether any strike was critical.
        strikes: Number of strikes that landed (0 when dodged).
        healed: HP the attacker regained through lifesteal.
        dodged: Whether the defender evaded the attack.
        defender_defeated: Whether the defender ended at hp <= 0.
    """

    damage_dealt: int = 0
    was_critical: bool = False
    strikes: int = 0
    healed: int = 0
    dodged: bool = False
    defender_defeated: bool = False

    def record(self, strike: StrikeResult) -> None:
        self.damage_dealt += strike.damage_dealt
        self.was_critical = self.was_critical or strike.was_critical
        self.strikes += 1


def experience_reward(monster: Entity) -> int:
    """XP granted for defeating a monster."""
    return XP_BASE_REWARD + monster.stats.level * XP_PER_MONSTER_LEVEL


class CombatResolver:
    """Resolve player and monster attacks using the session dice."""

    def __init__(self, dice: DiceRoller) -> None:
        self._dice = dice

    def resolve_attack(self, attacker: StatBlock, defender: Entity) -> StrikeResult:
        """Resolve one full strike and apply it to the defender.

        Damage is max(1, attack - defense), multiplied by crit_damage%
        on a critical roll, plus a level-scaled variance in
        [0, level + 2).

        Args:
            attacker: Attacker's stats (effective stats for the player).
            defender: Entity whose hp is reduced in place.

        Returns:
            The damage dealt and whether it was critical.
        """
        damage = max(1, attacker.attack - defender.stats.defense)

        was_critical = self._dice.chance(attacker.crit_rate)
        if was_critical:
            damage = math.floor(damage * attacker.crit_damage / 100)

        damage += self._dice.variance(attacker.level + 2)
        defender.stats.hp -= damage

        return StrikeResult(damage_dealt=damage, was_critical=was_critical)

    def player_attack(
        self,
        player: Entity,
        effective: EffectiveStats,
        defender: Entity,
    ) -> AttackOutcome:
        """The player strikes a monster, with lifesteal and double strike.

        Args:
            player: The player entity; its hp receives lifesteal healing.
            effective: The player's effective stats.
            defender: The monster being attacked.

        Returns:
            Aggregated outcome of the attack.
        """
        outcome = AttackOutcome()
        stats = effective.stats

        self._strike(outcome, player, effective, defender)

        extra_chance = stats.attack_speed - BASE_ATTACK_SPEED
        if extra_chance > 0 and defender.stats.is_alive and self._dice.chance(extra_chance):
            self._strike(outcome, player, effective, defender)

        outcome.defender_defeated = not defender.stats.is_alive

        logger.debug(
            "Player attack resolved",
            target=defender.name,
            damage=outcome.damage_dealt,
            critical=outcome.was_critical,
            strikes=outcome.strikes,
            healed=outcome.healed,
            target_hp=defender.stats.hp,
        )
        return outcome

    def _strike(
        self,
        outcome: AttackOutcome,
        player: Entity,
        effective: EffectiveStats,
        defender: Entity,
    ) -> None:
        strike = self.resolve_attack(effective.stats, defender)
        outcome.record(strike)

        lifesteal = effective.stats.lifesteal
        if lifesteal > 0:
            amount = math.ceil(strike.damage_dealt * lifesteal / 100)
            outcome.healed += player.stats.heal(amount, cap=effective.max_hp)

    def monster_attack(
        self,
        monster: Entity,
        player: Entity,
        effective: EffectiveStats,
    ) -> AttackOutcome:
        """A monster strikes the player.

        The player's dodge is rolled first. Monster hits never crit and
        only add a small fixed variance.
        """
        if self._dice.chance(effective.stats.dodge):
            logger.debug("Player dodged", attacker=monster.name)
            return AttackOutcome(dodged=True)

        damage = max(1, monster.stats.attack - effective.stats.defense)
        damage += self._dice.variance(MONSTER_DAMAGE_VARIANCE)
        player.stats.hp -= damage

        outcome = AttackOutcome(
            damage_dealt=damage,
            strikes=1,
            defender_defeated=not player.stats.is_alive,
        )
        logger.debug(
            "Monster attack resolved",
            attacker=monster.name,
            damage=damage,
            player_hp=player.stats.hp,
        )
        return outcome


__all__ = [
    "StrikeResult",
    "AttackOutcome",
    "CombatResolver",
    "experience_reward",
]
