"""Experience and level progression."""

from __future__ import annotations

from endless_realms.core.config import ProgressionSettings
from endless_realms.core.logging import get_logger
from endless_realms.models.entities import Entity
from endless_realms.models.enums import LogCategory
from endless_realms.models.game_log import GameLog


logger = get_logger(__name__)


def experience_threshold(level: int, settings: ProgressionSettings | None = None) -> int:
    """XP needed to advance from a level."""
    settings = settings or ProgressionSettings()
    return level * settings.xp_per_level


def gain_experience(
    player: Entity,
    amount: int,
    log: GameLog,
    settings: ProgressionSettings | None = None,
) -> int:
    """Grant experience and apply any level-ups it causes.

    Each level-up subtracts the threshold, raises level, max HP, attack
    and defense, heals the player to at least the new max HP and writes a
    LEVEL UP entry. With multi_level_up disabled at most one level is
    gained per call and the surplus XP is kept.

    Args:
        player: The player entity, mutated in place.
        amount: XP to grant; non-positive amounts are ignored.
        log: Game log to narrate level-ups into.
        settings: Progression tunables.

    Returns:
        Number of levels gained.
    """
    if amount <= 0:
        return 0

    settings = settings or ProgressionSettings()
    stats = player.stats
    stats.experience += amount

    gained = 0
    while stats.experience >= experience_threshold(stats.level, settings):
        stats.experience -= experience_threshold(stats.level, settings)
        stats.level += 1
        stats.max_hp += settings.hp_growth
        stats.hp = max(stats.hp, stats.max_hp)
        stats.attack += settings.attack_growth
        stats.defense += settings.defense_growth
        gained += 1

        log.add(f"LEVEL UP! You are now level {stats.level}", LogCategory.LEVEL)
        logger.info("Player leveled up", level=stats.level, experience=stats.experience)

        if not settings.multi_level_up:
            break

    return gained


__all__ = [
    "experience_threshold",
    "gain_experience",
]
