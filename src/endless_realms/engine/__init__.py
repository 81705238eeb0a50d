"""Simulation engine for Endless Realms.

Dice, world generation, item forging, combat, inventory, progression,
monster AI, spawning, the turn state machine and the session facade.
"""

from __future__ import annotations

from endless_realms.engine.ai import AIPlan, MonsterAI
from endless_realms.engine.combat import AttackOutcome, CombatResolver, experience_reward
from endless_realms.engine.dice import DiceExpression, DiceRoller
from endless_realms.engine.forge import ItemForge
from endless_realms.engine.inventory import InventoryManager
from endless_realms.engine.progression import experience_threshold, gain_experience
from endless_realms.engine.session import CommandResult, GameSession
from endless_realms.engine.spawner import Spawner
from endless_realms.engine.stats import effective_stats
from endless_realms.engine.turn_manager import TurnEngine
from endless_realms.engine.world import generate_area, is_passable, terrain_at


__all__ = [
    # Dice
    "DiceRoller",
    "DiceExpression",
    # World
    "terrain_at",
    "is_passable",
    "generate_area",
    # Items
    "ItemForge",
    "InventoryManager",
    # Rules
    "effective_stats",
    "CombatResolver",
    "AttackOutcome",
    "experience_reward",
    "experience_threshold",
    "gain_experience",
    # Turn
    "MonsterAI",
    "AIPlan",
    "Spawner",
    "TurnEngine",
    # Session
    "GameSession",
    "CommandResult",
]
