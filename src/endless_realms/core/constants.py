"""Game rule constants for Endless Realms.

Tunables that a host may reasonably change (view radius, spawn rates,
capacities) live in core.config instead.
"""

from __future__ import annotations

# =============================================================================
# Stat Baselines
# =============================================================================

BASE_CRIT_RATE = 5
"""Critical hit chance in percent when no item modifies it."""

BASE_CRIT_DAMAGE = 150
"""Critical damage multiplier in percent."""

BASE_DODGE = 0
"""Dodge chance in percent."""

BASE_LIFESTEAL = 0
"""Percentage of dealt damage returned as healing."""

BASE_ATTACK_SPEED = 100
"""Attack speed in percent; every point above 100 is double-strike chance."""

# =============================================================================
# Player Defaults
# =============================================================================

PLAYER_NAME = "Hero"
PLAYER_SYMBOL = "@"
PLAYER_COLOR = "#3b82f6"

PLAYER_START_HP = 100
PLAYER_START_ATTACK = 10
PLAYER_START_DEFENSE = 2

PLAYER_REGEN_PER_TURN = 1
"""Passive healing applied at the start of every processed turn."""

# =============================================================================
# Combat
# =============================================================================

MONSTER_DAMAGE_VARIANCE = 2
"""Monster hits add floor(random * 2) damage."""

XP_BASE_REWARD = 10
XP_PER_MONSTER_LEVEL = 5

# =============================================================================
# World
# =============================================================================

ORIGIN = (0, 0)
"""Player start cell and teleport destination."""

NPC_GREETING = "Stay safe out there, traveler."

WELCOME_MESSAGES = (
    "Welcome to the endless realms of Hua Xia.",
    "Use ARROW keys to move. Bump into enemies to attack.",
)

# Unit moves accepted by GameSession.move
DIRECTIONS = frozenset({(0, -1), (0, 1), (-1, 0), (1, 0)})


__all__ = [
    # Stat baselines
    "BASE_CRIT_RATE",
    "BASE_CRIT_DAMAGE",
    "BASE_DODGE",
    "BASE_LIFESTEAL",
    "BASE_ATTACK_SPEED",
    # Player
    "PLAYER_NAME",
    "PLAYER_SYMBOL",
    "PLAYER_COLOR",
    "PLAYER_START_HP",
    "PLAYER_START_ATTACK",
    "PLAYER_START_DEFENSE",
    "PLAYER_REGEN_PER_TURN",
    # Combat
    "MONSTER_DAMAGE_VARIANCE",
    "XP_BASE_REWARD",
    "XP_PER_MONSTER_LEVEL",
    # World
    "ORIGIN",
    "NPC_GREETING",
    "WELCOME_MESSAGES",
    "DIRECTIONS",
]
