"""Stat models: full stat blocks, partial item bonuses and effective stats.

A StatBlock is the complete, mutable stat sheet of an entity. A StatBonus
is the partial contribution of an item where every field is optional:
None means the item does not touch that stat, which is different from an
explicit bonus of zero. EffectiveStats is the read-only result of folding
equipped bonuses into the player's base block.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from endless_realms.core.constants import (
    BASE_ATTACK_SPEED,
    BASE_CRIT_DAMAGE,
    BASE_CRIT_RATE,
    BASE_DODGE,
    BASE_LIFESTEAL,
)
from endless_realms.models.enums import VisualTag


# Fields an equipped item may add to the wearer's stats
EQUIPMENT_BONUS_FIELDS: tuple[str, ...] = (
    "max_hp",
    "attack",
    "defense",
    "crit_rate",
    "crit_damage",
    "dodge",
    "lifesteal",
    "attack_speed",
)


class StatBlock(BaseModel):
    """Complete stats of an entity.

    Entities own their StatBlock and the engine mutates it in place
    (combat damage, regen, level growth). Hit points may drop below zero;
    that is how death is detected.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    hp: int = Field(description="Current hit points")
    max_hp: int = Field(ge=1, description="Maximum hit points")
    attack: int = Field(default=0, ge=0, description="Attack power")
    defense: int = Field(default=0, ge=0, description="Damage reduction")
    experience: int = Field(default=0, ge=0, description="XP toward the next level")
    level: int = Field(default=1, ge=1, description="Character level")

    crit_rate: int = Field(default=BASE_CRIT_RATE, ge=0, description="Critical chance (%)")
    crit_damage: int = Field(default=BASE_CRIT_DAMAGE, ge=0, description="Critical damage (%)")
    dodge: int = Field(default=BASE_DODGE, ge=0, description="Dodge chance (%)")
    lifesteal: int = Field(default=BASE_LIFESTEAL, ge=0, description="Lifesteal (%)")
    attack_speed: int = Field(default=BASE_ATTACK_SPEED, ge=0, description="Attack speed (%)")

    @computed_field(description="Whether the entity is still standing")
    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def heal(self, amount: int, *, cap: int | None = None) -> int:
        """Restore hit points without exceeding a cap.

        Args:
            amount: HP to restore.
            cap: Ceiling to clamp to. Defaults to max_hp; pass the
                effective max HP for the player.

        Returns:
            HP actually restored.
        """
        ceiling = self.max_hp if cap is None else cap
        if amount <= 0 or self.hp >= ceiling:
            return 0
        before = self.hp
        self.hp = min(self.hp + amount, ceiling)
        return self.hp - before


class StatBonus(BaseModel):
    """Partial stats carried by an item.

    hp and experience are only meaningful on consumables (restore amount
    and XP grant); the remaining fields are equipment bonuses.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hp: int | None = Field(default=None, description="HP restored when consumed")
    max_hp: int | None = Field(default=None)
    attack: int | None = Field(default=None)
    defense: int | None = Field(default=None)
    experience: int | None = Field(default=None, description="XP granted when consumed")
    crit_rate: int | None = Field(default=None)
    crit_damage: int | None = Field(default=None)
    dodge: int | None = Field(default=None)
    lifesteal: int | None = Field(default=None)
    attack_speed: int | None = Field(default=None)

    def present(self) -> dict[str, int]:
        """Return only the fields this bonus actually sets."""
        return {name: value for name, value in self.model_dump().items() if value is not None}

    def equipment_bonuses(self) -> dict[str, int]:
        """Return the set fields that apply while the item is equipped."""
        return {
            name: value
            for name, value in self.present().items()
            if name in EQUIPMENT_BONUS_FIELDS
        }


class EffectiveStats(BaseModel):
    """Player stats with equipment folded in, plus active visual tags."""

    model_config = ConfigDict(frozen=True)

    stats: StatBlock
    tags: frozenset[VisualTag] = Field(default_factory=frozenset)

    @property
    def max_hp(self) -> int:
        """Effective max HP, the cap for every player heal."""
        return self.stats.max_hp


__all__ = [
    "EQUIPMENT_BONUS_FIELDS",
    "StatBlock",
    "StatBonus",
    "EffectiveStats",
]
