"""Procedural item generation.

The ItemForge turns a level (and optionally a forced kind or rarity) into
a finished Item: material tier, per-kind stat shape, random affixes and a
rarity multiplier for equipment, or a weighted consumable recipe.

Generation order for equipment:
    1. Material tier from level // 4 with +-1 jitter, clamped.
    2. Base magnitude level * 2 * material scale, shaped per kind.
    3. Affixes drawn with replacement; proportional boosts apply to the
       base stats they name.
    4. Rarity multiplier on the base stats, floored to integers.
    5. Flat affix bonuses and visual tags added on top.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from endless_realms.core.logging import get_logger
from endless_realms.engine.dice import DiceRoller
from endless_realms.models.enums import ItemKind, Rarity, SpecialEffect, VisualTag
from endless_realms.models.items import Item
from endless_realms.models.stats import StatBonus


logger = get_logger(__name__)


# =============================================================================
# Rarity Tables
# =============================================================================

RARITY_WEIGHTS: tuple[tuple[Rarity, float], ...] = (
    (Rarity.COMMON, 0.60),
    (Rarity.RARE, 0.30),
    (Rarity.EPIC, 0.08),
    (Rarity.LEGENDARY, 0.02),
)

RARITY_MULTIPLIERS: dict[Rarity, float] = {
    Rarity.COMMON: 1.0,
    Rarity.RARE: 1.2,
    Rarity.EPIC: 1.5,
    Rarity.LEGENDARY: 2.0,
}

RARITY_COLORS: dict[Rarity, str] = {
    Rarity.COMMON: "#9ca3af",
    Rarity.RARE: "#3b82f6",
    Rarity.EPIC: "#a855f7",
    Rarity.LEGENDARY: "#eab308",
}

AFFIX_COUNTS: dict[Rarity, int] = {
    Rarity.COMMON: 0,
    Rarity.RARE: 1,
    Rarity.EPIC: 2,
    Rarity.LEGENDARY: 3,
}

COMMON_AFFIX_CHANCE = 10
"""Percent chance that a common item still rolls one affix."""


# =============================================================================
# Equipment Tables
# =============================================================================


@dataclass(frozen=True)
class Material:
    """A material tier; scale multiplies the base stat magnitude."""

    name: str
    scale: float


MATERIALS: tuple[Material, ...] = (
    Material("Broken", 0.5),
    Material("Iron", 1.0),
    Material("Bronze", 1.25),
    Material("Silver", 1.5),
    Material("Gold", 1.8),
    Material("Jade", 2.2),
    Material("Celestial", 2.8),
    Material("Dragon", 3.5),
)

KIND_NOUNS: dict[ItemKind, tuple[str, ...]] = {
    ItemKind.WEAPON: ("Sword", "Spear", "Saber", "Glaive"),
    ItemKind.ARMOR: ("Plate", "Mail", "Robe"),
    ItemKind.HELM: ("Helm", "Crown", "Hood"),
    ItemKind.ACCESSORY: ("Ring", "Amulet", "Charm"),
}

# Fraction of the base magnitude each kind puts into each stat
KIND_SHAPES: dict[ItemKind, tuple[tuple[str, float], ...]] = {
    ItemKind.WEAPON: (("attack", 1.0),),
    ItemKind.ARMOR: (("defense", 0.5), ("max_hp", 3.0)),
    ItemKind.HELM: (("defense", 0.3), ("max_hp", 1.5)),
    ItemKind.ACCESSORY: (("attack", 0.4), ("max_hp", 2.0)),
}


@dataclass(frozen=True)
class Affix:
    """A random modifier.

    Attributes:
        suffix: Name suffix, used only when this is the first affix.
        flat: Special-stat additions, applied after the rarity multiplier.
        boost: (stat, fraction) proportional increase of a base stat the
            item already has.
        tag: Visual tag attached to the item.
    """

    suffix: str
    flat: tuple[tuple[str, int], ...] = ()
    boost: tuple[str, float] | None = None
    tag: VisualTag | None = None


AFFIXES: tuple[Affix, ...] = (
    Affix("of Precision", flat=(("crit_rate", 5),)),
    Affix("of Ruin", flat=(("crit_damage", 30),)),
    Affix("of Evasion", flat=(("dodge", 5),)),
    Affix("of the Leech", flat=(("lifesteal", 5),)),
    Affix("of Haste", flat=(("attack_speed", 20),)),
    Affix("of Might", boost=("attack", 0.25)),
    Affix("of the Bastion", boost=("defense", 0.25)),
    Affix("of Vitality", boost=("max_hp", 0.3)),
    Affix("of Embers", flat=(("crit_damage", 20),), tag=VisualTag.FIRE),
    Affix("of Frost", flat=(("dodge", 3),), tag=VisualTag.ICE),
    Affix("of Storms", flat=(("attack_speed", 15),), tag=VisualTag.LIGHTNING),
    Affix("of Venom", flat=(("lifesteal", 3),), tag=VisualTag.POISON),
)


# =============================================================================
# Consumable Table
# =============================================================================


@dataclass(frozen=True)
class ConsumableRecipe:
    """A consumable the forge can produce.

    hp and xp are (base, per_level) pairs; (0, 0) means the field is unset.
    """

    name: str
    weight: float
    base_value: int
    blurb: str
    effect: SpecialEffect | None = None
    hp: tuple[int, int] = (0, 0)
    xp: tuple[int, int] = (0, 0)


CONSUMABLES: tuple[ConsumableRecipe, ...] = (
    ConsumableRecipe("Health Potion", 0.60, 2, "Restores health.", hp=(30, 10)),
    ConsumableRecipe(
        "Teleport Scroll", 0.15, 3, "Returns you to the origin.", effect=SpecialEffect.TELEPORT
    ),
    ConsumableRecipe(
        "Tome of Insight", 0.15, 4, "Grants experience.", effect=SpecialEffect.GRANT_XP, xp=(0, 50)
    ),
    ConsumableRecipe(
        "Elixir of Renewal", 0.10, 5, "Fully restores health.", effect=SpecialEffect.FULL_HEAL
    ),
)


# =============================================================================
# Forge
# =============================================================================


class ItemForge:
    """Stateless-per-call item generator.

    All randomness comes from the injected DiceRoller.
    """

    def __init__(self, dice: DiceRoller) -> None:
        self._dice = dice

    def generate_item(
        self,
        level: int,
        kind: ItemKind | None = None,
        rarity: Rarity | None = None,
    ) -> Item:
        """Generate an item.

        Args:
            level: Item level, normally the player's level.
            kind: Force a kind; uniform over all kinds when None.
            rarity: Force a rarity; weighted roll when None.

        Returns:
            A new Item with a fresh id.
        """
        level = max(1, level)
        kind = ItemKind(kind) if kind is not None else self._dice.pick(list(ItemKind))
        rarity = Rarity(rarity) if rarity is not None else self.roll_rarity()

        if kind == ItemKind.CONSUMABLE:
            item = self._forge_consumable(level, rarity)
        else:
            item = self._forge_equipment(level, kind, rarity)

        logger.debug(
            "Item forged",
            name=item.name,
            kind=item.kind,
            rarity=item.rarity,
            stats=item.stats.present(),
        )
        return item

    def roll_rarity(self) -> Rarity:
        """Cumulative-distribution draw over RARITY_WEIGHTS."""
        value = self._dice.fraction()
        accumulated = 0.0
        for rarity, weight in RARITY_WEIGHTS:
            accumulated += weight
            if value < accumulated:
                return rarity
        return Rarity.COMMON

    def roll_affixes(self, rarity: Rarity) -> list[Affix]:
        """Draw affixes with replacement according to rarity."""
        count = AFFIX_COUNTS[rarity]
        if rarity == Rarity.COMMON and self._dice.chance(COMMON_AFFIX_CHANCE):
            count = 1
        return [self._dice.pick(AFFIXES) for _ in range(count)]

    def material_index(self, level: int) -> int:
        """Material tier for a level: level // 4 with +-1 jitter, clamped."""
        index = level // 4 + self._dice.between(-1, 1)
        return max(0, min(index, len(MATERIALS) - 1))

    def _forge_equipment(self, level: int, kind: ItemKind, rarity: Rarity) -> Item:
        tier = self.material_index(level)
        material = MATERIALS[tier]
        noun = self._dice.pick(KIND_NOUNS[kind])
        magnitude = level * 2 * material.scale

        base = {stat: magnitude * share for stat, share in KIND_SHAPES[kind]}
        affixes = self.roll_affixes(rarity)

        for affix in affixes:
            if affix.boost is not None:
                stat, fraction = affix.boost
                if stat in base:
                    base[stat] *= 1 + fraction

        multiplier = RARITY_MULTIPLIERS[rarity]
        stats = {stat: max(1, math.floor(value * multiplier)) for stat, value in base.items()}

        tags: set[VisualTag] = set()
        for affix in affixes:
            for stat, amount in affix.flat:
                stats[stat] = stats.get(stat, 0) + amount
            if affix.tag is not None:
                tags.add(affix.tag)

        suffix = affixes[0].suffix if affixes else ""
        return Item(
            name=f"{material.name} {noun} {suffix}".strip(),
            kind=kind,
            rarity=rarity,
            stats=StatBonus(**stats),
            value=math.floor((tier + 1) * 10 * multiplier),
            description=f"A {rarity.value} {kind.value}.",
            color=RARITY_COLORS[rarity],
            tags=frozenset(tags),
        )

    def _forge_consumable(self, level: int, rarity: Rarity) -> Item:
        recipe = self._pick_recipe()
        stats: dict[str, int] = {}
        hp = recipe.hp[0] + recipe.hp[1] * level
        xp = recipe.xp[0] + recipe.xp[1] * level
        if hp:
            stats["hp"] = hp
        if xp:
            stats["experience"] = xp

        multiplier = RARITY_MULTIPLIERS[rarity]
        return Item(
            name=recipe.name,
            kind=ItemKind.CONSUMABLE,
            rarity=rarity,
            stats=StatBonus(**stats),
            value=math.floor(recipe.base_value * 10 * multiplier),
            description=f"A {rarity.value} consumable. {recipe.blurb}",
            color=RARITY_COLORS[rarity],
            effect=recipe.effect,
        )

    def _pick_recipe(self) -> ConsumableRecipe:
        value = self._dice.fraction()
        accumulated = 0.0
        for recipe in CONSUMABLES:
            accumulated += recipe.weight
            if value < accumulated:
                return recipe
        return CONSUMABLES[0]

    def health_potion(self, level: int, rarity: Rarity = Rarity.COMMON) -> Item:
        """A health potion without rolling the consumable table."""
        recipe = CONSUMABLES[0]
        return Item(
            name=recipe.name,
            kind=ItemKind.CONSUMABLE,
            rarity=rarity,
            stats=StatBonus(hp=recipe.hp[0] + recipe.hp[1] * max(1, level)),
            value=math.floor(recipe.base_value * 10 * RARITY_MULTIPLIERS[rarity]),
            description=f"A {rarity.value} consumable. {recipe.blurb}",
            color=RARITY_COLORS[rarity],
        )


__all__ = [
    "RARITY_WEIGHTS",
    "RARITY_MULTIPLIERS",
    "RARITY_COLORS",
    "AFFIX_COUNTS",
    "MATERIALS",
    "KIND_SHAPES",
    "AFFIXES",
    "CONSUMABLES",
    "Affix",
    "Material",
    "ConsumableRecipe",
    "ItemForge",
]
