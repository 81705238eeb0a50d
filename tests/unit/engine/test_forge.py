"""Tests for the ItemForge."""

from __future__ import annotations

import math
from typing import Any

import pytest

from endless_realms.engine.dice import DiceRoller
from endless_realms.engine.forge import (
    AFFIXES,
    MATERIALS,
    RARITY_COLORS,
    ItemForge,
)
from endless_realms.models.enums import ItemKind, Rarity, SpecialEffect


class TestRarityRoll:
    @pytest.mark.parametrize(
        ("fraction", "expected"),
        [
            (0.0, Rarity.COMMON),
            (0.59, Rarity.COMMON),
            (0.61, Rarity.RARE),
            (0.89, Rarity.RARE),
            (0.95, Rarity.EPIC),
            (0.99, Rarity.LEGENDARY),
        ],
    )
    def test_cumulative_weights(
        self, scripted_roller: Any, forge: ItemForge, fraction: float, expected: Rarity
    ) -> None:
        scripted_roller.fraction_value = fraction
        assert forge.roll_rarity() == expected


class TestEquipment:
    """Tests for equipment generation."""

    def test_common_weapon_shape(self, scripted_roller: Any, forge: ItemForge) -> None:
        """Level 4 with no jitter uses Iron (scale 1.0): attack = 8."""
        scripted_roller.between_value = 0

        item = forge.generate_item(4, ItemKind.WEAPON, Rarity.COMMON)

        assert item.name.startswith("Iron ")
        assert item.stats.attack == 8
        assert item.stats.defense is None
        assert item.stats.max_hp is None
        assert item.value == 20
        assert item.description == "A common weapon."
        assert item.color == RARITY_COLORS[Rarity.COMMON]

    def test_armor_shape_with_rarity(self, scripted_roller: Any, forge: ItemForge) -> None:
        """Rare armor multiplies defense and max_hp by 1.2 after shaping."""
        scripted_roller.between_value = 0
        scripted_roller.chance_default = False

        item = forge.generate_item(4, ItemKind.ARMOR, Rarity.RARE)

        # magnitude 8: defense 4 * 1.2, max_hp 24 * 1.2 (affix may boost one)
        assert item.stats.defense is not None and item.stats.defense >= 4
        assert item.stats.max_hp is not None and item.stats.max_hp >= 28
        assert item.stats.attack is None
        assert item.value == math.floor(2 * 10 * 1.2)

    def test_material_clamped_low(self, scripted_roller: Any, forge: ItemForge) -> None:
        scripted_roller.between_value = -1

        item = forge.generate_item(1, ItemKind.HELM, Rarity.COMMON)

        assert item.name.startswith("Broken ")
        # helm defense 0.3 * 1 is floored up to 1
        assert item.stats.defense == 1
        assert item.stats.max_hp == 1

    def test_material_clamped_high(self, scripted_roller: Any, forge: ItemForge) -> None:
        scripted_roller.between_value = 1

        item = forge.generate_item(200, ItemKind.ACCESSORY, Rarity.COMMON)

        assert item.name.startswith(MATERIALS[-1].name)

    def test_affix_count_by_rarity(self, forge: ItemForge) -> None:
        assert len(forge.roll_affixes(Rarity.RARE)) == 1
        assert len(forge.roll_affixes(Rarity.EPIC)) == 2
        assert len(forge.roll_affixes(Rarity.LEGENDARY)) == 3

    def test_common_affix_chance(self, scripted_roller: Any, forge: ItemForge) -> None:
        scripted_roller.chance_default = False
        assert forge.roll_affixes(Rarity.COMMON) == []

        scripted_roller.chance_default = True
        assert len(forge.roll_affixes(Rarity.COMMON)) == 1

    def test_first_affix_names_item(self, scripted_roller: Any, forge: ItemForge) -> None:
        item = forge.generate_item(5, ItemKind.WEAPON, Rarity.LEGENDARY)

        assert any(item.name.endswith(affix.suffix) for affix in AFFIXES)
        assert item.color == RARITY_COLORS[Rarity.LEGENDARY]

    def test_generation_never_raises(self, dice_roller: DiceRoller) -> None:
        forge = ItemForge(dice_roller)
        for level in (0, 1, 7, 30, 500):
            for _ in range(25):
                item = forge.generate_item(level)
                assert item.value >= 0
                if not item.is_consumable:
                    assert item.stats.equipment_bonuses()


class TestConsumables:
    @pytest.mark.parametrize(
        ("fraction", "name", "effect"),
        [
            (0.10, "Health Potion", None),
            (0.65, "Teleport Scroll", SpecialEffect.TELEPORT),
            (0.80, "Tome of Insight", SpecialEffect.GRANT_XP),
            (0.95, "Elixir of Renewal", SpecialEffect.FULL_HEAL),
        ],
    )
    def test_recipe_table(
        self,
        scripted_roller: Any,
        forge: ItemForge,
        fraction: float,
        name: str,
        effect: SpecialEffect | None,
    ) -> None:
        scripted_roller.fraction_value = fraction

        item = forge.generate_item(3, ItemKind.CONSUMABLE, Rarity.COMMON)

        assert item.name == name
        assert item.effect == effect
        assert item.kind == ItemKind.CONSUMABLE

    def test_potion_scales_with_level(self, scripted_roller: Any, forge: ItemForge) -> None:
        scripted_roller.fraction_value = 0.0

        item = forge.generate_item(3, ItemKind.CONSUMABLE, Rarity.COMMON)

        assert item.stats.hp == 60
        assert item.stats.experience is None

    def test_tome_grants_xp(self, scripted_roller: Any, forge: ItemForge) -> None:
        scripted_roller.fraction_value = 0.80

        item = forge.generate_item(2, ItemKind.CONSUMABLE, Rarity.RARE)

        assert item.stats.experience == 100
        assert item.stats.hp is None

    def test_health_potion_helper(self, forge: ItemForge) -> None:
        potion = forge.health_potion(1)

        assert potion.name == "Health Potion"
        assert potion.stats.hp == 40
        assert potion.rarity == Rarity.COMMON
