"""Tests for item, equipment and inventory models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from endless_realms.core.exceptions import InvalidGameStateError
from endless_realms.models.enums import EquipmentSlot, ItemKind, Rarity
from endless_realms.models.items import Equipment, Inventory, Item
from endless_realms.models.stats import StatBonus


def _item(kind: ItemKind = ItemKind.WEAPON, **stats: int) -> Item:
    return Item(name="Thing", kind=kind, rarity=Rarity.COMMON, stats=StatBonus(**stats))


class TestItem:
    def test_slot(self) -> None:
        assert _item(ItemKind.HELM).slot == EquipmentSlot.HELM
        assert _item(ItemKind.CONSUMABLE).slot is None

    def test_frozen(self) -> None:
        item = _item()
        with pytest.raises(ValidationError):
            item.name = "Other"  # type: ignore[misc]

    def test_unique_ids(self) -> None:
        assert _item().id != _item().id


class TestStatBonus:
    def test_none_distinct_from_zero(self) -> None:
        bonus = StatBonus(attack=0, dodge=3)

        assert bonus.present() == {"attack": 0, "dodge": 3}
        assert bonus.defense is None

    def test_equipment_bonuses_exclude_consumable_fields(self) -> None:
        bonus = StatBonus(hp=40, experience=10, max_hp=5)

        assert bonus.equipment_bonuses() == {"max_hp": 5}

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StatBonus(mana=3)  # type: ignore[call-arg]


class TestEquipment:
    """Tests for equipment slots."""

    def test_place_returns_previous(self) -> None:
        equipment = Equipment()
        first = _item(attack=1)
        second = _item(attack=2)

        assert equipment.place(first) is None
        assert equipment.place(second) == first
        assert equipment.weapon == second
        assert equipment.equipped() == [second]

    def test_consumable_rejected(self) -> None:
        with pytest.raises(InvalidGameStateError):
            Equipment().place(_item(ItemKind.CONSUMABLE, hp=10))

    def test_remove(self) -> None:
        equipment = Equipment()
        ring = _item(ItemKind.ACCESSORY, attack=1)
        equipment.place(ring)

        assert equipment.remove("accessory") == ring
        assert equipment.accessory is None
        assert equipment.equipped() == []


class TestInventory:
    """Tests for bounded inventory."""

    def test_capacity_enforced(self) -> None:
        inventory = Inventory(capacity=2)
        kept = [_item(), _item()]
        for item in kept:
            assert inventory.add(item)

        assert inventory.is_full
        assert not inventory.add(_item())
        assert inventory.items == kept

    def test_get_and_remove(self) -> None:
        inventory = Inventory()
        item = _item()
        inventory.add(item)

        assert inventory.get(item.id) == item
        assert inventory.remove(item.id) == item
        assert inventory.remove(item.id) is None
        assert inventory.size == 0
