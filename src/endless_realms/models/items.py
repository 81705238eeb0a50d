"""Item, equipment and inventory models.

Items are immutable value objects produced by the ItemForge; identity is
by id. Equipment holds at most one item per slot and the Inventory is a
bounded, ordered list. Neither container knows about the other: keeping an
item out of both at once is the InventoryManager's job.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from endless_realms.core.exceptions import InvalidGameStateError
from endless_realms.models.enums import (
    EquipmentSlot,
    ItemKind,
    Rarity,
    SpecialEffect,
    VisualTag,
)
from endless_realms.models.stats import StatBonus


# =============================================================================
# Item
# =============================================================================


class Item(BaseModel):
    """A generated piece of equipment or a consumable."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(default_factory=uuid4, description="Unique item id")
    name: str = Field(description="Display name")
    kind: ItemKind
    rarity: Rarity
    stats: StatBonus = Field(default_factory=StatBonus)
    value: int = Field(default=0, ge=0, description="Monetary value")
    description: str = Field(default="")
    color: str = Field(default="#9ca3af", description="Display color (hex)")
    effect: SpecialEffect | None = Field(default=None, description="Consumable effect")
    tags: frozenset[VisualTag] = Field(default_factory=frozenset, description="Elemental auras")

    @computed_field(description="Equipment slot, None for consumables")
    @property
    def slot(self) -> EquipmentSlot | None:
        if self.kind == ItemKind.CONSUMABLE:
            return None
        return EquipmentSlot(self.kind.value)

    @property
    def is_consumable(self) -> bool:
        return self.kind == ItemKind.CONSUMABLE


# =============================================================================
# Equipment
# =============================================================================


class Equipment(BaseModel):
    """The player's four equipment slots."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    weapon: Item | None = None
    armor: Item | None = None
    helm: Item | None = None
    accessory: Item | None = None

    def get(self, slot: EquipmentSlot | str) -> Item | None:
        """Get the item in a slot."""
        return getattr(self, EquipmentSlot(slot).value)

    def place(self, item: Item) -> Item | None:
        """Put an item into its slot.

        Args:
            item: A non-consumable item.

        Returns:
            The item previously occupying the slot, if any.

        Raises:
            InvalidGameStateError: If the item is a consumable.
        """
        if item.slot is None:
            raise InvalidGameStateError(
                f"{item.name} cannot be equipped",
                current_state=item.kind.value,
                expected_states=[slot.value for slot in EquipmentSlot],
            )
        previous = self.get(item.slot)
        setattr(self, item.slot.value, item)
        return previous

    def remove(self, slot: EquipmentSlot | str) -> Item | None:
        """Empty a slot and return what was in it."""
        slot = EquipmentSlot(slot)
        item = self.get(slot)
        setattr(self, slot.value, None)
        return item

    def equipped(self) -> list[Item]:
        """All equipped items in slot order."""
        return [item for slot in EquipmentSlot if (item := self.get(slot)) is not None]


# =============================================================================
# Inventory
# =============================================================================


class Inventory(BaseModel):
    """Ordered, bounded item storage.

    Insertion order is display order. Adding past capacity is refused and
    leaves existing contents untouched; the caller decides what to narrate.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    items: list[Item] = Field(default_factory=list)
    capacity: int = Field(default=20, ge=1)

    @property
    def size(self) -> int:
        return len(self.items)

    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    def add(self, item: Item) -> bool:
        """Append an item if there is room.

        Returns:
            True if the item was stored, False if it was refused.
        """
        if self.is_full:
            return False
        self.items.append(item)
        return True

    def get(self, item_id: UUID) -> Item | None:
        """Find an item by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def remove(self, item_id: UUID) -> Item | None:
        """Remove an item by id and return it."""
        for index, item in enumerate(self.items):
            if item.id == item_id:
                return self.items.pop(index)
        return None

    def clear(self) -> None:
        self.items.clear()


__all__ = [
    "Item",
    "Equipment",
    "Inventory",
]
