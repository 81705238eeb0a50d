"""Inventory and equipment management.

The InventoryManager is the only code that moves items between the
inventory and the equipment slots, so an item is never in both. Player
mistakes (full inventory, mismatched synthesis) are narrated to the game
log and leave state untouched; they are never raised.
"""

from __future__ import annotations

from uuid import UUID

from endless_realms.core.config import Settings
from endless_realms.core.constants import ORIGIN
from endless_realms.core.logging import get_logger
from endless_realms.engine.dice import DiceRoller
from endless_realms.engine.forge import ItemForge
from endless_realms.engine.progression import gain_experience
from endless_realms.engine.stats import effective_stats
from endless_realms.engine.world import generate_area
from endless_realms.models.entities import Position
from endless_realms.models.enums import EquipmentSlot, LogCategory, SpecialEffect
from endless_realms.models.game_state import GameState
from endless_realms.models.items import Item


logger = get_logger(__name__)

TAG_INHERIT_CHANCE = 50
"""Percent chance each parent tag carries over to a synthesized item."""

INHERITANCE_NOTE = "Echoes of its forebears linger within."


class InventoryManager:
    """Apply item commands to a GameState."""

    def __init__(
        self,
        state: GameState,
        forge: ItemForge,
        dice: DiceRoller,
        settings: Settings,
    ) -> None:
        self._state = state
        self._forge = forge
        self._dice = dice
        self._settings = settings

    # -------------------------------------------------------------------------
    # Collection
    # -------------------------------------------------------------------------

    def add_item(self, item: Item) -> bool:
        """Store a found item, narrating the result.

        Returns:
            False if the inventory was full and the item was lost.
        """
        if not self._state.inventory.add(item):
            self._state.log.add("Inventory full! Item lost.", LogCategory.INFO)
            logger.info("Item lost to full inventory", item=item.name)
            return False

        self._state.log.add(f"Found {item.name} ({item.rarity.value})", LogCategory.LOOT)
        return True

    # -------------------------------------------------------------------------
    # Equipment
    # -------------------------------------------------------------------------

    def equip(self, item_id: UUID) -> bool:
        """Equip an inventory item, or use it if it is a consumable.

        The displaced item, if any, goes back into the inventory. Ids that
        are not in the inventory are ignored.

        Returns:
            True if state changed.
        """
        item = self._state.inventory.get(item_id)
        if item is None:
            logger.debug("Equip ignored, item not in inventory", item_id=str(item_id))
            return False

        if item.is_consumable:
            return self.consume(item_id)

        self._state.inventory.remove(item.id)
        previous = self._state.equipment.place(item)
        if previous is not None:
            self._state.inventory.add(previous)

        self._state.log.add(f"Equipped {item.name}", LogCategory.INFO)
        logger.debug(
            "Item equipped",
            item=item.name,
            slot=item.slot,
            replaced=previous.name if previous else None,
        )
        return True

    def unequip(self, slot: EquipmentSlot | str) -> bool:
        """Move an equipped item back to the inventory if there is room.

        Unknown slot names are rejected without touching state.

        Returns:
            True if the slot was emptied.
        """
        try:
            slot = EquipmentSlot(slot)
        except ValueError:
            logger.warning("Rejected unequip slot", slot=slot)
            return False

        item = self._state.equipment.get(slot)
        if item is None:
            return False

        if self._state.inventory.is_full:
            self._state.log.add("Inventory full!", LogCategory.INFO)
            return False

        self._state.equipment.remove(slot)
        self._state.inventory.add(item)
        self._state.log.add(f"Unequipped {item.name}", LogCategory.INFO)
        return True

    # -------------------------------------------------------------------------
    # Consumables
    # -------------------------------------------------------------------------

    def consume(self, item_id: UUID) -> bool:
        """Use a consumable from the inventory.

        Every effect the item carries is applied independently: HP
        restore, full heal, teleport, XP grant. The item is removed only
        if at least one effect fired; an inert item stays in the
        inventory.

        Returns:
            True if the item was used up.
        """
        state = self._state
        item = state.inventory.get(item_id)
        if item is None or not item.is_consumable:
            return False

        player = state.player
        max_hp = effective_stats(player.stats, state.equipment).max_hp
        fired = False

        if item.stats.hp is not None:
            restored = player.stats.heal(item.stats.hp, cap=max_hp)
            fired = True
            if restored:
                state.log.add(f"Restored {restored} HP.", LogCategory.INFO)

        if item.effect == SpecialEffect.FULL_HEAL:
            player.stats.hp = max(player.stats.hp, max_hp)
            fired = True
            state.log.add("You have been fully healed.", LogCategory.INFO)

        if item.effect == SpecialEffect.TELEPORT:
            fired = self._teleport_to_origin() or fired

        if item.effect == SpecialEffect.GRANT_XP and item.stats.experience:
            fired = True
            state.log.add(f"Gained {item.stats.experience} experience.", LogCategory.INFO)
            gain_experience(player, item.stats.experience, state.log, self._settings.progression)

        if not fired:
            logger.debug("Consumable had no effect", item=item.name)
            return False

        state.inventory.remove(item.id)
        state.log.add(f"Used {item.name}", LogCategory.INFO)
        return True

    def _teleport_to_origin(self) -> bool:
        state = self._state
        origin = Position.of(*ORIGIN)
        if state.directory.occupant_at(origin) is not None:
            state.log.add("The way home is blocked.", LogCategory.INFO)
            return False

        state.player.position = origin
        state.tiles = generate_area(origin, self._settings.world.view_radius)
        state.log.add("You are whisked back to the origin.", LogCategory.INFO)
        logger.info("Player teleported", position=origin.as_tuple())
        return True

    # -------------------------------------------------------------------------
    # Synthesis
    # -------------------------------------------------------------------------

    def synthesize(self, first_id: UUID, second_id: UUID) -> Item | None:
        """Merge two inventory items of equal rarity into one of the next tier.

        The result keeps the first item's kind, is forged at the player's
        level, and may inherit each of the parents' visual tags.

        Args:
            first_id: Id of the item whose kind is kept.
            second_id: Id of the other parent.

        Returns:
            The new item, or None if synthesis was refused.
        """
        state = self._state
        first = state.inventory.get(first_id)
        second = state.inventory.get(second_id)
        if first is None or second is None:
            return None

        if first.id == second.id:
            state.log.add("Synthesis needs two different items.", LogCategory.INFO)
            return None
        if first.rarity != second.rarity:
            state.log.add("Synthesis requires items of the same rarity.", LogCategory.INFO)
            return None

        next_rarity = first.rarity.next_tier
        if next_rarity is None:
            state.log.add("Legendary items cannot be synthesized further.", LogCategory.INFO)
            return None

        state.inventory.remove(first.id)
        state.inventory.remove(second.id)

        result = self._forge.generate_item(
            state.player.stats.level,
            kind=first.kind,
            rarity=next_rarity,
        )
        rolled = {
            tag
            for tag in sorted(first.tags | second.tags)
            if self._dice.chance(TAG_INHERIT_CHANCE)
        }
        inherited = rolled - result.tags
        if inherited:
            result = result.model_copy(
                update={
                    "tags": result.tags | inherited,
                    "description": f"{result.description} {INHERITANCE_NOTE}",
                }
            )

        state.inventory.add(result)
        state.log.add(
            f"Synthesized {result.name} ({result.rarity.value})!",
            LogCategory.LOOT,
        )
        logger.info(
            "Items synthesized",
            parents=[first.name, second.name],
            result=result.name,
            rarity=result.rarity,
            inherited=sorted(inherited),
        )
        return result


__all__ = [
    "TAG_INHERIT_CHANCE",
    "INHERITANCE_NOTE",
    "InventoryManager",
]
