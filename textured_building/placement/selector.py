"""
Slot Selector
=============

Picks the slot random placement switches to: every slot the item filter
allows is a candidate and each candidate has the same chance.
"""
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from ..config import FilterSettings
from ..filters import is_allowed
from ..models.inventory import Inventory, InventoryIds, ItemSlot
from ..mods.channel import SwapChannel

logger = logging.getLogger(__name__)

# (inventory id, slot index)
SlotRef = Tuple[str, int]


class SlotSelector:
    """
    Uniform draw over the slots that pass the filter.

    Args:
        rng: Random source (a fresh ``random.Random`` by default)
        swap_channel: Channel used to pull items out of non-hotbar
            inventories. Without one only the hotbar is used.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        swap_channel: Optional[SwapChannel] = None,
    ):
        self.rng = rng or random.Random()
        self.swap_channel = swap_channel

    def eligible_slots(self, slots: Iterable[ItemSlot], settings: FilterSettings) -> List[int]:
        """Indices of the slots the filter allows, in index order."""
        eligible = []
        for index, slot in enumerate(slots):
            if is_allowed(slot.item, settings):
                eligible.append(index)
            elif settings.debug_mode and not slot.empty:
                logger.info(f"Slot {index} skipped: {slot.item.code}")
        return eligible

    def select_slot(self, slots: Sequence[ItemSlot], settings: FilterSettings) -> Optional[int]:
        """
        Picks one eligible slot.

        Returns:
            Slot index, or None when no slot is eligible
        """
        if settings.debug_mode:
            logger.info(f"Whitelist: {list(settings.whitelist_patterns)}")
            logger.info(f"WhitelistOnly: {settings.whitelist_only}")
            logger.info(f"Blacklist: {list(settings.blacklist_patterns)}")

        eligible = self.eligible_slots(slots, settings)
        if not eligible:
            return None
        return self.rng.choice(eligible)

    def select_from_inventories(
        self,
        inventories: Mapping[str, Inventory],
        active_index: int,
        settings: FilterSettings,
        server_available: bool = False,
    ) -> Optional[int]:
        """
        Picks from the hotbar, backpack and character inventories together.

        A pick outside the hotbar is swapped into the active hotbar slot
        through the swap channel and the active index is returned. Falls back
        to the hotbar alone when the feature is off or the server has not
        confirmed support.

        Returns:
            Hotbar index to make active, or None when nothing is eligible
        """
        hotbar = inventories[InventoryIds.HOTBAR]

        if not (settings.use_entire_inventory and server_available and self.swap_channel):
            return self.select_slot(hotbar.slots, settings)

        pool: List[SlotRef] = []
        for inventory_id in InventoryIds.SEARCH_ORDER:
            inventory = inventories.get(inventory_id)
            if inventory is None:
                continue
            pool.extend((inventory_id, index) for index in self.eligible_slots(inventory, settings))

        if not pool:
            return None

        inventory_id, index = self.rng.choice(pool)

        if inventory_id == InventoryIds.HOTBAR:
            return index

        if settings.debug_mode:
            logger.info(f"Picked {inventory_id}[{index}], swapping into hotbar[{active_index}]")

        self.swap_channel.request_swap(inventory_id, index, InventoryIds.HOTBAR, active_index)
        return active_index
