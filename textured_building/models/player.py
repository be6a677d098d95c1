"""
Player model.

The slice of player state the mod reads and writes: inventories by id, the
active hotbar slot and whether the player is aiming at a placement target.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .inventory import Inventory, InventoryIds, ItemSlot


@dataclass
class Player:
    """Represents a player as seen by the mod."""

    player_name: str
    inventories: Dict[str, Inventory] = field(default_factory=dict)
    active_hotbar_slot: int = 0
    has_placement_target: bool = False

    def get_inventory(self, inventory_id: str) -> Optional[Inventory]:
        if not isinstance(inventory_id, str):
            return None
        return self.inventories.get(inventory_id)

    def add_inventory(self, inventory: Inventory) -> Inventory:
        self.inventories[inventory.inventory_id] = inventory
        return inventory

    @property
    def hotbar(self) -> Inventory:
        return self.inventories[InventoryIds.HOTBAR]

    @property
    def active_slot(self) -> ItemSlot:
        """Slot currently held in hand."""
        return self.hotbar[self.active_hotbar_slot]
