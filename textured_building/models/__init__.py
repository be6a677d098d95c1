"""
Textured Building Models - item, inventory and player value types.
"""
from textured_building.models.item import ItemDescriptor, MaterialClass, DEFAULT_DOMAIN
from textured_building.models.inventory import (
    HOTBAR_SIZE,
    Inventory,
    InventoryIds,
    ItemSlot,
    ItemStack,
)
from textured_building.models.player import Player

__all__ = [
    "ItemDescriptor",
    "MaterialClass",
    "DEFAULT_DOMAIN",
    "HOTBAR_SIZE",
    "Inventory",
    "InventoryIds",
    "ItemSlot",
    "ItemStack",
    "Player",
]
