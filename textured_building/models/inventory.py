"""
Inventory models.

Index-addressable slot collections standing in for the host's inventories.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .item import ItemDescriptor

HOTBAR_SIZE = 10


class InventoryIds:
    """Identifiers of the player inventories the mod knows about."""

    HOTBAR = "hotbar"
    BACKPACK = "backpack"
    CHARACTER = "character"

    # Scan order for the multi-inventory pool
    SEARCH_ORDER = (HOTBAR, BACKPACK, CHARACTER)


@dataclass
class ItemStack:
    """A stack of one item type."""

    item: ItemDescriptor
    stack_size: int = 1


@dataclass
class ItemSlot:
    """A slot holding at most one stack."""

    stack: Optional[ItemStack] = None

    @property
    def empty(self) -> bool:
        return self.stack is None

    @property
    def item(self) -> Optional[ItemDescriptor]:
        """Item in the slot, or None when empty."""
        return self.stack.item if self.stack else None

    def take_out_whole(self) -> Optional[ItemStack]:
        """Remove and return the whole stack."""
        stack, self.stack = self.stack, None
        return stack


@dataclass
class Inventory:
    """Ordered slot collection owned by the host."""

    inventory_id: str
    slots: List[ItemSlot] = field(default_factory=list)

    @classmethod
    def with_size(cls, inventory_id: str, size: int) -> 'Inventory':
        """Create an inventory of empty slots."""
        return cls(inventory_id, [ItemSlot() for _ in range(size)])

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> ItemSlot:
        return self.slots[index]

    def __iter__(self) -> Iterator[ItemSlot]:
        return iter(self.slots)

    def put(self, index: int, item: ItemDescriptor, stack_size: int = 1) -> ItemSlot:
        """Place a stack into a slot, replacing what was there."""
        slot = self.slots[index]
        slot.stack = ItemStack(item, stack_size)
        return slot

    def has_slot(self, index: int) -> bool:
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < len(self.slots)
