"""
Placement modes.

A placement mode decides which hotbar slot a right-click places from.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..config import FilterSettings
from ..filters import ItemFilter
from ..models.inventory import ItemSlot
from ..models.player import Player
from .selector import SlotSelector

logger = logging.getLogger(__name__)

SettingsProvider = Callable[[], FilterSettings]


class PlacementMode(ABC):
    """Base class for all placement modes. Holds the shared filter."""

    name: str = "base"

    def __init__(self, settings_provider: SettingsProvider, selector: Optional[SlotSelector] = None):
        self.filter = ItemFilter(settings_provider)
        self.selector = selector or SlotSelector()

    @property
    def settings(self) -> FilterSettings:
        return self.filter.settings

    def is_item_allowed(self, slot: ItemSlot) -> bool:
        """Checks a slot's content against the configured filters."""
        return self.filter(slot.item)

    @abstractmethod
    def get_placement_slot(self, player: Player, server_available: bool = False) -> Optional[int]:
        """
        Returns the hotbar index to place from, or None if no slot is valid.
        """


class RandomMode(PlacementMode):
    """Places from a random allowed slot on every click."""

    name = "random"

    def get_placement_slot(self, player: Player, server_available: bool = False) -> Optional[int]:
        settings = self.settings
        return self.selector.select_from_inventories(
            player.inventories,
            player.active_hotbar_slot,
            settings,
            server_available=server_available,
        )
