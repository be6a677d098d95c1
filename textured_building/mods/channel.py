"""
Swap Channel
============

One-way capability the client uses to reach the server half of the mod.
Implementations wrap whatever network channel the host provides.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .protocol import InventorySwapRequest, ModMessage

logger = logging.getLogger(__name__)


class SwapChannel(ABC):
    """Fire-and-forget sender for mod messages."""

    @abstractmethod
    def send(self, message: ModMessage):
        """Send a message to the server. Never waits for a reply."""

    def request_swap(
        self,
        source_inventory_id: str,
        source_slot_id: int,
        target_inventory_id: str,
        target_slot_id: int,
    ) -> InventorySwapRequest:
        """Ask the server to swap two slots."""
        request = InventorySwapRequest(
            source_inventory_id=source_inventory_id,
            source_slot_id=source_slot_id,
            target_inventory_id=target_inventory_id,
            target_slot_id=target_slot_id,
        )
        logger.debug(f"Requesting swap: {request.describe()}")
        self.send(request)
        return request
