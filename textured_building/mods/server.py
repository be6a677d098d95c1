"""
Inventory Swap Server
=====================

Server half of the mod. Answers availability probes and performs slot
swaps requested by clients, which is what lets random placement draw from
the backpack and character inventories.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..models.player import Player
from .protocol import (
    InventorySwapRequest,
    ModMessage,
    ServerModAvailableMessage,
)

logger = logging.getLogger(__name__)

# (player, reply) -> None
Responder = Callable[[Player, ModMessage], None]


class InventorySwapServer:
    """
    Handles mod messages arriving from clients.

    Example:
        server = InventorySwapServer(responder=channel.send_to_player)
        server.handle_message(player, InventorySwapRequest("backpack", 3, "hotbar", 0))
    """

    def __init__(self, responder: Optional[Responder] = None):
        self._responder = responder
        self.swaps_completed = 0

    def handle_message(self, player: Player, message: ModMessage):
        """Dispatch an incoming message."""
        if isinstance(message, InventorySwapRequest):
            self.handle_swap_request(player, message)
        elif isinstance(message, ServerModAvailableMessage):
            self.handle_availability_check(player)
        else:
            logger.warning(f"Unhandled message from {player.player_name}: {message!r}")

    def handle_availability_check(self, player: Player) -> ServerModAvailableMessage:
        """Confirms to the client that the server runs the mod."""
        response = ServerModAvailableMessage(available=True)
        if self._responder:
            self._responder(player, response)
        logger.debug(f"Sent mod availability to {player.player_name}")
        return response

    def handle_swap_request(self, player: Player, request: InventorySwapRequest) -> bool:
        """
        Swaps the contents of the two slots named in the request.

        Returns:
            True if the swap happened, False if the request was rejected
        """
        logger.debug(f"Processing swap request from {player.player_name}: {request.describe()}")

        source_inventory = player.get_inventory(request.source_inventory_id)
        target_inventory = player.get_inventory(request.target_inventory_id)

        if source_inventory is None:
            logger.warning(f"Source inventory not found: {request.source_inventory_id}")
            return False

        if target_inventory is None:
            logger.warning(f"Target inventory not found: {request.target_inventory_id}")
            return False

        if not source_inventory.has_slot(request.source_slot_id):
            logger.warning(f"Invalid source slot: {request.source_slot_id}")
            return False

        if not target_inventory.has_slot(request.target_slot_id):
            logger.warning(f"Invalid target slot: {request.target_slot_id}")
            return False

        source_slot = source_inventory[request.source_slot_id]
        target_slot = target_inventory[request.target_slot_id]

        source_stack = source_slot.take_out_whole()
        target_stack = target_slot.take_out_whole()
        target_slot.stack = source_stack
        source_slot.stack = target_stack

        self.swaps_completed += 1
        logger.debug(f"Swap completed for {player.player_name}")
        return True
