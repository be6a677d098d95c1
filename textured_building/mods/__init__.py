"""
Textured Building - Client/Server Mod Messages
==============================================

The client half of the mod can only move the active hotbar index. To pull
an item out of the backpack or character inventory it asks the server half
to swap two slots:

    ┌─────────────────┐  InventorySwapRequest   ┌─────────────────────┐
    │  Client         │────────────────────────►│  Server             │
    │  RandomMode     │                         │  InventorySwapServer│
    │                 │◄────────────────────────│                     │
    └─────────────────┘ ServerModAvailableMessage└─────────────────────┘

Usage (server side):
    from textured_building.mods import InventorySwapServer

    server = InventorySwapServer(responder=send_to_player)
    server.handle_message(player, message)
"""

from .channel import SwapChannel
from .protocol import (
    CHANNEL_NAME,
    InventorySwapRequest,
    MessageType,
    ModMessage,
    ProtocolError,
    ServerModAvailableMessage,
    message_from_dict,
    message_from_json,
)
from .server import InventorySwapServer

__all__ = [
    # Channel
    "SwapChannel",

    # Protocol
    "CHANNEL_NAME",
    "InventorySwapRequest",
    "MessageType",
    "ModMessage",
    "ProtocolError",
    "ServerModAvailableMessage",
    "message_from_dict",
    "message_from_json",

    # Server
    "InventorySwapServer",
]
