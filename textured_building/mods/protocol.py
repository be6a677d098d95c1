"""
Mod Network Protocol
====================

Messages exchanged between the client and server halves of the mod over
the ``texturedbuilding`` channel. Both are flat, fixed-shape records; the
host channel takes care of framing.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from enum import Enum
from typing import Any, Dict, Union

CHANNEL_NAME = "texturedbuilding"


class MessageType(Enum):
    """Types of messages on the channel."""

    INVENTORY_SWAP = "inventory_swap"
    SERVER_MOD_AVAILABLE = "server_mod_available"


class ProtocolError(ValueError):
    """Raised for messages that cannot be decoded."""


@dataclass(frozen=True)
class InventorySwapRequest:
    """Client -> server: swap the contents of two slots."""

    source_inventory_id: str = ""
    source_slot_id: int = 0
    target_inventory_id: str = ""
    target_slot_id: int = 0

    type = MessageType.INVENTORY_SWAP

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['type'] = self.type.value
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def describe(self) -> str:
        return (
            f"{self.source_inventory_id}[{self.source_slot_id}] <-> "
            f"{self.target_inventory_id}[{self.target_slot_id}]"
        )


@dataclass(frozen=True)
class ServerModAvailableMessage:
    """Availability probe (client -> server) and confirmation (server -> client)."""

    available: bool = False

    type = MessageType.SERVER_MOD_AVAILABLE

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['type'] = self.type.value
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


ModMessage = Union[InventorySwapRequest, ServerModAvailableMessage]

_MESSAGE_CLASSES = {
    MessageType.INVENTORY_SWAP: InventorySwapRequest,
    MessageType.SERVER_MOD_AVAILABLE: ServerModAvailableMessage,
}


def message_from_dict(d: Dict[str, Any]) -> ModMessage:
    """Rebuilds a message from its dict form."""
    if not isinstance(d, dict):
        raise ProtocolError(f"Message must be a dict, got {type(d).__name__}")

    try:
        msg_type = MessageType(d['type'])
    except (KeyError, TypeError, ValueError) as e:
        raise ProtocolError(f"Unknown message type: {d.get('type')!r}") from e

    cls = _MESSAGE_CLASSES[msg_type]
    names = {f.name for f in fields(cls)}
    try:
        return cls(**{k: v for k, v in d.items() if k in names})
    except TypeError as e:
        raise ProtocolError(f"Malformed {msg_type.value} message: {e}") from e


def message_from_json(json_str: str) -> ModMessage:
    """Deserializes a message from a JSON string."""
    try:
        d = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Invalid JSON: {e}") from e
    if not isinstance(d, dict):
        raise ProtocolError("Message must be a JSON object")
    return message_from_dict(d)
