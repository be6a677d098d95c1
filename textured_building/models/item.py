"""
Item models.

Flat, immutable view of what sits in an inventory slot. Adapters for a
concrete game translate the host's block/item objects into these once per
evaluation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_DOMAIN = "game"


class MaterialClass(Enum):
    """Block material families the filter cares about."""

    NONE = "none"
    PLANT = "plant"
    LIQUID = "liquid"
    OTHER = "other"


@dataclass(frozen=True)
class ItemDescriptor:
    """Describes one item type held in a slot."""

    code: str  # e.g. "game:rawclay"
    is_block: bool = True
    has_nutrition: bool = False
    material: MaterialClass = MaterialClass.NONE
    entity_class: Optional[str] = None  # e.g. "GenericTypedContainer", "Sign"
    is_meal: bool = False  # meal containers (pies, cooked meals)

    @property
    def domain(self) -> str:
        """Namespace part of the code."""
        if ":" in self.code:
            return self.code.split(":", 1)[0]
        return DEFAULT_DOMAIN

    @property
    def path(self) -> str:
        """Code without its domain."""
        if ":" in self.code:
            return self.code.split(":", 1)[1]
        return self.code

    @classmethod
    def block(cls, code: str, **kwargs) -> 'ItemDescriptor':
        """Shortcut for a block descriptor."""
        return cls(code=code, is_block=True, **kwargs)

    @classmethod
    def item(cls, code: str, **kwargs) -> 'ItemDescriptor':
        """Shortcut for a non-block item descriptor."""
        return cls(code=code, is_block=False, **kwargs)
