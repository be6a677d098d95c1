"""
Textured Building Placement - placement modes and slot selection.
"""
from .modes import PlacementMode, RandomMode
from .selector import SlotSelector, SlotRef

__all__ = [
    "PlacementMode",
    "RandomMode",
    "SlotSelector",
    "SlotRef",
]
