"""
Input events the mod reacts to.
"""
from dataclasses import dataclass
from enum import Enum


class MouseButton(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"  # placement / interaction


@dataclass(frozen=True)
class MouseEvent:
    """A mouse button press in the world."""

    button: MouseButton = MouseButton.LEFT
    handled: bool = False

    @property
    def is_placement(self) -> bool:
        return self.button == MouseButton.RIGHT


# Hotkey registered by the client system
TOGGLE_HOTKEY = "texturedbuilding-toggle"
TOGGLE_HOTKEY_LABEL = "Textured Building: Toggle Mode"
TOGGLE_HOTKEY_DEFAULT = "R"
