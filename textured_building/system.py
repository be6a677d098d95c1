"""
Client side of the random placement mod.

Wires the toggle hotkey, the right-click handler, config changes and the
server availability signal to the current placement mode.

Example:

    from textured_building import RandomPlacementSystem, create_default_config
    from textured_building.events import MouseEvent, MouseButton

    system = RandomPlacementSystem(create_default_config("config"))
    print(system.toggle())  # "Random Placement Mode: ON"

    system.on_mouse_down(MouseEvent(MouseButton.RIGHT), player)
"""
from __future__ import annotations

import logging
import random
from typing import Any, Callable, Optional

from .config import FilterSettings, ModConfig
from .events import TOGGLE_HOTKEY, TOGGLE_HOTKEY_DEFAULT, TOGGLE_HOTKEY_LABEL, MouseEvent
from .models.player import Player
from .mods.channel import SwapChannel
from .mods.protocol import ServerModAvailableMessage
from .placement import PlacementMode, RandomMode, SlotSelector

logger = logging.getLogger(__name__)


class RandomPlacementSystem:
    """Client mod system: decides the active slot on every placement click."""

    def __init__(
        self,
        config: ModConfig,
        mode: Optional[PlacementMode] = None,
        swap_channel: Optional[SwapChannel] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.swap_channel = swap_channel
        self.random_mode_enabled = False
        self.server_available = False
        self.game_paused = False

        self._settings = config.snapshot()
        config.subscribe(self._on_config_changed)

        self.mode = mode or RandomMode(
            self.get_settings,
            SlotSelector(rng=rng, swap_channel=swap_channel),
        )

    def get_settings(self) -> FilterSettings:
        """Current settings snapshot."""
        return self._settings

    # =========================================================================
    # Config
    # =========================================================================

    def _on_config_changed(self, name: str, value: Any):
        self._settings = self.config.snapshot()
        if self._settings.debug_mode:
            logger.info(
                f"Setting changed - {name}: {value} "
                f"(allow_clay: {self._settings.allow_clay}, allow_food: {self._settings.allow_food})"
            )

    def on_setting_changed(self, name: str, value: Any):
        """Applies a change pushed by an external config editor."""
        self.config.set(name, value)

    # =========================================================================
    # Input
    # =========================================================================

    def register_hotkeys(self, register: Callable[[str, str, str, Callable[[], str]], Any]):
        """
        Registers the toggle hotkey with the host input system.

        ``register`` is called as (code, label, default_key, handler); the
        handler returns the chat message to show.
        """
        register(TOGGLE_HOTKEY, TOGGLE_HOTKEY_LABEL, TOGGLE_HOTKEY_DEFAULT, self.toggle)

    def toggle(self) -> str:
        """Hotkey handler. Returns the chat message to show."""
        self.random_mode_enabled = not self.random_mode_enabled
        status = "ON" if self.random_mode_enabled else "OFF"
        return f"Random Placement Mode: {status}"

    def on_mouse_down(self, event: MouseEvent, player: Player) -> Optional[int]:
        """
        Right-click handler.

        Returns:
            The new active hotbar index, or None if nothing changed
        """
        if event.handled or not event.is_placement:
            return None
        if self.game_paused or not self.random_mode_enabled:
            return None

        held_slot = player.active_slot
        if held_slot.empty:
            return None

        if not self.mode.is_item_allowed(held_slot):
            if self._settings.debug_mode:
                logger.info(f"Ignored randomization. Holding excluded item: {held_slot.item.code}")
            return None

        if not player.has_placement_target:
            return None

        new_index = self.mode.get_placement_slot(player, server_available=self.server_available)
        if new_index is None:
            return None

        player.active_hotbar_slot = new_index
        if self._settings.debug_mode:
            logger.info(f"Swapped to slot {new_index}")
        return new_index

    # =========================================================================
    # Server
    # =========================================================================

    def request_server_check(self) -> bool:
        """Probes the server for the mod. Returns False without a channel."""
        if self.swap_channel is None:
            return False
        self.swap_channel.send(ServerModAvailableMessage(available=False))
        return True

    def on_server_available(self, message: ServerModAvailableMessage):
        """Records the server's availability reply."""
        self.server_available = bool(message.available)
        logger.info(f"Server mod available: {self.server_available}")

    def dispose(self):
        self.config.unsubscribe(self._on_config_changed)
