"""
Textured Building - Random Placement Rules
==========================================

Random placement mode for block-building games: every placement click
switches to a random hotbar slot whose item passes a configurable filter.

Example:

    import random
    from textured_building import FilterSettings, SlotSelector, ItemDescriptor, Inventory

    settings = FilterSettings.from_strings(blacklist="game:chest-*")
    hotbar = Inventory.with_size("hotbar", 10)
    hotbar.put(0, ItemDescriptor.block("game:cobblestone-granite"))
    hotbar.put(1, ItemDescriptor.block("game:planks-oak"))

    selector = SlotSelector(rng=random.Random(42))
    index = selector.select_slot(hotbar.slots, settings)  # 0 or 1

Client/server integration:

    from textured_building import RandomPlacementSystem, create_default_config
    from textured_building.mods import InventorySwapServer
"""
__version__ = "1.0.0"

# Settings
from textured_building.config import (
    FilterSettings,
    ModConfig,
    ConfigField,
    bool_field,
    string_field,
    create_default_config,
    parse_pattern_list,
)

# Models
from textured_building.models import (
    ItemDescriptor,
    MaterialClass,
    Inventory,
    InventoryIds,
    ItemSlot,
    ItemStack,
    Player,
    HOTBAR_SIZE,
)

# Filters
from textured_building.filters import (
    ItemFilter,
    is_allowed,
    is_food,
    is_storage_block_entity,
    is_clay_or_pottery,
    matches_any_pattern,
    wildcard_to_regex,
)

# Placement
from textured_building.placement import PlacementMode, RandomMode, SlotSelector

# Client system
from textured_building.events import MouseButton, MouseEvent
from textured_building.system import RandomPlacementSystem

# Mod messages
from textured_building.mods import (
    SwapChannel,
    InventorySwapRequest,
    ServerModAvailableMessage,
    InventorySwapServer,
)

__all__ = [
    # Version
    "__version__",

    # Settings
    "FilterSettings",
    "ModConfig",
    "ConfigField",
    "bool_field",
    "string_field",
    "create_default_config",
    "parse_pattern_list",

    # Models
    "ItemDescriptor",
    "MaterialClass",
    "Inventory",
    "InventoryIds",
    "ItemSlot",
    "ItemStack",
    "Player",
    "HOTBAR_SIZE",

    # Filters
    "ItemFilter",
    "is_allowed",
    "is_food",
    "is_storage_block_entity",
    "is_clay_or_pottery",
    "matches_any_pattern",
    "wildcard_to_regex",

    # Placement
    "PlacementMode",
    "RandomMode",
    "SlotSelector",

    # Client system
    "MouseButton",
    "MouseEvent",
    "RandomPlacementSystem",

    # Mod messages
    "SwapChannel",
    "InventorySwapRequest",
    "ServerModAvailableMessage",
    "InventorySwapServer",
]
