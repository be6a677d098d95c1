"""
Item Filter
===========

Decides whether an item may be picked by random placement.

Rules are evaluated in order, the first decisive rule wins:

    1. empty slot / non-block item      -> deny
    2. blacklist match                  -> deny (whitelist cannot override)
    3. whitelist match                  -> allow (skips category checks)
    4. strict whitelist, no match       -> deny
    5. category checks                  -> food, block entities, plants,
                                           liquids, clay & pottery
    6. otherwise                        -> allow
"""
from __future__ import annotations

import logging
from typing import Optional

from ..config import FilterSettings
from ..models.item import ItemDescriptor, MaterialClass
from .patterns import matches_any_pattern

logger = logging.getLogger(__name__)

STORAGE_ENTITY_KEYWORDS = ("chest", "container", "barrel", "vessel")
STORAGE_PATH_KEYWORDS = ("chest", "crate", "storagevessel")

CLAY_EXEMPT_KEYWORDS = ("strawbedding", "rawclay")
CLAY_PATH_KEYWORDS = (
    "raw",
    "fired",
    "crock",
    "bowl",
    "planter",
    "flowerpot",
    "storagevessel",
    "jug",
    "watering",
    "mold",
)
CLAY_PATH_PREFIXES = ("item-shingle",)


def _trace(settings: FilterSettings, message: str):
    if settings.debug_mode:
        logger.info(message)


def is_food(item: ItemDescriptor, settings: Optional[FilterSettings] = None) -> bool:
    """Meals, cheese and anything carrying nutrition."""
    settings = settings or FilterSettings()

    if item.is_meal:
        _trace(settings, f"Detected as meal: {item.code}")
        return True

    if "cheese" in item.path:
        _trace(settings, f"Detected as cheese: {item.code}")
        return True

    if item.has_nutrition:
        _trace(settings, f"Detected as food via nutrition: {item.code}")
        return True

    return False


def is_storage_block_entity(item: ItemDescriptor) -> bool:
    """Chests, crates, vessels and other containers."""
    if item.entity_class is None:
        return False

    entity_class = item.entity_class.lower()
    path = item.path.lower()

    return (
        any(keyword in entity_class for keyword in STORAGE_ENTITY_KEYWORDS)
        or any(keyword in path for keyword in STORAGE_PATH_KEYWORDS)
    )


def is_clay_or_pottery(item: ItemDescriptor) -> bool:
    """Raw and fired clay shapes, pottery and molds. Raw clay itself is exempt."""
    path = item.path

    if not path:
        return False

    if any(keyword in path for keyword in CLAY_EXEMPT_KEYWORDS):
        return False

    return (
        any(keyword in path for keyword in CLAY_PATH_KEYWORDS)
        or path.startswith(CLAY_PATH_PREFIXES)
    )


def is_allowed(item: Optional[ItemDescriptor], settings: FilterSettings) -> bool:
    """
    Checks one slot's item against all configured filters.

    Args:
        item: Item in the slot, None for an empty slot
        settings: Settings snapshot

    Returns:
        True if random placement may pick this item
    """
    if item is None or not item.is_block:
        return False

    code = item.code
    debug = settings.debug_mode

    _trace(settings, f"Checking item: {code}")

    # Blacklist always wins
    if settings.blacklist_patterns and matches_any_pattern(code, settings.blacklist_patterns, debug):
        _trace(settings, f"Item blocked by blacklist: {code}")
        return False

    if settings.whitelist_patterns:
        if matches_any_pattern(code, settings.whitelist_patterns, debug):
            mode = "strict" if settings.whitelist_only else "permissive, skipping filters"
            _trace(settings, f"Item allowed by whitelist ({mode}): {code}")
            return True

        if settings.whitelist_only:
            _trace(settings, f"Item rejected - not in whitelist (strict): {code}")
            return False

    food = is_food(item, settings)

    if not settings.allow_food and food:
        _trace(settings, f"Item rejected - is food: {code}")
        return False

    if not settings.allow_block_entities and not food:
        if is_storage_block_entity(item):
            _trace(settings, f"Item rejected - is storage block entity: {code}")
            return False

        # Signs and anything else with an entity
        if item.entity_class is not None:
            _trace(settings, f"Item rejected - is block entity: {code}")
            return False

    if not settings.allow_plants and item.material == MaterialClass.PLANT:
        _trace(settings, f"Item rejected - is plant: {code}")
        return False

    if not settings.allow_liquids and item.material == MaterialClass.LIQUID:
        _trace(settings, f"Item rejected - is liquid: {code}")
        return False

    if not settings.allow_clay and is_clay_or_pottery(item):
        _trace(settings, f"Item rejected - is clay/pottery: {code}")
        return False

    _trace(settings, f"Item allowed - passed all filters: {code}")
    return True


class ItemFilter:
    """
    Binds the filter to a settings provider.

    The provider is called once per evaluation so that every check sees a
    whole snapshot, never a half-applied change.
    """

    def __init__(self, settings_provider):
        self._settings_provider = settings_provider

    @property
    def settings(self) -> FilterSettings:
        return self._settings_provider()

    def __call__(self, item: Optional[ItemDescriptor]) -> bool:
        return is_allowed(item, self.settings)
