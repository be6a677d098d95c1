"""
Filter Evaluator Tests
======================

Rule order: empty/non-block, blacklist, whitelist, strict whitelist,
category checks.
"""
import logging
from dataclasses import replace

import pytest

from textured_building.config import FilterSettings
from textured_building.filters import (
    ItemFilter,
    is_allowed,
    is_clay_or_pottery,
    is_food,
    is_storage_block_entity,
)
from textured_building.models import ItemDescriptor, MaterialClass

DEFAULTS = FilterSettings()
PERMISSIVE = FilterSettings(
    allow_food=True,
    allow_plants=True,
    allow_block_entities=True,
    allow_liquids=True,
    allow_clay=True,
)


def block(code, **kwargs):
    return ItemDescriptor.block(code, **kwargs)


class TestBasics:

    def test_empty_slot_denied(self):
        assert not is_allowed(None, PERMISSIVE)

    def test_non_block_denied(self):
        """Items that are not blocks are never candidates."""
        assert not is_allowed(ItemDescriptor.item("game:pickaxe-iron"), PERMISSIVE)

    def test_plain_block_allowed(self):
        assert is_allowed(block("game:cobblestone-granite"), DEFAULTS)

    def test_code_without_domain(self):
        item = block("planks-oak")
        assert item.domain == "game"
        assert item.path == "planks-oak"


class TestBlacklist:

    def test_exact_blacklist_denies(self):
        settings = FilterSettings(blacklist_patterns=("game:planks-oak",))
        assert not is_allowed(block("game:planks-oak"), settings)
        assert is_allowed(block("game:planks-birch"), settings)

    def test_blacklist_beats_whitelist(self):
        """Blacklist cannot be overridden by the whitelist, in either mode."""
        for strict in (False, True):
            settings = FilterSettings(
                whitelist_patterns=("game:planks-oak",),
                blacklist_patterns=("game:planks-oak",),
                whitelist_only=strict,
            )
            assert not is_allowed(block("game:planks-oak"), settings)

    def test_blacklist_beats_permissive_categories(self):
        settings = replace(PERMISSIVE, blacklist_patterns=("game:*",))
        assert not is_allowed(block("game:cobblestone-granite"), settings)

    def test_wildcard_blacklist(self):
        settings = FilterSettings(blacklist_patterns=("game:*clay*",))
        assert not is_allowed(block("game:clayware"), settings)
        assert is_allowed(block("other:rawclay"), settings)


class TestWhitelist:

    def test_strict_denies_unlisted(self):
        """With whitelist_only, unlisted items are denied even if otherwise fine."""
        settings = FilterSettings(whitelist_patterns=("game:log-oak",), whitelist_only=True)
        assert not is_allowed(block("game:log-birch"), settings)
        assert is_allowed(block("game:log-oak"), settings)

    def test_strict_allows_listed_food(self):
        settings = FilterSettings(whitelist_patterns=("game:cheese-*",), whitelist_only=True)
        assert is_allowed(block("game:cheese-cheddar", has_nutrition=True), settings)

    def test_permissive_bypasses_categories(self):
        """A whitelisted item skips the food check in permissive mode."""
        settings = FilterSettings(whitelist_patterns=("game:cheese-cheddar",))
        assert is_allowed(block("game:cheese-cheddar", has_nutrition=True), settings)

    def test_permissive_unlisted_still_filtered(self):
        settings = FilterSettings(whitelist_patterns=("game:log-oak",))
        assert is_allowed(block("game:log-birch"), settings)
        assert not is_allowed(block("game:bowl-fired"), settings)

    def test_strict_with_empty_whitelist_is_inactive(self):
        settings = FilterSettings(whitelist_only=True)
        assert is_allowed(block("game:log-birch"), settings)


class TestFood:

    @pytest.mark.parametrize("item", [
        block("game:pie-perfect", is_meal=True),
        block("game:cheese-cheddar-1slice"),
        block("game:fruit-cherry", has_nutrition=True),
    ])
    def test_food_denied_by_default(self, item):
        assert is_food(item)
        assert not is_allowed(item, DEFAULTS)

    def test_food_allowed_when_enabled(self):
        settings = FilterSettings(allow_food=True)
        assert is_allowed(block("game:cheese-cheddar"), settings)

    def test_food_with_entity_exempt_from_entity_checks(self):
        """Food block entities (pies in a container entity) only obey the food rule."""
        pie = block("game:pie-perfect", is_meal=True, entity_class="PieContainer")
        assert is_allowed(pie, FilterSettings(allow_food=True))
        assert not is_allowed(pie, DEFAULTS)


class TestBlockEntities:

    @pytest.mark.parametrize("item", [
        block("game:chest-east", entity_class="GenericTypedContainer"),
        block("game:barrel", entity_class="Barrel"),
        block("game:storagevessel-burned", entity_class="StorageVessel"),
        block("game:crate", entity_class="Crate"),
        block("game:trunk", entity_class="Chest"),
    ])
    def test_storage_denied(self, item):
        assert is_storage_block_entity(item)
        assert not is_allowed(item, DEFAULTS)

    def test_path_keyword_needs_entity(self):
        """Path keywords only count for blocks that have an entity class."""
        assert not is_storage_block_entity(block("game:chestnut-planks"))

    def test_sign_denied_by_catch_all(self):
        sign = block("game:sign-ground-north", entity_class="Sign")
        assert not is_storage_block_entity(sign)
        assert not is_allowed(sign, DEFAULTS)

    def test_allowed_when_enabled(self):
        settings = FilterSettings(allow_block_entities=True)
        assert is_allowed(block("game:sign-ground-north", entity_class="Sign"), settings)
        assert is_allowed(block("game:chest-east", entity_class="GenericTypedContainer"), settings)


class TestMaterials:

    def test_plants(self):
        flower = block("game:flower-catmint", material=MaterialClass.PLANT)
        assert not is_allowed(flower, DEFAULTS)
        assert is_allowed(flower, FilterSettings(allow_plants=True))

    def test_liquids(self):
        water = block("game:water-still-7", material=MaterialClass.LIQUID)
        assert not is_allowed(water, DEFAULTS)
        assert is_allowed(water, FilterSettings(allow_liquids=True))

    def test_other_material_unaffected(self):
        assert is_allowed(block("game:rock-granite", material=MaterialClass.OTHER), DEFAULTS)


class TestClay:

    def test_rawclay_exempt(self):
        assert is_allowed(block("game:rawclay-blue-none"), DEFAULTS)
        assert is_allowed(block("game:rawclay"), DEFAULTS)

    def test_strawbedding_exempt(self):
        assert is_allowed(block("game:strawbedding"), DEFAULTS)

    @pytest.mark.parametrize("code", [
        "game:firedbowl",
        "game:bowl-fired",
        "game:crock-burned",
        "game:planter-red",
        "game:flowerpot-blue",
        "game:jug-fired",
        "game:wateringcan-burned",
        "game:toolmold-raw-axe",
        "game:item-shingle-fired",
        "game:rawbrick",
    ])
    def test_pottery_denied(self, code):
        assert is_clay_or_pottery(block(code))
        assert not is_allowed(block(code), DEFAULTS)

    def test_pottery_allowed_when_enabled(self):
        assert is_allowed(block("game:firedbowl"), FilterSettings(allow_clay=True))

    def test_prefix_is_anchored(self):
        assert not is_clay_or_pottery(block("game:roof-item-shingle"))

    def test_empty_path_allowed(self):
        assert not is_clay_or_pottery(block("game:"))
        assert is_allowed(block("game:"), DEFAULTS)


class TestDebugTracing:

    def test_silent_without_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger="textured_building"):
            is_allowed(block("game:firedbowl"), DEFAULTS)
        assert caplog.text == ""

    def test_traces_with_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger="textured_building"):
            is_allowed(block("game:firedbowl"), FilterSettings(debug_mode=True))
        assert "clay/pottery" in caplog.text


class TestItemFilter:

    def test_reads_provider_per_call(self):
        current = {"settings": DEFAULTS}
        item_filter = ItemFilter(lambda: current["settings"])
        bowl = block("game:firedbowl")

        assert not item_filter(bowl)
        current["settings"] = FilterSettings(allow_clay=True)
        assert item_filter(bowl)
