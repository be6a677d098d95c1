"""
Textured Building Filters - item allow/deny rules and pattern matching.
"""
from .evaluator import (
    ItemFilter,
    is_allowed,
    is_clay_or_pottery,
    is_food,
    is_storage_block_entity,
)
from .patterns import compile_wildcard, matches_any_pattern, matches_pattern, wildcard_to_regex

__all__ = [
    "ItemFilter",
    "is_allowed",
    "is_clay_or_pottery",
    "is_food",
    "is_storage_block_entity",
    "compile_wildcard",
    "matches_any_pattern",
    "matches_pattern",
    "wildcard_to_regex",
]
