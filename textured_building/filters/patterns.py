"""
Pattern Matching
================

Whitelist/blacklist entries are either exact item codes or glob patterns
where ``*`` stands for any sequence of characters:

    game:log-oak        exact match only
    game:*clay*         game:rawclay, game:firedclay, game:clayware
    *:chest-*           any domain
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, Pattern

logger = logging.getLogger(__name__)

WILDCARD = "*"


def wildcard_to_regex(pattern: str) -> str:
    """Translates a glob pattern into an anchored regex."""
    escaped = re.escape(pattern)
    return "^" + escaped.replace(re.escape(WILDCARD), ".*") + "$"


@lru_cache(maxsize=512)
def compile_wildcard(pattern: str) -> Pattern[str]:
    return re.compile(wildcard_to_regex(pattern), re.DOTALL)


def matches_pattern(code: str, pattern: str, debug: bool = False) -> bool:
    """Checks a code against a single pattern."""
    if not pattern:
        return False

    try:
        if WILDCARD not in pattern:
            return code == pattern
        return compile_wildcard(pattern).match(code) is not None
    except (re.error, TypeError) as e:
        if debug:
            logger.warning(f"Invalid pattern '{pattern}': {e}")
        return False


def matches_any_pattern(code: str, patterns: Iterable[str], debug: bool = False) -> bool:
    """Checks if a code matches any pattern in the list."""
    if not patterns:
        return False

    for pattern in patterns:
        if matches_pattern(code, pattern, debug=debug):
            return True

    return False
