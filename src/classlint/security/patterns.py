"""Ignore-pattern compilation with a backtracking guard."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Final

logger = logging.getLogger(__name__)

NESTED_QUANTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(\(.*[+*].*\)[+*])|([+*].*[+*])"
)
# A repeated group whose body is itself quantified or holds alternatives.
QUANTIFIED_GROUP_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\([^)]*(?:[+*|]|\{\d)[^)]*\)[+*{]"
)
QUANTIFIERS: Final[frozenset[str]] = frozenset("+*{")


def is_unsafe_pattern(pattern: str) -> bool:
    """Return True for shapes prone to catastrophic backtracking."""
    if "(" not in pattern or QUANTIFIERS.isdisjoint(pattern):
        return False
    if QUANTIFIED_GROUP_PATTERN.search(pattern) is not None:
        return True
    if "+" not in pattern or "*" not in pattern:
        return False
    return NESTED_QUANTIFIER_PATTERN.search(pattern) is not None


def compile_ignore_patterns(patterns: Iterable[object]) -> tuple[re.Pattern[str], ...]:
    """Compile usable patterns in order; invalid or unsafe entries are dropped."""
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        if not isinstance(pattern, str):
            continue
        if is_unsafe_pattern(pattern):
            logger.debug("Skipping potentially dangerous regex pattern: %s", pattern)
            continue
        try:
            compiled.append(re.compile(pattern))
        except re.error:
            logger.debug("Invalid regex pattern skipped: %s", pattern)
    return tuple(compiled)
