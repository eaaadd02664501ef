"""Tailwind utility-class grammar, scales and project detection."""

from .classifier import (
    UtilityClassifier,
    UtilityMatch,
    UtilitySplit,
    find_utility_split,
    is_dynamic_utility_class,
    is_utility_class,
    match_utility_class,
)
from .definitions import (
    ARBITRARY_VALUE_PREFIXES,
    COLOR_PREFIXES,
    NARROW_SCALE_PREFIXES,
    NEGATIVE_VALUE_PREFIXES,
    SPACING_SCALE_PREFIXES,
    UTILITY_SCALES,
)
from .detector import TailwindDetector
from .variants import is_valid_variant, split_variants

__all__ = [
    "ARBITRARY_VALUE_PREFIXES",
    "COLOR_PREFIXES",
    "NARROW_SCALE_PREFIXES",
    "NEGATIVE_VALUE_PREFIXES",
    "SPACING_SCALE_PREFIXES",
    "TailwindDetector",
    "UTILITY_SCALES",
    "UtilityClassifier",
    "UtilityMatch",
    "UtilitySplit",
    "find_utility_split",
    "is_dynamic_utility_class",
    "is_utility_class",
    "is_valid_variant",
    "match_utility_class",
    "split_variants",
]
