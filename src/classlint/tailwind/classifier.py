"""Tailwind utility-class grammar recognizer."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from classlint.cache import LRUCache
from classlint.tailwind.definitions import (
    ARBITRARY_VALUE_PREFIXES,
    BOUNDED_INTEGER_PREFIXES,
    COLOR_PREFIXES,
    NARROW_SCALE_PREFIXES,
    NEGATIVE_VALUE_PREFIXES,
    UTILITY_SCALES,
    Z_INDEX_INTEGERS,
)
from classlint.tailwind.scales import (
    COLOR_NAMES,
    COLOR_SHADES,
    PALETTE_COLOR_NAMES,
    SPACING_SCALE,
)
from classlint.tailwind.variants import is_valid_variant, split_variants

_COLOR_SHADE_RE = re.compile(r"^(?P<color>[a-z]+)-(?P<shade>\d{2,3})$")
_FRACTION_RE = re.compile(r"^\d+/\d+$")
_INTEGER_RE = re.compile(r"^\d+$")
_OPACITY_RE = re.compile(r"^(?P<body>.+)/(?P<opacity>\d+|\[[^\]]+\])$")
_ARBITRARY_PROPERTY_RE = re.compile(r"^\[[a-zA-Z-]+:[^\]]+\]$")
_NAMED_CONTAINER_RE = re.compile(r"^@container(?:/[\w-]+)?$")

_COLOR_PREFIX_GROUP = (
    r"(?:text|bg|border(?:-[xytrblse])?|ring|ring-offset|from|via|to|fill|stroke|outline"
    r"|decoration|divide|placeholder|caret|accent|shadow)"
)
_DYNAMIC_PATTERNS: Final[tuple[re.Pattern[str], ...]] = tuple(
    re.compile(pattern)
    for pattern in (
        rf"^{_COLOR_PREFIX_GROUP}-\[#[0-9a-fA-F]{{3,8}}\]$",
        rf"^{_COLOR_PREFIX_GROUP}-\[(?:rgba?|hsla?|oklch|oklab|lab|lch|color-mix)\(.+\)\]$",
        rf"^{_COLOR_PREFIX_GROUP}-\[(?:color:|var\().+\]$",
        r"^-?(?:w|h|min-w|max-w|min-h|max-h|p|m|top|right|bottom|left|inset|gap|space|text"
        r"|leading|tracking|indent|scroll|size)[tlrbxyse]?-\[.+\]$",
        r"^-?(?:space|divide)-[xy]-\[.+\]$",
        r"^-?(?:translate|scale|rotate|skew)(?:-[xy])?-\[.+\]$",
        r"^(?:grid-cols|grid-rows|gap|basis|grow|shrink|order)-\[.+\]$",
        r"^animate-\[.+\]$",
        r"^content-\[.+\]$",
        r"^will-change-\[.+\]$",
        r"^(?:from|via|to)-\[\d+%\]$",
        r"^\[.+:.+\]$",
        r"^(?:shadow|drop-shadow)-\[.+\]$",
        r"^outline-\[.+\]$",
        r"^bg-\[(?:url\(|image:|length:|position:).+\]$",
        r"^[\w-]+-\((?:--[\w-]+|[a-z-]+:--[\w-]+)\)$",
    )
)


@dataclass(slots=True, frozen=True)
class UtilitySplit:
    """First successful prefix/suffix decomposition of a utility."""

    prefix: str
    suffix: str
    rule: str


@dataclass(slots=True, frozen=True)
class UtilityMatch:
    """Why a token was accepted as a utility class."""

    token: str
    variants: tuple[str, ...]
    base: str
    rule: str
    prefix: str | None = None
    suffix: str | None = None
    negative: bool = False
    important: bool = False
    opacity: str | None = None


def find_utility_split(
    candidate: str,
    allowed_prefixes: frozenset[str] | None = None,
) -> UtilitySplit | None:
    """Try every dash position and return the first valid prefix/suffix pair."""
    for index, char in enumerate(candidate):
        if char != "-":
            continue
        prefix = candidate[:index]
        suffix = candidate[index + 1 :]
        if not prefix or not suffix:
            continue
        if allowed_prefixes is not None and prefix not in allowed_prefixes:
            continue
        rule = _split_rule(prefix, suffix)
        if rule is not None:
            return UtilitySplit(prefix=prefix, suffix=suffix, rule=rule)
    return None


def match_utility_class(
    token: str,
    theme_classes: frozenset[str] = frozenset(),
) -> UtilityMatch | None:
    """Return match details when ``token`` is a valid utility class."""
    important = False
    candidate = token
    if candidate.startswith("!"):
        important = True
        candidate = candidate[1:]
    elif candidate.endswith("!"):
        important = True
        candidate = candidate[:-1]
    if not candidate:
        return None

    variants, base = split_variants(candidate)
    if not base:
        return None
    if not all(is_valid_variant(modifier) for modifier in variants):
        return None
    if base.startswith("!"):
        important = True
        base = base[1:]

    for body, opacity in _opacity_candidates(base):
        matched = _match_base(body, theme_classes)
        if matched is None:
            continue
        rule, split, negative = matched
        return UtilityMatch(
            token=token,
            variants=variants,
            base=body,
            rule=rule,
            prefix=split.prefix if split is not None else None,
            suffix=split.suffix if split is not None else None,
            negative=negative,
            important=important,
            opacity=opacity,
        )
    return None


def is_utility_class(token: str, theme_classes: frozenset[str] = frozenset()) -> bool:
    """Return True when ``token`` parses as a valid utility class."""
    return match_utility_class(token, theme_classes) is not None


def is_dynamic_utility_class(token: str) -> bool:
    """Return True for utility-shaped tokens whose value cannot be proven statically."""
    if "${" in token or "{{" in token:
        return True
    variants, base = split_variants(token.lstrip("!"))
    if not all(is_valid_variant(variant) for variant in variants):
        return False
    return any(pattern.match(base) for pattern in _DYNAMIC_PATTERNS)


class UtilityClassifier:
    """Memoised classifier for one analysis run, aware of project theme classes."""

    def __init__(
        self,
        theme_classes: frozenset[str] = frozenset(),
        cache_size: int = 1000,
    ) -> None:
        self._theme_classes = theme_classes
        self._cache: LRUCache[str, UtilityMatch | bool] = LRUCache(cache_size)

    @property
    def theme_classes(self) -> frozenset[str]:
        return self._theme_classes

    def match(self, token: str) -> UtilityMatch | None:
        cached = self._cache.get(token)
        if cached is None:
            cached = match_utility_class(token, self._theme_classes) or False
            self._cache.set(token, cached)
        return cached or None

    def is_utility_class(self, token: str) -> bool:
        return self.match(token) is not None

    def is_dynamic_utility_class(self, token: str) -> bool:
        return is_dynamic_utility_class(token)

    def clear(self) -> None:
        self._cache.clear()


def _opacity_candidates(base: str) -> Iterator[tuple[str, str | None]]:
    yield base, None
    match = _OPACITY_RE.match(base)
    if match is None:
        return
    opacity = match.group("opacity")
    if opacity.isdigit() and int(opacity) > 100:
        return
    yield match.group("body"), opacity


def _match_base(
    body: str,
    theme_classes: frozenset[str],
) -> tuple[str, UtilitySplit | None, bool] | None:
    if body in theme_classes:
        return "theme", None, body.startswith("-")
    if _ARBITRARY_PROPERTY_RE.match(body):
        return "arbitrary-property", None, False
    if _NAMED_CONTAINER_RE.match(body):
        return "container", None, False

    negative = body.startswith("-")
    positive = body[1:] if negative else body
    if not positive:
        return None
    if not negative:
        value = UTILITY_SCALES.get(positive)
        if value is True or (isinstance(value, tuple) and "" in value):
            return "exact", None, False

    split = find_utility_split(
        positive,
        allowed_prefixes=NEGATIVE_VALUE_PREFIXES if negative else None,
    )
    if split is None:
        return None
    return split.rule, split, negative


def _split_rule(prefix: str, suffix: str) -> str | None:
    if _is_arbitrary(suffix):
        return "arbitrary" if prefix in ARBITRARY_VALUE_PREFIXES else None

    value = UTILITY_SCALES.get(prefix)
    if not isinstance(value, tuple):
        return None
    if suffix in value:
        return "scale"

    if prefix in COLOR_PREFIXES:
        shade = _COLOR_SHADE_RE.match(suffix)
        if (
            shade is not None
            and shade.group("color") in PALETTE_COLOR_NAMES
            and shade.group("shade") in COLOR_SHADES
        ):
            return "color-shade"
        if suffix in COLOR_NAMES:
            return "color"

    narrow = prefix in NARROW_SCALE_PREFIXES
    if not narrow and suffix in SPACING_SCALE:
        return "spacing"

    if _INTEGER_RE.match(suffix):
        bounds = BOUNDED_INTEGER_PREFIXES.get(prefix)
        if bounds is not None and bounds[0] <= int(suffix) <= bounds[1]:
            return "integer"
        if prefix == "z" and suffix in Z_INDEX_INTEGERS:
            return "integer"

    if _FRACTION_RE.match(suffix):
        return "fraction"
    return None


def _is_arbitrary(suffix: str) -> bool:
    if len(suffix) < 3:
        return False
    return (suffix[0] == "[" and suffix[-1] == "]") or (suffix[0] == "(" and suffix[-1] == ")")
