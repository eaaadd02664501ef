"""Theme tokens declared in ``@theme`` blocks and the utilities they generate."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from classlint.stylesheets.discovery import (
    DEFAULT_EXCLUDE_GLOBS,
    DEFAULT_STYLESHEET_GLOBS,
    discover_stylesheets,
)
from classlint.stylesheets.index import CacheKey, cache_key
from classlint.stylesheets.lexical import block_body, scan_css_blocks

logger = logging.getLogger(__name__)

TAILWIND_IMPORT_RE: Final[re.Pattern[str]] = re.compile(
    r"""@import\s+(?:url\(\s*)?["'`]?tailwindcss(?:/[\w.-]+)?["'`]?""",
)
THEME_BLOCK_RE: Final[re.Pattern[str]] = re.compile(r"@theme(?:\s+[\w\s()-]*)?\s*\{")
_THEME_PRELUDE_RE = re.compile(r"^@theme\b")
_DECLARATION_RE = re.compile(r"--(?P<name>[A-Za-z0-9_-]+)\s*:")

SEMANTIC_COLOR_ALIASES: Final[frozenset[str]] = frozenset(
    {
        "primary",
        "secondary",
        "accent",
        "muted",
        "surface",
        "background",
        "foreground",
        "canvas",
        "border",
        "input",
        "ring",
        "card",
        "popover",
        "destructive",
        "brand",
    }
)

COLOR_UTILITY_PREFIXES: Final[tuple[str, ...]] = (
    "bg",
    "text",
    "border",
    "border-t",
    "border-r",
    "border-b",
    "border-l",
    "border-x",
    "border-y",
    "ring",
    "ring-offset",
    "outline",
    "divide",
    "placeholder",
    "caret",
    "accent",
    "fill",
    "stroke",
    "decoration",
    "shadow",
    "from",
    "via",
    "to",
)
PADDING_PREFIXES: Final[tuple[str, ...]] = ("p", "pt", "pr", "pb", "pl", "px", "py", "ps", "pe")
MARGIN_PREFIXES: Final[tuple[str, ...]] = ("m", "mt", "mr", "mb", "ml", "mx", "my", "ms", "me")
SIZING_PREFIXES: Final[tuple[str, ...]] = ("w", "h", "min-w", "max-w", "min-h", "max-h")
GAP_PREFIXES: Final[tuple[str, ...]] = ("gap", "gap-x", "gap-y")
INSET_PREFIXES: Final[tuple[str, ...]] = (
    "inset",
    "inset-x",
    "inset-y",
    "top",
    "right",
    "bottom",
    "left",
)
ROUNDED_PREFIXES: Final[tuple[str, ...]] = (
    "rounded",
    "rounded-t",
    "rounded-r",
    "rounded-b",
    "rounded-l",
    "rounded-tl",
    "rounded-tr",
    "rounded-br",
    "rounded-bl",
)
SHADOW_PREFIXES: Final[tuple[str, ...]] = ("shadow", "drop-shadow")


@dataclass(slots=True, frozen=True)
class ThemeTokens:
    """Design tokens bucketed by category."""

    colors: frozenset[str] = frozenset()
    fonts: frozenset[str] = frozenset()
    spacing: frozenset[str] = frozenset()
    radius: frozenset[str] = frozenset()
    shadows: frozenset[str] = frozenset()

    def merge(self, other: ThemeTokens) -> ThemeTokens:
        return ThemeTokens(
            colors=self.colors | other.colors,
            fonts=self.fonts | other.fonts,
            spacing=self.spacing | other.spacing,
            radius=self.radius | other.radius,
            shadows=self.shadows | other.shadows,
        )

    def is_empty(self) -> bool:
        return not (self.colors or self.fonts or self.spacing or self.radius or self.shadows)


def parse_theme_variables(css_text: str) -> ThemeTokens:
    """Bucket the custom properties declared inside every ``@theme`` block."""
    buckets: dict[str, set[str]] = {
        "color": set(),
        "font": set(),
        "spacing": set(),
        "radius": set(),
        "shadow": set(),
    }
    scan = scan_css_blocks(css_text)
    for block in scan.blocks:
        if not _THEME_PRELUDE_RE.match(block.prelude):
            continue
        body = block_body(css_text, block)
        for match in _DECLARATION_RE.finditer(body):
            _bucket_variable(match.group("name"), buckets)
    return ThemeTokens(
        colors=frozenset(buckets["color"]),
        fonts=frozenset(buckets["font"]),
        spacing=frozenset(buckets["spacing"]),
        radius=frozenset(buckets["radius"]),
        shadows=frozenset(buckets["shadow"]),
    )


def generate_theme_classes(tokens: ThemeTokens) -> frozenset[str]:
    """Synthesise every utility class name the tokens produce."""
    classes: set[str] = set()
    for color in tokens.colors:
        classes.update(f"{prefix}-{color}" for prefix in COLOR_UTILITY_PREFIXES)
    for font in tokens.fonts:
        classes.add(f"font-{font}")
    for step in tokens.spacing:
        classes.update(f"{prefix}-{step}" for prefix in PADDING_PREFIXES)
        classes.update(f"{prefix}-{step}" for prefix in MARGIN_PREFIXES)
        classes.update(f"-{prefix}-{step}" for prefix in MARGIN_PREFIXES)
        classes.update(f"{prefix}-{step}" for prefix in GAP_PREFIXES)
        classes.update(f"{prefix}-{step}" for prefix in SIZING_PREFIXES)
        classes.update(f"{prefix}-{step}" for prefix in INSET_PREFIXES)
    for radius in tokens.radius:
        classes.update(f"{prefix}-{radius}" for prefix in ROUNDED_PREFIXES)
    for shadow in tokens.shadows:
        classes.update(f"{prefix}-{shadow}" for prefix in SHADOW_PREFIXES)
    return frozenset(classes)


def declares_tailwind_theme(css_text: str) -> bool:
    """Return True when a stylesheet imports the framework and declares a theme."""
    return (
        TAILWIND_IMPORT_RE.search(css_text) is not None
        and THEME_BLOCK_RE.search(css_text) is not None
    )


class ThemeTokenGenerator:
    """Caches theme tokens and generated classes per stylesheet corpus."""

    def __init__(self) -> None:
        self._cache: dict[CacheKey, tuple[ThemeTokens, frozenset[str]]] = {}

    def tokens(
        self,
        base_dir: Path,
        include_globs: tuple[str, ...] = DEFAULT_STYLESHEET_GLOBS,
        exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS,
    ) -> ThemeTokens:
        return self._load(base_dir, include_globs, exclude_globs)[0]

    def generated_classes(
        self,
        base_dir: Path,
        include_globs: tuple[str, ...] = DEFAULT_STYLESHEET_GLOBS,
        exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS,
    ) -> frozenset[str]:
        return self._load(base_dir, include_globs, exclude_globs)[1]

    def clear(self) -> None:
        self._cache.clear()

    def _load(
        self,
        base_dir: Path,
        include_globs: tuple[str, ...],
        exclude_globs: tuple[str, ...],
    ) -> tuple[ThemeTokens, frozenset[str]]:
        key = cache_key(base_dir, include_globs, exclude_globs)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        tokens = ThemeTokens()
        for path in discover_stylesheets(base_dir, include_globs, exclude_globs).paths:
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as error:
                logger.warning("%s: could not read stylesheet (%s).", path.as_posix(), error)
                continue
            if declares_tailwind_theme(text):
                tokens = tokens.merge(parse_theme_variables(text))

        result = (tokens, generate_theme_classes(tokens))
        logger.debug("Generated %d theme classes under %s", len(result[1]), key[0])
        self._cache[key] = result
        return result


def _bucket_variable(name: str, buckets: dict[str, set[str]]) -> None:
    if name.startswith("tw-"):
        return
    category, _, rest = name.partition("-")
    if category == "font" and rest.startswith("weight-"):
        rest = rest[len("weight-") :]
    if category in buckets and rest:
        buckets[category].add(rest)
        return
    if not rest and name in SEMANTIC_COLOR_ALIASES:
        buckets["color"].add(name)
