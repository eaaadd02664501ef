"""Utility prefix table and the prefix families the classifier consults."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from classlint.tailwind.scales import (
    BLUR_SCALE,
    BORDER_WIDTH_SCALE,
    CONTAINER_SIZE_SCALE,
    DIVIDE_WIDTH_SCALE,
    DURATION_SCALE,
    FONT_WEIGHT_SCALE,
    GRADIENT_STOP_SCALE,
    GRID_SCALE,
    LEADING_SCALE,
    OPACITY_SCALE,
    ORDER_SCALE,
    OUTLINE_WIDTH_SCALE,
    RING_WIDTH_SCALE,
    ROUNDED_SCALE,
    SHADOW_SCALE,
    SIZE_FRACTIONS,
    SIZE_SCALE,
    SPACING_SCALE,
    TEXT_SIZE_SCALE,
    TRACKING_SCALE,
    Z_INDEX_SCALE,
)

ScaleValue = bool | tuple[str, ...]

_POSITION_VALUES = (*SPACING_SCALE, "auto", "full", *SIZE_FRACTIONS)
_VIEWPORT_WIDTHS = ("screen", "svw", "lvw", "dvw")
_VIEWPORT_HEIGHTS = ("screen", "svh", "lvh", "dvh")
_INTRINSIC = ("min", "max", "fit")
_LINE_SPAN = ("auto", "full", *(str(step) for step in range(1, 13)))
_LINE_EDGE = ("auto", *(str(step) for step in range(1, 14)))
_FILTER_PERCENT = ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150", "200")
_CONTRAST_PERCENT = ("0", "50", "75", "100", "125", "150", "200")
_SATURATE_PERCENT = ("0", "50", "100", "150", "200")
_HUE_DEGREES = ("0", "15", "30", "60", "90", "180")
_SCALE_PERCENT = ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150")
_ROTATE_DEGREES = ("0", "1", "2", "3", "6", "12", "45", "90", "180")
_SKEW_DEGREES = ("0", "1", "2", "3", "6", "12")
_TOGGLE = ("", "0")
_BORDER_STYLES = ("solid", "dashed", "dotted", "double", "hidden", "none")
_OVERFLOW = ("auto", "hidden", "clip", "visible", "scroll")
_OVERSCROLL = ("auto", "contain", "none")
_BREAK_AROUND = ("auto", "avoid", "all", "avoid-page", "page", "left", "right", "column")
_OBJECT_POSITIONS = (
    "bottom",
    "center",
    "left",
    "left-bottom",
    "left-top",
    "right",
    "right-bottom",
    "right-top",
    "top",
)
_CURSORS = (
    "auto",
    "default",
    "pointer",
    "wait",
    "text",
    "move",
    "help",
    "not-allowed",
    "none",
    "context-menu",
    "progress",
    "cell",
    "crosshair",
    "vertical-text",
    "alias",
    "copy",
    "no-drop",
    "grab",
    "grabbing",
    "all-scroll",
    "col-resize",
    "row-resize",
    "n-resize",
    "e-resize",
    "s-resize",
    "w-resize",
    "ne-resize",
    "nw-resize",
    "se-resize",
    "sw-resize",
    "ew-resize",
    "ns-resize",
    "nesw-resize",
    "nwse-resize",
    "zoom-in",
    "zoom-out",
)
_BLEND_MODES = (
    "normal",
    "multiply",
    "screen",
    "overlay",
    "darken",
    "lighten",
    "color-dodge",
    "color-burn",
    "hard-light",
    "soft-light",
    "difference",
    "exclusion",
    "hue",
    "saturation",
    "color",
    "luminosity",
    "plus-darker",
    "plus-lighter",
)


def _flags(*names: str) -> dict[str, ScaleValue]:
    return {name: True for name in names}


def _same(value: tuple[str, ...], *prefixes: str) -> dict[str, ScaleValue]:
    return {prefix: value for prefix in prefixes}


_TABLE: dict[str, ScaleValue] = {
    # Layout
    **_flags(
        "block",
        "inline-block",
        "inline",
        "inline-flex",
        "inline-table",
        "table-caption",
        "table-cell",
        "table-column",
        "table-column-group",
        "table-footer-group",
        "table-header-group",
        "table-row-group",
        "table-row",
        "flow-root",
        "grid",
        "inline-grid",
        "contents",
        "list-item",
        "hidden",
        "container",
        "static",
        "fixed",
        "absolute",
        "relative",
        "sticky",
        "visible",
        "invisible",
        "collapse",
        "isolate",
        "isolation-auto",
        "sr-only",
        "not-sr-only",
        "transform",
        "transform-none",
        "transform-gpu",
        "transform-cpu",
        "filter",
        "filter-none",
        "backdrop-filter",
        "backdrop-filter-none",
        "appearance-none",
        "appearance-auto",
        "italic",
        "not-italic",
        "uppercase",
        "lowercase",
        "capitalize",
        "normal-case",
        "truncate",
        "underline",
        "overline",
        "line-through",
        "no-underline",
        "antialiased",
        "subpixel-antialiased",
        "ordinal",
        "slashed-zero",
        "lining-nums",
        "oldstyle-nums",
        "proportional-nums",
        "tabular-nums",
        "diagonal-fractions",
        "stacked-fractions",
        "normal-nums",
        "forced-color-adjust-auto",
        "forced-color-adjust-none",
        # Standalone marker classes and pseudo-element names.
        "group",
        "peer",
        "before",
        "after",
        "file",
        "marker",
        "selection",
        "first-line",
        "first-letter",
        "backdrop",
    ),
    "overflow": _OVERFLOW,
    "overflow-x": _OVERFLOW,
    "overflow-y": _OVERFLOW,
    "overscroll": _OVERSCROLL,
    "overscroll-x": _OVERSCROLL,
    "overscroll-y": _OVERSCROLL,
    "z": Z_INDEX_SCALE,
    "order": ORDER_SCALE,
    "box": ("border", "content"),
    "box-decoration": ("clone", "slice"),
    "float": ("right", "left", "none", "start", "end"),
    "clear": ("left", "right", "both", "none", "start", "end"),
    "object": ("contain", "cover", "fill", "none", "scale-down", *_OBJECT_POSITIONS),
    "aspect": ("auto", "square", "video"),
    "columns": ("auto", *CONTAINER_SIZE_SCALE, *(str(step) for step in range(1, 13))),
    "break-after": _BREAK_AROUND,
    "break-before": _BREAK_AROUND,
    "break-inside": ("auto", "avoid", "avoid-page", "avoid-column"),
    # Flexbox and grid
    "flex": (
        "",
        "1",
        "auto",
        "initial",
        "none",
        "row",
        "row-reverse",
        "col",
        "col-reverse",
        "wrap",
        "wrap-reverse",
        "nowrap",
        "grow",
        "grow-0",
        "shrink",
        "shrink-0",
    ),
    "grow": _TOGGLE,
    "shrink": _TOGGLE,
    "basis": (*_POSITION_VALUES, *CONTAINER_SIZE_SCALE),
    "grid-cols": GRID_SCALE,
    "grid-rows": GRID_SCALE,
    "grid-flow": ("row", "col", "dense", "row-dense", "col-dense"),
    "auto-cols": ("auto", "min", "max", "fr"),
    "auto-rows": ("auto", "min", "max", "fr"),
    "col": ("auto",),
    "row": ("auto",),
    "col-span": _LINE_SPAN,
    "col-start": _LINE_EDGE,
    "col-end": _LINE_EDGE,
    "row-span": _LINE_SPAN,
    "row-start": _LINE_EDGE,
    "row-end": _LINE_EDGE,
    **_same(SPACING_SCALE, "gap", "gap-x", "gap-y"),
    "justify": ("normal", "start", "end", "center", "between", "around", "evenly", "stretch"),
    "justify-items": ("start", "end", "center", "stretch", "normal"),
    "justify-self": ("auto", "start", "end", "center", "stretch"),
    "items": ("start", "end", "center", "baseline", "stretch"),
    "content": (
        "none",
        "normal",
        "center",
        "start",
        "end",
        "between",
        "around",
        "evenly",
        "baseline",
        "stretch",
    ),
    "self": ("auto", "start", "end", "center", "stretch", "baseline"),
    "place-content": (
        "center", "start", "end", "between", "around", "evenly", "baseline", "stretch"
    ),
    "place-items": ("start", "end", "center", "baseline", "stretch"),
    "place-self": ("auto", "start", "end", "center", "stretch"),
    # Spacing
    **_same(
        SPACING_SCALE,
        "p",
        "px",
        "py",
        "ps",
        "pe",
        "pt",
        "pr",
        "pb",
        "pl",
        "scroll-p",
        "scroll-px",
        "scroll-py",
        "scroll-ps",
        "scroll-pe",
        "scroll-pt",
        "scroll-pr",
        "scroll-pb",
        "scroll-pl",
        "indent",
        "border-spacing",
        "border-spacing-x",
        "border-spacing-y",
    ),
    **_same(
        (*SPACING_SCALE, "auto"),
        "m",
        "mx",
        "my",
        "ms",
        "me",
        "mt",
        "mr",
        "mb",
        "ml",
        "scroll-m",
        "scroll-mx",
        "scroll-my",
        "scroll-ms",
        "scroll-me",
        "scroll-mt",
        "scroll-mr",
        "scroll-mb",
        "scroll-ml",
    ),
    **_same((*SPACING_SCALE, "reverse"), "space-x", "space-y"),
    # Sizing
    "w": (*SPACING_SCALE, "auto", "full", *_VIEWPORT_WIDTHS, *_INTRINSIC, *SIZE_FRACTIONS),
    "min-w": ("0", "full", *_INTRINSIC, *SIZE_SCALE),
    "max-w": (
        "0",
        "none",
        *SIZE_SCALE,
        "full",
        *_INTRINSIC,
        "prose",
        "screen-sm",
        "screen-md",
        "screen-lg",
        "screen-xl",
        "screen-2xl",
    ),
    "h": (*SPACING_SCALE, "auto", "full", *_VIEWPORT_HEIGHTS, *_INTRINSIC, *SIZE_FRACTIONS),
    "min-h": ("0", "full", *_VIEWPORT_HEIGHTS, *_INTRINSIC),
    "max-h": (*SPACING_SCALE, "none", "full", *_VIEWPORT_HEIGHTS, *_INTRINSIC),
    "size": (*SPACING_SCALE, "auto", "full", *_INTRINSIC, *SIZE_FRACTIONS),
    **_same(
        _POSITION_VALUES,
        "top",
        "right",
        "bottom",
        "left",
        "start",
        "end",
        "inset",
        "inset-x",
        "inset-y",
    ),
    # Typography
    "font": ("sans", "serif", "mono", *FONT_WEIGHT_SCALE),
    "text": (
        *TEXT_SIZE_SCALE,
        "left",
        "center",
        "right",
        "justify",
        "start",
        "end",
        "ellipsis",
        "clip",
        "wrap",
        "nowrap",
        "balance",
        "pretty",
    ),
    "leading": LEADING_SCALE,
    "tracking": TRACKING_SCALE,
    "line-clamp": ("none", "1", "2", "3", "4", "5", "6"),
    "list": ("inside", "outside", "none", "disc", "decimal"),
    "decoration": (
        "solid",
        "double",
        "dotted",
        "dashed",
        "wavy",
        "auto",
        "from-font",
        "clone",
        "slice",
        "0",
        "1",
        "2",
        "4",
        "8",
    ),
    "underline-offset": ("auto", "0", "1", "2", "4", "8"),
    "whitespace": ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces"),
    "break": ("normal", "words", "all", "keep"),
    "hyphens": ("none", "manual", "auto"),
    "align": ("baseline", "top", "middle", "bottom", "text-top", "text-bottom", "sub", "super"),
    "prose": (
        "", "sm", "base", "lg", "xl", "2xl", "invert", "slate", "gray", "zinc", "neutral", "stone"
    ),
    # Backgrounds and gradients
    "bg": (
        "fixed",
        "local",
        "scroll",
        "auto",
        "cover",
        "contain",
        "repeat",
        "no-repeat",
        "repeat-x",
        "repeat-y",
        "repeat-round",
        "repeat-space",
        "none",
        *_OBJECT_POSITIONS,
    ),
    "bg-clip": ("border", "padding", "content", "text"),
    "bg-origin": ("border", "padding", "content"),
    "bg-gradient-to": ("t", "tr", "r", "br", "b", "bl", "l", "tl"),
    "bg-linear-to": ("t", "tr", "r", "br", "b", "bl", "l", "tl"),
    **_same(GRADIENT_STOP_SCALE, "from", "via", "to"),
    # Borders, rings and outlines
    "border": ("", *BORDER_WIDTH_SCALE, *_BORDER_STYLES, "collapse", "separate"),
    **_same(
        ("", *BORDER_WIDTH_SCALE),
        "border-x",
        "border-y",
        "border-s",
        "border-e",
        "border-t",
        "border-r",
        "border-b",
        "border-l",
    ),
    "divide": _BORDER_STYLES,
    **_same(("", *DIVIDE_WIDTH_SCALE, "reverse"), "divide-x", "divide-y"),
    "ring": ("", *RING_WIDTH_SCALE, "inset"),
    "ring-offset": RING_WIDTH_SCALE,
    "outline": ("", "none", "hidden", *OUTLINE_WIDTH_SCALE, "solid", "dashed", "dotted", "double"),
    "outline-offset": OUTLINE_WIDTH_SCALE,
    "rounded": ROUNDED_SCALE,
    **_same(
        ROUNDED_SCALE,
        "rounded-s",
        "rounded-e",
        "rounded-t",
        "rounded-r",
        "rounded-b",
        "rounded-l",
        "rounded-ss",
        "rounded-se",
        "rounded-es",
        "rounded-ee",
        "rounded-tl",
        "rounded-tr",
        "rounded-br",
        "rounded-bl",
    ),
    # Colour-only families; their colour values come from the palette rules.
    "fill": ("none",),
    "stroke": ("0", "1", "2", "none"),
    "accent": ("auto",),
    "caret": (),
    "placeholder": ("",),
    # Effects and filters
    "shadow": SHADOW_SCALE,
    "drop-shadow": SHADOW_SCALE,
    "inset-shadow": SHADOW_SCALE,
    "opacity": OPACITY_SCALE,
    "mix-blend": _BLEND_MODES,
    "bg-blend": _BLEND_MODES,
    "blur": BLUR_SCALE,
    "brightness": _FILTER_PERCENT,
    "contrast": _CONTRAST_PERCENT,
    "grayscale": _TOGGLE,
    "hue-rotate": _HUE_DEGREES,
    "invert": _TOGGLE,
    "saturate": _SATURATE_PERCENT,
    "sepia": _TOGGLE,
    "backdrop-blur": BLUR_SCALE,
    "backdrop-brightness": _FILTER_PERCENT,
    "backdrop-contrast": _CONTRAST_PERCENT,
    "backdrop-grayscale": _TOGGLE,
    "backdrop-hue-rotate": _HUE_DEGREES,
    "backdrop-invert": _TOGGLE,
    "backdrop-opacity": OPACITY_SCALE,
    "backdrop-saturate": _SATURATE_PERCENT,
    "backdrop-sepia": _TOGGLE,
    # Transforms
    **_same(_SCALE_PERCENT, "scale", "scale-x", "scale-y"),
    "rotate": _ROTATE_DEGREES,
    **_same(_SKEW_DEGREES, "skew", "skew-x", "skew-y"),
    **_same((*SPACING_SCALE, "full", *SIZE_FRACTIONS), "translate-x", "translate-y"),
    "origin": (
        "center",
        "top",
        "top-right",
        "right",
        "bottom-right",
        "bottom",
        "bottom-left",
        "left",
        "top-left",
    ),
    # Transitions and animation
    "transition": ("", "none", "all", "colors", "opacity", "shadow", "transform"),
    "duration": DURATION_SCALE,
    "delay": DURATION_SCALE,
    "ease": ("linear", "in", "out", "in-out"),
    "animate": ("none", "spin", "ping", "pulse", "bounce"),
    "will-change": ("auto", "scroll", "contents", "transform"),
    # Interactivity
    "cursor": _CURSORS,
    "select": ("none", "text", "all", "auto"),
    "resize": ("", "none", "y", "x"),
    "scroll": ("auto", "smooth"),
    "snap": (
        "start",
        "end",
        "center",
        "align-none",
        "normal",
        "always",
        "x",
        "y",
        "both",
        "mandatory",
        "proximity",
        "none",
    ),
    "touch": (
        "auto",
        "none",
        "pan-x",
        "pan-left",
        "pan-right",
        "pan-y",
        "pan-up",
        "pan-down",
        "pinch-zoom",
        "manipulation",
    ),
    "pointer-events": ("none", "auto"),
    "table": ("", "auto", "fixed"),
    "caption": ("top", "bottom"),
}

UTILITY_SCALES: Final[Mapping[str, ScaleValue]] = MappingProxyType(_TABLE)

SPACING_SCALE_PREFIXES: Final[frozenset[str]] = frozenset(
    {
        "p",
        "px",
        "py",
        "ps",
        "pe",
        "pt",
        "pr",
        "pb",
        "pl",
        "m",
        "mx",
        "my",
        "ms",
        "me",
        "mt",
        "mr",
        "mb",
        "ml",
        "gap",
        "gap-x",
        "gap-y",
        "space-x",
        "space-y",
        "w",
        "h",
        "min-w",
        "max-w",
        "min-h",
        "max-h",
        "size",
        "basis",
        "top",
        "right",
        "bottom",
        "left",
        "start",
        "end",
        "inset",
        "inset-x",
        "inset-y",
        "translate-x",
        "translate-y",
        "indent",
        "border-spacing",
        "border-spacing-x",
        "border-spacing-y",
        "scroll-m",
        "scroll-mx",
        "scroll-my",
        "scroll-ms",
        "scroll-me",
        "scroll-mt",
        "scroll-mr",
        "scroll-mb",
        "scroll-ml",
        "scroll-p",
        "scroll-px",
        "scroll-py",
        "scroll-ps",
        "scroll-pe",
        "scroll-pt",
        "scroll-pr",
        "scroll-pb",
        "scroll-pl",
    }
)

# Every suffixed prefix that is not on the spacing scale keeps its own narrow
# scale; deriving it keeps the list complete whenever the table grows.
NARROW_SCALE_PREFIXES: Final[frozenset[str]] = frozenset(
    prefix
    for prefix, value in _TABLE.items()
    if isinstance(value, tuple) and prefix not in SPACING_SCALE_PREFIXES
)

COLOR_PREFIXES: Final[frozenset[str]] = frozenset(
    {
        "text",
        "bg",
        "border",
        "border-x",
        "border-y",
        "border-s",
        "border-e",
        "border-t",
        "border-r",
        "border-b",
        "border-l",
        "divide",
        "ring",
        "ring-offset",
        "outline",
        "fill",
        "stroke",
        "accent",
        "caret",
        "placeholder",
        "decoration",
        "shadow",
        "inset-shadow",
        "drop-shadow",
        "from",
        "via",
        "to",
    }
)

ARBITRARY_VALUE_PREFIXES: Final[frozenset[str]] = frozenset(
    {
        "w",
        "h",
        "min-w",
        "max-w",
        "min-h",
        "max-h",
        "size",
        "basis",
        "p",
        "px",
        "py",
        "ps",
        "pe",
        "pt",
        "pr",
        "pb",
        "pl",
        "m",
        "mx",
        "my",
        "ms",
        "me",
        "mt",
        "mr",
        "mb",
        "ml",
        "gap",
        "gap-x",
        "gap-y",
        "space-x",
        "space-y",
        "top",
        "right",
        "bottom",
        "left",
        "start",
        "end",
        "inset",
        "inset-x",
        "inset-y",
        "z",
        "order",
        "text",
        "font",
        "bg",
        "border",
        "border-x",
        "border-y",
        "border-s",
        "border-e",
        "border-t",
        "border-r",
        "border-b",
        "border-l",
        "ring",
        "ring-offset",
        "outline",
        "outline-offset",
        "fill",
        "stroke",
        "divide",
        "divide-x",
        "divide-y",
        "shadow",
        "drop-shadow",
        "opacity",
        "blur",
        "brightness",
        "contrast",
        "grayscale",
        "hue-rotate",
        "invert",
        "saturate",
        "sepia",
        "scale",
        "scale-x",
        "scale-y",
        "rotate",
        "translate-x",
        "translate-y",
        "skew",
        "skew-x",
        "skew-y",
        "origin",
        "backdrop-blur",
        "backdrop-brightness",
        "backdrop-contrast",
        "backdrop-grayscale",
        "backdrop-hue-rotate",
        "backdrop-invert",
        "backdrop-opacity",
        "backdrop-saturate",
        "backdrop-sepia",
        "duration",
        "delay",
        "ease",
        "animate",
        "content",
        "transition",
        "rounded",
        "rounded-s",
        "rounded-e",
        "rounded-t",
        "rounded-r",
        "rounded-b",
        "rounded-l",
        "rounded-tl",
        "rounded-tr",
        "rounded-br",
        "rounded-bl",
        "from",
        "via",
        "to",
        "accent",
        "caret",
        "placeholder",
        "scroll-m",
        "scroll-mx",
        "scroll-my",
        "scroll-ms",
        "scroll-me",
        "scroll-mt",
        "scroll-mr",
        "scroll-mb",
        "scroll-ml",
        "scroll-p",
        "scroll-px",
        "scroll-py",
        "scroll-ps",
        "scroll-pe",
        "scroll-pt",
        "scroll-pr",
        "scroll-pb",
        "scroll-pl",
        "grid-cols",
        "grid-rows",
        "auto-cols",
        "auto-rows",
        "col",
        "row",
        "col-span",
        "col-start",
        "col-end",
        "row-span",
        "row-start",
        "row-end",
        "columns",
        "aspect",
        "border-spacing",
        "indent",
        "scroll",
        "snap",
        "will-change",
        "decoration",
        "underline-offset",
        "leading",
        "tracking",
        "line-clamp",
        "list",
        "cursor",
    }
)

NEGATIVE_VALUE_PREFIXES: Final[frozenset[str]] = frozenset(
    {
        "top",
        "right",
        "bottom",
        "left",
        "start",
        "end",
        "inset",
        "inset-x",
        "inset-y",
        "translate-x",
        "translate-y",
        "rotate",
        "skew",
        "skew-x",
        "skew-y",
        "scale",
        "scale-x",
        "scale-y",
        "m",
        "mx",
        "my",
        "ms",
        "me",
        "mt",
        "mr",
        "mb",
        "ml",
        "space-x",
        "space-y",
        "scroll-m",
        "scroll-mx",
        "scroll-my",
        "scroll-ms",
        "scroll-me",
        "scroll-mt",
        "scroll-mr",
        "scroll-mb",
        "scroll-ml",
        "hue-rotate",
        "backdrop-hue-rotate",
        "indent",
        "z",
        "order",
        "outline-offset",
        "underline-offset",
    }
)

# Utilities taking any integer inside a fixed inclusive range.
BOUNDED_INTEGER_PREFIXES: Final[Mapping[str, tuple[int, int]]] = MappingProxyType(
    {
        "grid-cols": (1, 12),
        "grid-rows": (1, 12),
        "columns": (1, 12),
        "order": (1, 12),
        "line-clamp": (1, 12),
    }
)

# z-index only takes its own fixed steps, even for bare integers.
Z_INDEX_INTEGERS: Final[frozenset[str]] = frozenset(
    step for step in Z_INDEX_SCALE if step.isdigit()
)
