"""Canonical Tailwind value scales.

Only values the framework actually ships are listed here; a value missing from
a scale is expected to arrive through an arbitrary ``[...]`` suffix or a theme
token instead.
"""

from __future__ import annotations

from typing import Final

BORDER_WIDTH_SCALE: Final[tuple[str, ...]] = ("0", "2", "4", "8")
RING_WIDTH_SCALE: Final[tuple[str, ...]] = ("0", "1", "2", "4", "8")
OUTLINE_WIDTH_SCALE: Final[tuple[str, ...]] = ("0", "1", "2", "4", "8")
DIVIDE_WIDTH_SCALE: Final[tuple[str, ...]] = ("0", "2", "4", "8")

SPACING_SCALE: Final[tuple[str, ...]] = (
    "0",
    "px",
    "0.5",
    "1",
    "1.5",
    "2",
    "2.5",
    "3",
    "3.5",
    "4",
    "5",
    "6",
    "7",
    "8",
    "9",
    "10",
    "11",
    "12",
    "14",
    "16",
    "20",
    "24",
    "28",
    "32",
    "36",
    "40",
    "44",
    "48",
    "52",
    "56",
    "60",
    "64",
    "72",
    "80",
    "96",
)

TEXT_SIZE_SCALE: Final[tuple[str, ...]] = (
    "xs",
    "sm",
    "base",
    "lg",
    "xl",
    "2xl",
    "3xl",
    "4xl",
    "5xl",
    "6xl",
    "7xl",
    "8xl",
    "9xl",
)
SIZE_SCALE: Final[tuple[str, ...]] = (
    "xs",
    "sm",
    "md",
    "lg",
    "xl",
    "2xl",
    "3xl",
    "4xl",
    "5xl",
    "6xl",
    "7xl",
)
CONTAINER_SIZE_SCALE: Final[tuple[str, ...]] = ("3xs", "2xs", *SIZE_SCALE)
FONT_WEIGHT_SCALE: Final[tuple[str, ...]] = (
    "thin",
    "extralight",
    "light",
    "normal",
    "medium",
    "semibold",
    "bold",
    "extrabold",
    "black",
)
TRACKING_SCALE: Final[tuple[str, ...]] = ("tighter", "tight", "normal", "wide", "wider", "widest")
LEADING_SCALE: Final[tuple[str, ...]] = (
    "none",
    "tight",
    "snug",
    "normal",
    "relaxed",
    "loose",
    "3",
    "4",
    "5",
    "6",
    "7",
    "8",
    "9",
    "10",
)
SHADOW_SCALE: Final[tuple[str, ...]] = (
    "", "2xs", "xs", "sm", "md", "lg", "xl", "2xl", "inner", "none"
)
BLUR_SCALE: Final[tuple[str, ...]] = ("", "none", "xs", "sm", "md", "lg", "xl", "2xl", "3xl")
ROUNDED_SCALE: Final[tuple[str, ...]] = (
    "",
    "none",
    "xs",
    "sm",
    "md",
    "lg",
    "xl",
    "2xl",
    "3xl",
    "4xl",
    "full",
)
OPACITY_SCALE: Final[tuple[str, ...]] = tuple(str(step) for step in range(0, 101, 5))
Z_INDEX_SCALE: Final[tuple[str, ...]] = ("0", "10", "20", "30", "40", "50", "auto")
ORDER_SCALE: Final[tuple[str, ...]] = (
    "first",
    "last",
    "none",
    *(str(step) for step in range(1, 13)),
)
GRID_SCALE: Final[tuple[str, ...]] = (
    "none",
    *(str(step) for step in range(1, 13)),
    "subgrid",
)
DURATION_SCALE: Final[tuple[str, ...]] = (
    "0",
    "75",
    "100",
    "150",
    "200",
    "300",
    "500",
    "700",
    "1000",
)
GRADIENT_STOP_SCALE: Final[tuple[str, ...]] = tuple(f"{step}%" for step in range(0, 101, 5))

SIZE_FRACTIONS: Final[tuple[str, ...]] = (
    "1/2",
    "1/3",
    "2/3",
    "1/4",
    "2/4",
    "3/4",
    "1/5",
    "2/5",
    "3/5",
    "4/5",
    "1/6",
    "2/6",
    "3/6",
    "4/6",
    "5/6",
    "1/12",
    "2/12",
    "3/12",
    "4/12",
    "5/12",
    "6/12",
    "7/12",
    "8/12",
    "9/12",
    "10/12",
    "11/12",
)

SPECIAL_COLOR_NAMES: Final[tuple[str, ...]] = (
    "inherit",
    "current",
    "transparent",
    "black",
    "white",
)
PALETTE_COLOR_NAMES: Final[tuple[str, ...]] = (
    "slate",
    "gray",
    "zinc",
    "neutral",
    "stone",
    "red",
    "orange",
    "amber",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "cyan",
    "sky",
    "blue",
    "indigo",
    "violet",
    "purple",
    "fuchsia",
    "pink",
    "rose",
)
COLOR_NAMES: Final[tuple[str, ...]] = SPECIAL_COLOR_NAMES + PALETTE_COLOR_NAMES
COLOR_SHADES: Final[tuple[str, ...]] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
    "950",
)

BREAKPOINTS: Final[tuple[str, ...]] = ("sm", "md", "lg", "xl", "2xl")
