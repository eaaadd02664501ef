"""Variant-modifier vocabulary and stack splitting."""

from __future__ import annotations

import re
from typing import Final

from classlint.tailwind.scales import BREAKPOINTS, CONTAINER_SIZE_SCALE

PSEUDO_CLASS_VARIANTS: Final[frozenset[str]] = frozenset(
    {
        "hover",
        "focus",
        "focus-within",
        "focus-visible",
        "active",
        "visited",
        "target",
        "first",
        "last",
        "only",
        "odd",
        "even",
        "first-of-type",
        "last-of-type",
        "only-of-type",
        "empty",
        "disabled",
        "enabled",
        "checked",
        "indeterminate",
        "default",
        "required",
        "optional",
        "valid",
        "invalid",
        "user-valid",
        "user-invalid",
        "in-range",
        "out-of-range",
        "placeholder-shown",
        "autofill",
        "read-only",
        "open",
        "inert",
    }
)

PSEUDO_ELEMENT_VARIANTS: Final[frozenset[str]] = frozenset(
    {
        "before",
        "after",
        "first-letter",
        "first-line",
        "marker",
        "selection",
        "file",
        "backdrop",
        "placeholder",
        "details-content",
    }
)

MEDIA_VARIANTS: Final[frozenset[str]] = frozenset(
    {
        "dark",
        "light",
        "motion-safe",
        "motion-reduce",
        "contrast-more",
        "contrast-less",
        "portrait",
        "landscape",
        "print",
        "screen",
        "rtl",
        "ltr",
        "forced-colors",
        "inverted-colors",
        "pointer-fine",
        "pointer-coarse",
        "pointer-none",
        "noscript",
        "starting",
        "*",
        "**",
    }
)

ARIA_STATES: Final[frozenset[str]] = frozenset(
    {
        "busy",
        "checked",
        "disabled",
        "expanded",
        "hidden",
        "pressed",
        "readonly",
        "required",
        "selected",
    }
)

STATE_VARIANTS: Final[frozenset[str]] = PSEUDO_CLASS_VARIANTS | PSEUDO_ELEMENT_VARIANTS

_BRACKETED = r"\[[^\]]+\]"
_BRACKETED_RE = re.compile(rf"^{_BRACKETED}$")
_BRACKET_FUNCTION_PREFIXES = (
    "aria|data|supports|has|min|max|not|in|nth|nth-last|nth-of-type|nth-last-of-type"
)
_BRACKET_FUNCTION_RE = re.compile(rf"^(?:{_BRACKET_FUNCTION_PREFIXES})-{_BRACKETED}$")
_ARIA_RE = re.compile(r"^aria-(?P<state>[a-z]+)$")
_DATA_RE = re.compile(r"^data-[a-z][a-z0-9-]*$")
_NOT_RE = re.compile(r"^not-(?P<inner>[a-z][a-z0-9-]*)$")
_NTH_RE = re.compile(r"^nth(?:-last)?(?:-of-type)?-\d+$")
_CONTAINER_RE = re.compile(rf"^@(?:min-|max-)?(?P<size>[a-z0-9]+|{_BRACKETED})(?:/[\w-]+)?$")
_GROUP_RE = re.compile(r"^(?:group|peer)(?:-(?P<state>.+?))?(?:/(?P<scope>[\w-]+))?$")


def split_variants(token: str) -> tuple[tuple[str, ...], str]:
    """Split a token into its variant stack and base utility.

    Colons inside ``[...]`` or ``(...)`` belong to arbitrary values and do not
    separate variants.
    """
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in token:
        if char in "[(":
            depth += 1
        elif char in "])" and depth > 0:
            depth -= 1
        elif char == ":" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return tuple(parts[:-1]), parts[-1]


def is_valid_variant(modifier: str) -> bool:
    """Return True when one modifier of a variant stack is recognized."""
    if not modifier:
        return False
    if _BRACKETED_RE.match(modifier):
        return True
    if modifier in STATE_VARIANTS or modifier in MEDIA_VARIANTS:
        return True
    if modifier in BREAKPOINTS:
        return True
    if modifier.startswith("max-") and modifier[4:] in BREAKPOINTS:
        return True
    if modifier.startswith("min-") and modifier[4:] in BREAKPOINTS:
        return True
    if _BRACKET_FUNCTION_RE.match(modifier) or _DATA_RE.match(modifier) or _NTH_RE.match(modifier):
        return True
    aria = _ARIA_RE.match(modifier)
    if aria is not None:
        return aria.group("state") in ARIA_STATES
    negated = _NOT_RE.match(modifier)
    if negated is not None:
        return is_valid_variant(negated.group("inner"))
    if modifier.startswith("@"):
        container = _CONTAINER_RE.match(modifier)
        if container is None:
            return False
        size = container.group("size")
        return size in CONTAINER_SIZE_SCALE or size.startswith("[")
    group = _GROUP_RE.match(modifier)
    if group is not None:
        state = group.group("state")
        return state is None or _is_group_state(state)
    return False


def _is_group_state(state: str) -> bool:
    if state in STATE_VARIANTS:
        return True
    if _BRACKETED_RE.match(state):
        return True
    return is_valid_variant(state) and not state.startswith(("group", "peer", "@"))
