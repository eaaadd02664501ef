"""Expression shapes recognised as sources of literal class names."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

Node = Mapping[str, Any]

CLASS_HELPER_NAMES: Final[frozenset[str]] = frozenset(
    {"clsx", "classnames", "classNames", "cn", "cx", "twMerge", "twJoin"}
)


@dataclass(slots=True, frozen=True)
class LiteralShape:
    value: str


@dataclass(slots=True, frozen=True)
class InterpolatedShape:
    """Literal segments with one interpolated expression between each pair."""

    quasis: tuple[str, ...]
    expressions: tuple[Node, ...]


@dataclass(slots=True, frozen=True)
class ConditionalShape:
    consequent: Node
    alternate: Node


@dataclass(slots=True, frozen=True)
class HelperCallShape:
    name: str
    arguments: tuple[Node, ...]


@dataclass(slots=True, frozen=True)
class ArrayShape:
    elements: tuple[Node, ...]


@dataclass(slots=True, frozen=True)
class ObjectToggleShape:
    """Object keys used as class toggles; computed and spread entries are skipped."""

    keys: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class UnsupportedShape:
    node_type: str


ExpressionShape = (
    LiteralShape
    | InterpolatedShape
    | ConditionalShape
    | HelperCallShape
    | ArrayShape
    | ObjectToggleShape
    | UnsupportedShape
)


def classify_expression(node: object) -> ExpressionShape:
    """Map one expression node to the shape that governs its extraction."""
    if not isinstance(node, Mapping):
        return UnsupportedShape(node_type=type(node).__name__)
    node_type = str(node.get("type", ""))

    if node_type == "Literal":
        value = node.get("value")
        if isinstance(value, str):
            return LiteralShape(value=value)
        return UnsupportedShape(node_type=node_type)
    if node_type == "TemplateLiteral":
        quasis = tuple(template_segment(quasi) for quasi in node.get("quasis") or ())
        expressions = tuple(node.get("expressions") or ())
        return InterpolatedShape(quasis=quasis, expressions=expressions)
    if node_type == "ConditionalExpression":
        return ConditionalShape(
            consequent=node.get("consequent") or {},
            alternate=node.get("alternate") or {},
        )
    if node_type == "CallExpression":
        callee = node.get("callee") or {}
        name = callee.get("name") if callee.get("type") == "Identifier" else None
        if isinstance(name, str) and name in CLASS_HELPER_NAMES:
            return HelperCallShape(name=name, arguments=tuple(node.get("arguments") or ()))
        return UnsupportedShape(node_type=node_type)
    if node_type == "ArrayExpression":
        elements = tuple(element for element in node.get("elements") or () if element)
        return ArrayShape(elements=elements)
    if node_type == "ObjectExpression":
        return ObjectToggleShape(keys=_object_keys(node))
    return UnsupportedShape(node_type=node_type)


def template_segment(quasi: Node) -> str:
    """Return the cooked text of a template element, falling back to raw."""
    value = quasi.get("value") or {}
    cooked = value.get("cooked")
    if isinstance(cooked, str) and cooked:
        return cooked
    raw = value.get("raw")
    return raw if isinstance(raw, str) else ""


def _object_keys(node: Node) -> tuple[str, ...]:
    keys: list[str] = []
    for prop in node.get("properties") or ():
        if prop.get("type") not in ("Property", "ObjectProperty") or prop.get("computed"):
            continue
        key = prop.get("key") or {}
        if key.get("type") == "Identifier" and isinstance(key.get("name"), str):
            keys.append(key["name"])
        elif key.get("type") == "Literal" and isinstance(key.get("value"), str):
            keys.append(key["value"])
    return tuple(keys)
