"""Class-name tokens referenced by markup attributes and DOM class APIs."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from classlint.extraction.shapes import (
    ArrayShape,
    ConditionalShape,
    HelperCallShape,
    InterpolatedShape,
    LiteralShape,
    Node,
    ObjectToggleShape,
    classify_expression,
)

CLASS_ATTRIBUTE_NAMES: Final[frozenset[str]] = frozenset({"class", "className"})
CLASS_PROPERTY_NAMES: Final[frozenset[str]] = frozenset({"className", "classList"})
CLASS_LIST_METHODS: Final[frozenset[str]] = frozenset({"add", "toggle"})

SVELTE_TEXT_TYPES: Final[frozenset[str]] = frozenset(
    {"SvelteText", "Text", "SvelteLiteral", "Literal"}
)
SVELTE_MUSTACHE_TYPES: Final[frozenset[str]] = frozenset(
    {"SvelteMustacheTag", "MustacheTag", "SvelteMustacheTagText"}
)

_GLUED_FRAGMENT_RE = re.compile(r"^[\w!:/.\-\[\]#%]+$")
_RAW_CLASS_RE = re.compile(r"""class\s*=\s*["']([^"']+)["']""")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(slots=True, frozen=True)
class ClassToken:
    """A candidate class name and the node it was read from."""

    value: str
    site: Mapping[str, Any] = field(compare=False, repr=False)
    dynamic: bool = False


def split_class_string(value: str) -> list[str]:
    """Split a literal class list on whitespace, dropping empty entries."""
    return [part for part in _WHITESPACE_RE.split(value) if part]


def extract_class_tokens(node: Node) -> list[ClassToken]:
    """Return the tokens referenced by one site node, in source order."""
    handler = _SITE_HANDLERS.get(str(node.get("type", "")))
    if handler is None:
        return []
    return [ClassToken(value, node, dynamic) for value, dynamic in handler(node)]


def expression_tokens(node: object, *, allow_collections: bool = False) -> list[tuple[str, bool]]:
    """Return ``(value, dynamic)`` pairs for an expression, recursing through its shape."""
    shape = classify_expression(node)
    if isinstance(shape, LiteralShape):
        return _literal(shape.value)
    if isinstance(shape, InterpolatedShape):
        return _interpolated(shape.quasis, shape.expressions, _template_expression_tokens)
    if isinstance(shape, ConditionalShape):
        return expression_tokens(
            shape.consequent, allow_collections=allow_collections
        ) + expression_tokens(shape.alternate, allow_collections=allow_collections)
    if isinstance(shape, HelperCallShape):
        tokens: list[tuple[str, bool]] = []
        for argument in shape.arguments:
            tokens.extend(expression_tokens(argument, allow_collections=True))
        return tokens
    if allow_collections and isinstance(shape, ArrayShape):
        tokens = []
        for element in shape.elements:
            tokens.extend(expression_tokens(element, allow_collections=True))
        return tokens
    if allow_collections and isinstance(shape, ObjectToggleShape):
        tokens = []
        for key in shape.keys:
            tokens.extend(_literal(key))
        return tokens
    return []


def _literal(value: str) -> list[tuple[str, bool]]:
    return [(part, False) for part in split_class_string(value)]


def _template_expression_tokens(node: object) -> list[tuple[str, bool]]:
    shape = classify_expression(node)
    if isinstance(shape, (LiteralShape, ConditionalShape)):
        return expression_tokens(node)
    return []


def _interpolated(
    quasis: tuple[str, ...],
    expressions: Iterable[object],
    expression_handler: Callable[[object], list[tuple[str, bool]]],
) -> list[tuple[str, bool]]:
    """Split literal segments, marking fragments glued to an interpolation as dynamic."""
    expressions = list(expressions)
    tokens: list[tuple[str, bool]] = []
    for index, segment in enumerate(quasis):
        parts = split_class_string(segment)
        if not parts:
            continue
        glued_after = index < len(expressions) and not segment[-1].isspace()
        glued_before = index > 0 and not segment[0].isspace()
        dynamic = [False] * len(parts)
        if glued_after and _GLUED_FRAGMENT_RE.match(parts[-1]):
            dynamic[-1] = True
        if glued_before and _GLUED_FRAGMENT_RE.match(parts[0]):
            dynamic[0] = True
        tokens.extend(zip(parts, dynamic, strict=True))
    for expression in expressions:
        tokens.extend(expression_handler(expression))
    return tokens


def _jsx_attribute(node: Node) -> list[tuple[str, bool]]:
    name = (node.get("name") or {}).get("name")
    if name not in CLASS_ATTRIBUTE_NAMES:
        return []
    value = node.get("value") or {}
    if value.get("type") == "Literal":
        raw = value.get("value")
        return _literal(raw) if isinstance(raw, str) else []
    if value.get("type") == "JSXExpressionContainer":
        return expression_tokens(value.get("expression"))
    return []


def _vue_attribute(node: Node) -> list[tuple[str, bool]]:
    key = node.get("key") or {}
    value = node.get("value") or {}
    if not node.get("directive"):
        if key.get("name") not in CLASS_ATTRIBUTE_NAMES or value.get("type") != "VLiteral":
            return []
        raw = value.get("value")
        return _literal(raw) if isinstance(raw, str) else []

    directive = key.get("name") or {}
    argument = key.get("argument") or {}
    if directive.get("name") != "bind" or argument.get("name") not in CLASS_ATTRIBUTE_NAMES:
        return []
    if value.get("type") != "VExpressionContainer":
        return []
    return expression_tokens(value.get("expression"), allow_collections=True)


def _svelte_attribute(node: Node) -> list[tuple[str, bool]]:
    key = node.get("key")
    key_name = key.get("name") if isinstance(key, Mapping) else None
    if key_name != "class" and node.get("name") != "class":
        return []

    value = node.get("value")
    if isinstance(value, list):
        return _svelte_parts(value)
    if isinstance(value, str):
        return _literal(value)
    if isinstance(value, Mapping) and isinstance(value.get("value"), str):
        return _literal(value["value"])
    if not value and isinstance(node.get("raw"), str):
        match = _RAW_CLASS_RE.search(node["raw"])
        if match:
            return _literal(match.group(1))
    return []


def _svelte_parts(parts: list[Any]) -> list[tuple[str, bool]]:
    quasis: list[str] = [""]
    expressions: list[object] = []
    for part in parts:
        if not isinstance(part, Mapping):
            continue
        part_type = part.get("type")
        if part_type in SVELTE_TEXT_TYPES:
            text = part.get("value") or part.get("data") or part.get("raw")
            if isinstance(text, str):
                quasis[-1] += text
        elif part_type in SVELTE_MUSTACHE_TYPES:
            expressions.append(part.get("expression") or part)
            quasis.append("")
    return _interpolated(tuple(quasis), expressions, expression_tokens)


def _assignment(node: Node) -> list[tuple[str, bool]]:
    left = node.get("left") or {}
    if left.get("type") != "MemberExpression":
        return []
    if (left.get("property") or {}).get("name") not in CLASS_PROPERTY_NAMES:
        return []
    right = node.get("right") or {}
    if right.get("type") == "Literal" and isinstance(right.get("value"), str):
        return _literal(right["value"])
    return []


def _class_list_call(node: Node) -> list[tuple[str, bool]]:
    callee = node.get("callee") or {}
    if callee.get("type") != "MemberExpression":
        return []
    if (callee.get("property") or {}).get("name") not in CLASS_LIST_METHODS:
        return []
    target = callee.get("object") or {}
    if (target.get("property") or {}).get("name") != "classList":
        return []
    tokens: list[tuple[str, bool]] = []
    for argument in node.get("arguments") or ():
        if argument.get("type") == "Literal" and isinstance(argument.get("value"), str):
            tokens.extend(_literal(argument["value"]))
    return tokens


_SITE_HANDLERS = {
    "JSXAttribute": _jsx_attribute,
    "VAttribute": _vue_attribute,
    "SvelteAttribute": _svelte_attribute,
    "Attribute": _svelte_attribute,
    "AssignmentExpression": _assignment,
    "CallExpression": _class_list_call,
}
