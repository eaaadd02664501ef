from __future__ import annotations

from classlint.extraction import extract_class_tokens


def _literal(value: str) -> dict[str, object]:
    return {"type": "Literal", "value": value}


def _values(node: dict[str, object]) -> list[tuple[str, bool]]:
    return [(token.value, token.dynamic) for token in extract_class_tokens(node)]


def _vue_bind(expression: dict[str, object]) -> dict[str, object]:
    return {
        "type": "VAttribute",
        "directive": True,
        "key": {
            "type": "VDirectiveKey",
            "name": {"type": "VIdentifier", "name": "bind"},
            "argument": {"type": "VIdentifier", "name": "class"},
        },
        "value": {"type": "VExpressionContainer", "expression": expression},
    }


def test_vue_static_class_attribute() -> None:
    node = {
        "type": "VAttribute",
        "directive": False,
        "key": {"type": "VIdentifier", "name": "class"},
        "value": {"type": "VLiteral", "value": "card card-body"},
    }
    assert _values(node) == [("card", False), ("card-body", False)]


def test_vue_bound_object_and_array_syntax() -> None:
    obj = {
        "type": "ObjectExpression",
        "properties": [
            {"type": "Property", "key": {"type": "Identifier", "name": "active"}},
            {"type": "Property", "key": _literal("text-danger")},
        ],
    }
    assert _values(_vue_bind(obj)) == [("active", False), ("text-danger", False)]

    array = {"type": "ArrayExpression", "elements": [_literal("a"), obj]}
    assert [value for value, _ in _values(_vue_bind(array))] == ["a", "active", "text-danger"]


def test_vue_other_directives_are_ignored() -> None:
    node = _vue_bind(_literal("x"))
    node["key"]["argument"] = {"type": "VIdentifier", "name": "style"}
    assert extract_class_tokens(node) == []


def test_svelte_plain_string_value() -> None:
    node = {"type": "SvelteAttribute", "key": {"name": "class"}, "value": "one two"}
    assert _values(node) == [("one", False), ("two", False)]


def test_svelte_text_and_mustache_parts() -> None:
    node = {
        "type": "SvelteAttribute",
        "key": {"type": "SvelteName", "name": "class"},
        "value": [
            {"type": "SvelteLiteral", "value": "btn btn-"},
            {
                "type": "SvelteMustacheTag",
                "kind": "text",
                "expression": {"type": "Identifier", "name": "size"},
            },
            {"type": "SvelteLiteral", "value": " shadow "},
            {"type": "SvelteMustacheTag", "expression": _literal("rounded")},
        ],
    }
    assert _values(node) == [
        ("btn", False),
        ("btn-", True),
        ("shadow", False),
        ("rounded", False),
    ]


def test_svelte_attribute_node_with_raw_source() -> None:
    node = {"type": "Attribute", "name": "class", "value": None, "raw": 'class="alpha beta"'}
    assert _values(node) == [("alpha", False), ("beta", False)]


def test_svelte_non_class_attribute_is_ignored() -> None:
    node = {"type": "SvelteAttribute", "key": {"name": "id"}, "value": "main"}
    assert extract_class_tokens(node) == []
