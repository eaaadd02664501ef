from __future__ import annotations

from classlint.extraction import extract_class_tokens


def _literal(value: str) -> dict[str, object]:
    return {"type": "Literal", "value": value}


def _template(quasis: list[str], expressions: list[dict[str, object]]) -> dict[str, object]:
    return {
        "type": "TemplateLiteral",
        "quasis": [
            {"type": "TemplateElement", "value": {"raw": text, "cooked": text}} for text in quasis
        ],
        "expressions": expressions,
    }


def _jsx(expression: dict[str, object], name: str = "className") -> dict[str, object]:
    return {
        "type": "JSXAttribute",
        "name": {"type": "JSXIdentifier", "name": name},
        "value": {"type": "JSXExpressionContainer", "expression": expression},
    }


def _values(node: dict[str, object]) -> list[tuple[str, bool]]:
    return [(token.value, token.dynamic) for token in extract_class_tokens(node)]


def test_string_attribute_is_split_on_whitespace() -> None:
    node = {
        "type": "JSXAttribute",
        "name": {"type": "JSXIdentifier", "name": "class"},
        "value": _literal("  btn   btn-primary\n"),
    }
    tokens = extract_class_tokens(node)

    assert [token.value for token in tokens] == ["btn", "btn-primary"]
    assert all(token.site is node for token in tokens)


def test_other_attributes_are_ignored() -> None:
    node = {
        "type": "JSXAttribute",
        "name": {"type": "JSXIdentifier", "name": "id"},
        "value": _literal("main"),
    }
    assert extract_class_tokens(node) == []


def test_template_fragment_before_interpolation_is_dynamic() -> None:
    node = _jsx(_template(["card theme-", ""], [{"type": "Identifier", "name": "variant"}]))
    assert _values(node) == [("card", False), ("theme-", True)]


def test_template_fragment_after_interpolation_is_dynamic() -> None:
    node = _jsx(_template(["btn ", "-lg wide"], [{"type": "Identifier", "name": "size"}]))
    assert _values(node) == [("btn", False), ("-lg", True), ("wide", False)]


def test_complete_token_glued_to_interpolation_is_dynamic() -> None:
    node = _jsx(_template(["p-4", ""], [{"type": "Identifier", "name": "x"}]))
    assert _values(node) == [("p-4", True)]


def test_separated_template_segments_stay_literal() -> None:
    node = _jsx(_template(["a ", " b"], [{"type": "Identifier", "name": "x"}]))
    assert _values(node) == [("a", False), ("b", False)]


def test_literals_and_conditionals_inside_interpolations() -> None:
    conditional = {
        "type": "ConditionalExpression",
        "test": {"type": "Identifier", "name": "on"},
        "consequent": _literal("is-on"),
        "alternate": _literal("is-off"),
    }
    node = _jsx(_template(["base ", " ", ""], [_literal("extra"), conditional]))
    assert _values(node) == [
        ("base", False),
        ("extra", False),
        ("is-on", False),
        ("is-off", False),
    ]


def test_nested_conditionals_any_depth() -> None:
    inner = {
        "type": "ConditionalExpression",
        "test": {"type": "Identifier", "name": "b"},
        "consequent": _literal("two"),
        "alternate": _template(["three"], []),
    }
    outer = {
        "type": "ConditionalExpression",
        "test": {"type": "Identifier", "name": "a"},
        "consequent": _literal("one"),
        "alternate": inner,
    }
    assert [value for value, _ in _values(_jsx(outer))] == ["one", "two", "three"]


def test_helper_call_arguments() -> None:
    call = {
        "type": "CallExpression",
        "callee": {"type": "Identifier", "name": "clsx"},
        "arguments": [
            _literal("base"),
            {
                "type": "ObjectExpression",
                "properties": [
                    {"type": "Property", "key": {"type": "Identifier", "name": "active"}},
                    {"type": "Property", "key": _literal("is-open is-wide")},
                ],
            },
            {"type": "ArrayExpression", "elements": [_literal("x y"), None]},
            {"type": "Identifier", "name": "maybe"},
        ],
    }
    assert [value for value, _ in _values(_jsx(call))] == [
        "base",
        "active",
        "is-open",
        "is-wide",
        "x",
        "y",
    ]


def test_unresolvable_expressions_yield_nothing() -> None:
    member = {
        "type": "MemberExpression",
        "object": {"type": "Identifier", "name": "styles"},
        "property": {"type": "Identifier", "name": "button"},
    }
    binary = {"type": "BinaryExpression", "operator": "+", "left": _literal("a"), "right": member}
    logical = {
        "type": "LogicalExpression",
        "operator": "&&",
        "left": member,
        "right": _literal("x"),
    }
    for expression in (member, binary, logical, {"type": "Identifier", "name": "cls"}):
        assert extract_class_tokens(_jsx(expression)) == []


def test_bare_array_in_jsx_is_not_a_class_list() -> None:
    array = {"type": "ArrayExpression", "elements": [_literal("a")]}
    assert extract_class_tokens(_jsx(array)) == []


def test_dom_assignment_and_class_list_calls() -> None:
    assignment = {
        "type": "AssignmentExpression",
        "operator": "=",
        "left": {
            "type": "MemberExpression",
            "object": {"type": "Identifier", "name": "el"},
            "property": {"type": "Identifier", "name": "className"},
        },
        "right": _literal("alert alert-error"),
    }
    assert _values(assignment) == [("alert", False), ("alert-error", False)]

    call = {
        "type": "CallExpression",
        "callee": {
            "type": "MemberExpression",
            "object": {
                "type": "MemberExpression",
                "object": {"type": "Identifier", "name": "el"},
                "property": {"type": "Identifier", "name": "classList"},
            },
            "property": {"type": "Identifier", "name": "toggle"},
        },
        "arguments": [_literal("is-hidden"), {"type": "Identifier", "name": "flag"}],
    }
    assert _values(call) == [("is-hidden", False)]


def test_unrelated_site_types_yield_nothing() -> None:
    assert extract_class_tokens({"type": "Program", "body": []}) == []
