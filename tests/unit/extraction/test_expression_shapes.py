from __future__ import annotations

from classlint.extraction import (
    ArrayShape,
    ConditionalShape,
    HelperCallShape,
    InterpolatedShape,
    LiteralShape,
    ObjectToggleShape,
    UnsupportedShape,
    classify_expression,
)


def _literal(value: object) -> dict[str, object]:
    return {"type": "Literal", "value": value}


def test_literal_and_template_shapes() -> None:
    assert classify_expression(_literal("a b")) == LiteralShape(value="a b")
    assert isinstance(classify_expression(_literal(3)), UnsupportedShape)

    template = {
        "type": "TemplateLiteral",
        "quasis": [
            {"type": "TemplateElement", "value": {"raw": "a ", "cooked": "a "}},
            {"type": "TemplateElement", "value": {"raw": "\\u0062", "cooked": None}},
        ],
        "expressions": [{"type": "Identifier", "name": "x"}],
    }
    shape = classify_expression(template)
    assert isinstance(shape, InterpolatedShape)
    assert shape.quasis == ("a ", "\\u0062")
    assert len(shape.expressions) == 1


def test_helper_calls_are_recognised_by_callee_name() -> None:
    call = {
        "type": "CallExpression",
        "callee": {"type": "Identifier", "name": "twMerge"},
        "arguments": [_literal("p-4")],
    }
    shape = classify_expression(call)
    assert isinstance(shape, HelperCallShape)
    assert shape.name == "twMerge"

    other = {**call, "callee": {"type": "Identifier", "name": "format"}}
    assert classify_expression(other) == UnsupportedShape(node_type="CallExpression")


def test_collections_and_conditionals() -> None:
    array = {"type": "ArrayExpression", "elements": [_literal("a"), None]}
    assert classify_expression(array) == ArrayShape(elements=(_literal("a"),))

    obj = {
        "type": "ObjectExpression",
        "properties": [
            {"type": "Property", "key": {"type": "Identifier", "name": "active"}},
            {"type": "Property", "key": _literal("is-open has-focus")},
            {"type": "Property", "computed": True, "key": {"type": "Identifier", "name": "k"}},
            {"type": "SpreadElement", "argument": {"type": "Identifier", "name": "rest"}},
        ],
    }
    assert classify_expression(obj) == ObjectToggleShape(keys=("active", "is-open has-focus"))

    conditional = {
        "type": "ConditionalExpression",
        "test": {"type": "Identifier", "name": "ok"},
        "consequent": _literal("a"),
        "alternate": _literal("b"),
    }
    assert classify_expression(conditional) == ConditionalShape(
        consequent=_literal("a"), alternate=_literal("b")
    )


def test_unrecognised_nodes_are_unsupported() -> None:
    for node_type in ("MemberExpression", "BinaryExpression", "Identifier", "LogicalExpression"):
        assert classify_expression({"type": node_type}) == UnsupportedShape(node_type=node_type)
    assert classify_expression(None) == UnsupportedShape(node_type="NoneType")
