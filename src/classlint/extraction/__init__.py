"""Class-name extraction from template and script syntax nodes."""

from .extractor import ClassToken, expression_tokens, extract_class_tokens, split_class_string
from .shapes import (
    CLASS_HELPER_NAMES,
    ArrayShape,
    ConditionalShape,
    ExpressionShape,
    HelperCallShape,
    InterpolatedShape,
    LiteralShape,
    ObjectToggleShape,
    UnsupportedShape,
    classify_expression,
)

__all__ = [
    "ArrayShape",
    "CLASS_HELPER_NAMES",
    "ClassToken",
    "ConditionalShape",
    "ExpressionShape",
    "HelperCallShape",
    "InterpolatedShape",
    "LiteralShape",
    "ObjectToggleShape",
    "UnsupportedShape",
    "classify_expression",
    "expression_tokens",
    "extract_class_tokens",
    "split_class_string",
]
