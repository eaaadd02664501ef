from __future__ import annotations

import pytest

from classlint.tailwind import is_valid_variant, split_variants


def test_split_ignores_colons_inside_brackets() -> None:
    assert split_variants("md:hover:bg-[url(a:b)]") == (("md", "hover"), "bg-[url(a:b)]")
    assert split_variants("[&:nth-child(3)]:p-4") == (("[&:nth-child(3)]",), "p-4")
    assert split_variants("flex") == ((), "flex")


@pytest.mark.parametrize(
    "modifier",
    [
        "md",
        "2xl",
        "max-lg",
        "min-sm",
        "hover",
        "focus-visible",
        "dark",
        "before",
        "group-hover",
        "group-hover/item",
        "peer-checked",
        "group-[.is-open]",
        "aria-expanded",
        "data-active",
        "data-[state=open]",
        "supports-[display:grid]",
        "has-[:checked]",
        "not-first",
        "nth-3",
        "@md",
        "@[400px]",
        "[&>*]",
    ],
)
def test_known_variants_validate(modifier: str) -> None:
    assert is_valid_variant(modifier) is True


@pytest.mark.parametrize("modifier", ["", "bogus", "aria-bogus", "group-bogus", "@huge"])
def test_unknown_variants_are_rejected(modifier: str) -> None:
    assert is_valid_variant(modifier) is False
