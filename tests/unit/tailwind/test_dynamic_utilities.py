from __future__ import annotations

import pytest

from classlint.tailwind import is_dynamic_utility_class


@pytest.mark.parametrize(
    "token",
    [
        "w-[${width}px]",
        "bg-{{ color }}",
        "text-[color:var(--brand)]",
        "bg-[rgb(10,20,30)]",
        "before:content-['x']",
        "bg-(--brand)",
        "hover:shadow-[0_0_4px_red]",
    ],
)
def test_unprovable_utility_shapes_are_dynamic(token: str) -> None:
    assert is_dynamic_utility_class(token) is True


@pytest.mark.parametrize("token", ["card", "btn-primary", "p-4", "before:not-a-real-thing"])
def test_plain_tokens_are_not_dynamic(token: str) -> None:
    assert is_dynamic_utility_class(token) is False


@pytest.mark.parametrize("token", ["bogus:w-[10px]", "hover:nope:text-[color:var(--x)]"])
def test_unknown_variants_disqualify_dynamic_shapes(token: str) -> None:
    assert is_dynamic_utility_class(token) is False
