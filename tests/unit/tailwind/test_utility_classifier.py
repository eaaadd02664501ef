from __future__ import annotations

import pytest

from classlint.tailwind import UtilityClassifier, find_utility_split, is_utility_class
from classlint.tailwind.classifier import match_utility_class


@pytest.mark.parametrize(
    "token",
    [
        "flex",
        "block",
        "border",
        "p-4",
        "px-2.5",
        "mt-auto",
        "grid-cols-3",
        "rounded-tl-lg",
        "border-t-2",
        "ring-offset-2",
        "text-lg",
        "text-red-500",
        "bg-white",
        "w-1/2",
        "aspect-16/9",
        "aspect-4/3",
        "z-10",
        "line-clamp-3",
        "font-bold",
    ],
)
def test_scale_utilities_are_accepted(token: str) -> None:
    assert is_utility_class(token) is True


@pytest.mark.parametrize(
    "token",
    [
        "btn-primary",
        "text-primary",
        "text-muted",
        "text-red-550",
        "border-3",
        "ring-3",
        "bg-4",
        "z-15",
        "grid-cols-13",
        "card__title",
        "card--active",
        "col-md-6",
        "",
        "!",
    ],
)
def test_non_utilities_are_rejected(token: str) -> None:
    assert is_utility_class(token) is False


def test_arbitrary_value_requires_allowlisted_prefix() -> None:
    assert is_utility_class("w-[120px]") is True
    assert is_utility_class("bg-[#ff0000]") is True
    assert is_utility_class("foo-[10px]") is False


def test_arbitrary_property_is_accepted() -> None:
    assert is_utility_class("[mask-type:luminance]") is True


def test_negative_values_only_for_negatable_prefixes() -> None:
    match = match_utility_class("-mt-4")
    assert match is not None
    assert match.negative is True
    assert match.prefix == "mt"
    assert is_utility_class("-translate-x-1/2") is True
    assert is_utility_class("-p-4") is False


def test_opacity_modifier_is_stripped_and_recorded() -> None:
    match = match_utility_class("bg-blue-500/50")
    assert match is not None
    assert match.base == "bg-blue-500"
    assert match.opacity == "50"
    assert match.rule == "color-shade"
    assert is_utility_class("bg-blue-500/150") is False


def test_fraction_is_not_mistaken_for_opacity() -> None:
    match = match_utility_class("w-1/2")
    assert match is not None
    assert match.opacity is None
    assert match.suffix == "1/2"


def test_variants_and_important_markers() -> None:
    assert is_utility_class("hover:bg-blue-600") is True
    assert is_utility_class("md:hover:text-white") is True
    assert is_utility_class("group-hover:text-white") is True
    assert is_utility_class("!font-bold") is True
    assert is_utility_class("font-bold!") is True
    match = match_utility_class("md:!p-4")
    assert match is not None
    assert match.important is True
    assert match.variants == ("md",)
    assert is_utility_class("bogus:p-4") is False


def test_theme_classes_are_accepted_with_variants_and_opacity() -> None:
    theme = frozenset({"bg-brand"})
    assert is_utility_class("bg-brand") is False
    assert is_utility_class("bg-brand", theme) is True
    assert is_utility_class("hover:bg-brand/50", theme) is True


def test_split_search_tries_every_dash_position() -> None:
    split = find_utility_split("rounded-tl-lg")
    assert split is not None
    assert (split.prefix, split.suffix) == ("rounded-tl", "lg")
    assert find_utility_split("unknown-thing") is None


def test_split_search_honors_allowed_prefixes() -> None:
    assert find_utility_split("p-4", allowed_prefixes=frozenset({"m"})) is None


def test_classifier_memoises_results() -> None:
    classifier = UtilityClassifier(theme_classes=frozenset({"text-canvas"}), cache_size=4)
    first = classifier.match("p-4")
    assert first is not None
    assert classifier.match("p-4") is first
    assert classifier.match("not-a-utility") is None
    assert classifier.match("not-a-utility") is None
    assert classifier.is_utility_class("text-canvas") is True
    classifier.clear()
    assert classifier.match("p-4") == first
