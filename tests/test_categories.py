"""Tests for the category registry and emoji table."""

from __future__ import annotations

import pytest

from changelog_yaml.categories import (
    CATEGORY_INFO,
    CATEGORY_RENDER_ORDER,
    Category,
    category_info,
    parse_category,
)
from changelog_yaml.emoji import EMOJI_CODEPOINTS, emoji_codepoint
from changelog_yaml.errors import UnknownCategoryError, UnknownIconError


def test_render_order_starts_with_unreleased_and_breaking() -> None:
    assert CATEGORY_RENDER_ORDER[:3] == (
        Category.UNRELEASED,
        Category.BREAKING,
        Category.ADDED,
    )
    assert CATEGORY_RENDER_ORDER[-1] is Category.STYLE


def test_render_order_covers_every_category_once() -> None:
    assert sorted(CATEGORY_RENDER_ORDER) == sorted(Category)


def test_every_category_icon_has_a_codepoint() -> None:
    for category in Category:
        assert CATEGORY_INFO[category].icon in EMOJI_CODEPOINTS


@pytest.mark.parametrize(
    ("category", "icon", "label"),
    [
        (Category.ADDED, "star2", "added"),
        (Category.BREAKING, "triangular_flag_on_post", "breaking"),
        (Category.TESTS, "vertical_traffic_light", "test"),
        (Category.REFACTORED, "recycle", "refactor"),
        (Category.NOTED, "beetle", "known issue"),
    ],
)
def test_category_info(category: Category, icon: str, label: str) -> None:
    info = category_info(category)

    assert info.icon == icon
    assert info.label == label


@pytest.mark.parametrize("name", ["added", "Added", " FIXED ", "noted"])
def test_parse_category_is_case_insensitive(name: str) -> None:
    assert parse_category(name).value == name.strip().lower()


def test_parse_category_rejects_unknown_names() -> None:
    with pytest.raises(UnknownCategoryError, match="unknown category 'features'"):
        parse_category("features")


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        CATEGORY_INFO[Category.ADDED] = category_info(Category.FIXED)  # type: ignore[index]
    with pytest.raises(TypeError):
        EMOJI_CODEPOINTS["rocket"] = 0x1F680  # type: ignore[index]


def test_emoji_codepoint_lookup() -> None:
    assert emoji_codepoint("star2") == 0x1F31F
    with pytest.raises(UnknownIconError):
        emoji_codepoint("rocket")
