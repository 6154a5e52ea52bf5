"""Change categories, their icons, labels, and render order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .emoji import EMOJI_CODEPOINTS
from .errors import UnknownCategoryError

__all__ = [
    "Category",
    "CategoryInfo",
    "CATEGORY_INFO",
    "CATEGORY_RENDER_ORDER",
    "category_info",
    "parse_category",
]


class Category(str, Enum):
    """Fixed set of change categories, keyed by their YAML name."""

    ADDED = "added"
    CHANGED = "changed"
    FIXED = "fixed"
    WORKAROUND = "workaround"
    PERFORMANCE = "performance"
    TESTS = "tests"
    REMOVED = "removed"
    IMPROVED = "improved"
    BREAKING = "breaking"
    DEPRECATED = "deprecated"
    REFACTORED = "refactored"
    EXPERIMENTAL = "experimental"
    DOCS = "docs"
    NOTED = "noted"
    UNRELEASED = "unreleased"
    STYLE = "style"


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for a category."""

    icon: str
    label: str


CATEGORY_INFO: Mapping[Category, CategoryInfo] = MappingProxyType(
    {
        Category.ADDED: CategoryInfo("star2", "added"),
        Category.CHANGED: CategoryInfo("hammer_and_wrench", "changed"),
        Category.FIXED: CategoryInfo("lady_beetle", "fixed"),
        Category.WORKAROUND: CategoryInfo("see_no_evil", "workaround"),
        Category.PERFORMANCE: CategoryInfo("zap", "performance"),
        Category.TESTS: CategoryInfo("vertical_traffic_light", "test"),
        Category.REMOVED: CategoryInfo("fire", "removed"),
        Category.IMPROVED: CategoryInfo("art", "improved"),
        Category.BREAKING: CategoryInfo("triangular_flag_on_post", "breaking"),
        Category.DEPRECATED: CategoryInfo("spider_web", "deprecated"),
        Category.REFACTORED: CategoryInfo("recycle", "refactor"),
        Category.EXPERIMENTAL: CategoryInfo("alembic", "experimental"),
        Category.DOCS: CategoryInfo("book", "docs"),
        Category.NOTED: CategoryInfo("beetle", "known issue"),
        Category.UNRELEASED: CategoryInfo("construction", "unreleased"),
        Category.STYLE: CategoryInfo("lipstick", "style"),
    }
)

CATEGORY_RENDER_ORDER: tuple[Category, ...] = (
    Category.UNRELEASED,
    Category.BREAKING,
    Category.ADDED,
    Category.FIXED,
    Category.WORKAROUND,
    Category.CHANGED,
    Category.REMOVED,
    Category.IMPROVED,
    Category.DOCS,
    Category.TESTS,
    Category.REFACTORED,
    Category.DEPRECATED,
    Category.EXPERIMENTAL,
    Category.NOTED,
    Category.PERFORMANCE,
    Category.STYLE,
)


def _check_tables() -> None:
    missing_info = [category.value for category in Category if category not in CATEGORY_INFO]
    if missing_info:
        raise RuntimeError(f"categories without display info: {', '.join(missing_info)}")
    if set(CATEGORY_RENDER_ORDER) != set(Category) or len(CATEGORY_RENDER_ORDER) != len(Category):
        raise RuntimeError("category render order must list every category exactly once")
    missing_icons = [
        info.icon for info in CATEGORY_INFO.values() if info.icon not in EMOJI_CODEPOINTS
    ]
    if missing_icons:
        raise RuntimeError(f"category icons missing from emoji table: {', '.join(missing_icons)}")


_check_tables()


def category_info(category: Category) -> CategoryInfo:
    """Return the icon and label for a category."""
    return CATEGORY_INFO[category]


def parse_category(name: str) -> Category:
    """Return the category for a YAML key, matched case-insensitively."""
    normalized = name.strip().lower()
    try:
        return Category(normalized)
    except ValueError:
        raise UnknownCategoryError(name) from None
