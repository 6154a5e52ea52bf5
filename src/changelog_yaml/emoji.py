"""Emoji table mapping shortcode names to Unicode code points."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import UnknownIconError

__all__ = ["EMOJI_CODEPOINTS", "emoji_codepoint"]

EMOJI_CODEPOINTS: Mapping[str, int] = MappingProxyType(
    {
        "bookmark": 0x1F516,
        "triangular_flag_on_post": 0x1F6A9,
        "star2": 0x1F31F,
        "hammer_and_wrench": 0x1F6E0,
        "lady_beetle": 0x1F41E,
        "see_no_evil": 0x1F648,
        "zap": 0x26A1,
        "vertical_traffic_light": 0x1F6A6,
        "fire": 0x1F525,
        "art": 0x1F3A8,
        "spider_web": 0x1F578,
        "recycle": 0x267B,
        "alembic": 0x2697,
        "book": 0x1F4D6,
        "beetle": 0x1FAB2,
        "construction": 0x1F6A7,
        "lipstick": 0x1F484,
    }
)


def emoji_codepoint(name: str) -> int:
    """Return the code point for a shortcode name."""
    try:
        return EMOJI_CODEPOINTS[name]
    except KeyError:
        raise UnknownIconError(name) from None
