"""Output formatters for Markdown and AsciiDoc documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from .emoji import emoji_codepoint
from .errors import UnknownAdmonitionError
from .utils import log_debug, log_warning

__all__ = [
    "AdmonitionKind",
    "Formatter",
    "MarkdownFormatter",
    "AsciiDocFormatter",
    "FORMAT_ALIASES",
    "formatter_for",
]


class AdmonitionKind(Enum):
    """Callout kinds supported by both output formats."""

    NOTE = "NOTE"
    IMPORTANT = "IMPORTANT"
    WARNING = "WARNING"


def _admonition_name(kind: AdmonitionKind) -> str:
    if not isinstance(kind, AdmonitionKind):
        raise UnknownAdmonitionError(str(kind))
    return kind.value


class Formatter(ABC):
    """Rendering contract shared by all output formats.

    Every method returns a markup fragment; none of them write output.
    """

    name: str = ""

    @abstractmethod
    def heading(self, level: int, text: str) -> str:
        """Return a heading followed by a blank line."""

    def bullet_point(self, text: str) -> str:
        """Return a single bullet list item."""
        return f"* {text}\n"

    @abstractmethod
    def icon(self, name: str) -> str:
        """Return the markup for an emoji shortcode name."""

    @abstractmethod
    def link(self, text: str, url: str) -> str:
        """Return a hyperlink with the given visible text."""

    @abstractmethod
    def admonition(self, kind: AdmonitionKind, text: str) -> str:
        """Return a callout block."""


class MarkdownFormatter(Formatter):
    """GitHub-flavored Markdown."""

    name = "markdown"

    def heading(self, level: int, text: str) -> str:
        return f"{'#' * level} {text}\n\n"

    def icon(self, name: str) -> str:
        # The rendering platform resolves shortcodes, so no table lookup here.
        return f":{name}:"

    def link(self, text: str, url: str) -> str:
        return f"[{text}]({url})"

    def admonition(self, kind: AdmonitionKind, text: str) -> str:
        return f"> [!{_admonition_name(kind)}]\\\n> {text}"


class AsciiDocFormatter(Formatter):
    """AsciiDoc with numeric character references for icons."""

    name = "asciidoc"

    def heading(self, level: int, text: str) -> str:
        return f"{'=' * level} {text}\n\n"

    def icon(self, name: str) -> str:
        return f"&#x{emoji_codepoint(name):X};"

    def link(self, text: str, url: str) -> str:
        return f"{url}[{text}]"

    def admonition(self, kind: AdmonitionKind, text: str) -> str:
        return f"{_admonition_name(kind)}: {text}"


FORMAT_ALIASES: dict[str, type[Formatter]] = {
    "md": MarkdownFormatter,
    "markdown": MarkdownFormatter,
    "adoc": AsciiDocFormatter,
    "asciidoc": AsciiDocFormatter,
}


def formatter_for(name: Optional[str]) -> Formatter:
    """Return the formatter for a format name, defaulting to Markdown."""
    if name is None:
        return MarkdownFormatter()
    normalized = name.strip().lower()
    formatter_class = FORMAT_ALIASES.get(normalized)
    if formatter_class is None:
        log_warning(f"unknown output format '{name}', falling back to markdown.")
        return MarkdownFormatter()
    log_debug(f"using {formatter_class.name} formatter for format '{name}'.")
    return formatter_class()
