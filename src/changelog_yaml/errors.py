"""Exception hierarchy for changelog rendering."""

from __future__ import annotations

__all__ = [
    "ChangelogError",
    "FatalChangelogError",
    "PropagatedChangelogError",
    "DocumentError",
    "UnknownCategoryError",
    "UnknownIconError",
    "UnknownAdmonitionError",
    "MissingRepositoryError",
    "ReferenceParseError",
    "OutputError",
    "InputError",
]


class ChangelogError(Exception):
    """Base class for all errors raised while loading or rendering a changelog."""


class FatalChangelogError(ChangelogError, ValueError):
    """The input document is malformed or incomplete; the render is scrapped."""


class PropagatedChangelogError(ChangelogError):
    """A parse or I/O failure reported up through the render call chain."""


class DocumentError(FatalChangelogError):
    """The changelog document failed a presence check."""


class UnknownCategoryError(FatalChangelogError):
    """A change category is not part of the fixed category set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown category '{name}'")
        self.name = name


class UnknownIconError(FatalChangelogError):
    """An icon name has no entry in the emoji table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown icon '{name}'")
        self.name = name


class UnknownAdmonitionError(FatalChangelogError):
    """An admonition keyword or kind has no rendering."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown admonition '{name}'")
        self.name = name


class MissingRepositoryError(FatalChangelogError):
    """A release references a repository short-name without a definition."""

    def __init__(self, short_name: str, release: str) -> None:
        super().__init__(
            f"release '{release}' references repository '{short_name}' "
            "which has no entry under 'repos'"
        )
        self.short_name = short_name
        self.release = release


class ReferenceParseError(PropagatedChangelogError):
    """An inline reference could not be parsed."""

    def __init__(self, reference: str, line: str) -> None:
        super().__init__(f"malformed pull request reference '{reference}' in line: {line}")
        self.reference = reference
        self.line = line


class OutputError(PropagatedChangelogError):
    """Writing to the output sink failed."""


class InputError(PropagatedChangelogError):
    """Reading the input document failed."""
