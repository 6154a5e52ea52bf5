"""Changelog document model and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import IO, Any, Iterator, Mapping, MutableMapping, Optional, Union

import yaml

from .categories import CATEGORY_RENDER_ORDER, Category, parse_category
from .errors import DocumentError, InputError
from .utils import coerce_text, log_debug

__all__ = [
    "RepositoryDefinition",
    "Changes",
    "Release",
    "ChangelogDocument",
    "parse_document",
    "load_document",
    "read_document",
]


def _frozen_mapping(values: Mapping[Any, Any] | None = None) -> Mapping[Any, Any]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class RepositoryDefinition:
    """Canonical location and display metadata for a repository short-name."""

    repo: str
    name: str = ""
    description: str = ""


@dataclass(frozen=True)
class Changes:
    """Categorized change lines for one repository within one release."""

    lines: Mapping[Category, tuple[str, ...]] = field(default_factory=_frozen_mapping)

    def get(self, category: Category) -> tuple[str, ...]:
        """Return the lines for ``category`` in source order."""
        return self.lines.get(category, ())

    def __iter__(self) -> Iterator[tuple[Category, tuple[str, ...]]]:
        """Yield non-empty categories in render order."""
        for category in CATEGORY_RENDER_ORDER:
            lines = self.get(category)
            if lines:
                yield category, lines

    def __len__(self) -> int:
        return sum(len(lines) for lines in self.lines.values())


@dataclass(frozen=True)
class Release:
    """A named, dated release with changes grouped by repository."""

    name: str
    date: str = ""
    notice: str = ""
    repos: Mapping[str, Changes] = field(default_factory=_frozen_mapping)

    def repository_names(self) -> list[str]:
        """Return repository short-names in lexicographic order."""
        return sorted(self.repos)


@dataclass(frozen=True)
class ChangelogDocument:
    """Root of a parsed changelog."""

    repo: str
    releases: tuple[Release, ...] = ()
    repos: Mapping[str, RepositoryDefinition] = field(default_factory=_frozen_mapping)

    def repository(self, short_name: str) -> Optional[RepositoryDefinition]:
        return self.repos.get(short_name)


def _require_mapping(value: object, what: str) -> Mapping[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DocumentError(f"{what} must be a mapping")
    return value


def _normalized_keys(raw: Mapping[Any, Any]) -> dict[str, Any]:
    return {str(key).strip().lower(): value for key, value in raw.items()}


def _parse_line(value: object, where: str) -> str:
    if isinstance(value, (Mapping, list)):
        raise DocumentError(f"{where} must be plain text, got a {type(value).__name__}")
    return value if isinstance(value, str) else coerce_text(value)


def _parse_lines(value: object, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, list):
        return tuple(_parse_line(item, where) for item in value if item is not None)
    return (_parse_line(value, where),)


def _parse_changes(raw: object, *, release: str, repository: str) -> Changes:
    mapping = _require_mapping(raw, f"changes for '{repository}' in release '{release}'")
    lines: dict[Category, tuple[str, ...]] = {}
    for key, value in mapping.items():
        category = parse_category(str(key))
        where = f"'{key}' entry for '{repository}' in release '{release}'"
        lines[category] = lines.get(category, ()) + _parse_lines(value, where)
    return Changes(lines=_frozen_mapping(lines))


def _parse_release(raw: object, index: int) -> Release:
    if not isinstance(raw, Mapping):
        raise DocumentError(f"release #{index + 1} must be a mapping")
    data = _normalized_keys(raw)
    name = coerce_text(data.get("name"))
    if not name:
        raise DocumentError(f"release #{index + 1} missing required 'name'")
    repos: dict[str, Changes] = {}
    for short_name, changes in _require_mapping(
        data.get("repos"), f"'repos' of release '{name}'"
    ).items():
        key = coerce_text(short_name)
        repos[key] = _parse_changes(changes, release=name, repository=key)
    return Release(
        name=name,
        date=coerce_text(data.get("date")),
        notice=coerce_text(data.get("notice"), strip=False),
        repos=_frozen_mapping(repos),
    )


def _parse_repository(short_name: str, raw: object) -> RepositoryDefinition:
    if isinstance(raw, str):
        data: dict[str, Any] = {"repo": raw}
    else:
        data = _normalized_keys(_require_mapping(raw, f"repository '{short_name}'"))
    repo = coerce_text(data.get("repo"))
    if not repo:
        raise DocumentError(f"repository '{short_name}' missing required 'repo'")
    return RepositoryDefinition(
        repo=repo,
        name=coerce_text(data.get("name")),
        description=coerce_text(data.get("description"), strip=False),
    )


def parse_document(raw: object) -> ChangelogDocument:
    """Build a document from already-decoded YAML data."""
    if not isinstance(raw, MutableMapping):
        raise DocumentError("changelog root must be a mapping")
    data = _normalized_keys(raw)

    repo = coerce_text(data.get("repo"))
    if not repo:
        raise DocumentError("changelog missing required 'repo'")

    releases_raw = data.get("releases")
    if releases_raw is None:
        releases_raw = []
    if not isinstance(releases_raw, list):
        raise DocumentError("'releases' must be a list")
    releases = tuple(_parse_release(item, index) for index, item in enumerate(releases_raw))

    repos = {
        coerce_text(short_name): _parse_repository(coerce_text(short_name), value)
        for short_name, value in _require_mapping(data.get("repos"), "'repos'").items()
    }
    log_debug(f"parsed {len(releases)} release(s) and {len(repos)} repository definition(s).")
    return ChangelogDocument(repo=repo, releases=releases, repos=_frozen_mapping(repos))


def load_document(source: Union[str, IO[str]]) -> ChangelogDocument:
    """Decode YAML text or a text stream into a document."""
    try:
        raw = yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise DocumentError(f"invalid YAML: {exc}") from exc
    if raw is None:
        raise DocumentError("changelog document is empty")
    return parse_document(raw)


def read_document(path: Path) -> ChangelogDocument:
    """Load a document from a file on disk."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            return load_document(handle)
    except OSError as exc:
        raise InputError(f"failed to read {path}: {exc}") from exc
