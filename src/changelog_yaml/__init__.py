"""Core package exports for changelog-yaml."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as metadata_version
from typing import TYPE_CHECKING, Any

__all__ = ["__version__", "ChangelogYaml", "render_document", "load_document"]

try:
    __version__ = metadata_version("changelog-yaml")
except PackageNotFoundError:  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"

if TYPE_CHECKING:  # pragma: no cover
    from .api import ChangelogYaml
    from .document import load_document
    from .render import render_document


def __getattr__(name: str) -> Any:  # pragma: no cover - simple delegation
    if name == "ChangelogYaml":
        from .api import ChangelogYaml as _ChangelogYaml

        return _ChangelogYaml
    if name == "render_document":
        from .render import render_document as _render_document

        return _render_document
    if name == "load_document":
        from .document import load_document as _load_document

        return _load_document
    raise AttributeError(f"module 'changelog_yaml' has no attribute {name!r}")
