"""Render a parsed changelog document through a formatter."""

from __future__ import annotations

import io
from typing import Optional, TextIO

from .categories import CATEGORY_RENDER_ORDER, Category, category_info
from .document import ChangelogDocument, Changes, Release, RepositoryDefinition
from .errors import MissingRepositoryError, OutputError
from .expanders import DEFAULT_HOST, ExpansionContext, LINE_EXPANDERS, NOTICE_EXPANDERS, expand
from .formatters import Formatter
from .utils import log_debug

__all__ = [
    "DocumentRenderer",
    "write_document",
    "render_document",
]

RELEASE_ICON = "bookmark"
DOCUMENT_TITLE = "Changelog"


class DocumentRenderer:
    """Walk releases, repositories, and categories, writing markup to a sink.

    Output is written as it is produced. When rendering fails part-way, the
    sink holds a truncated document.
    """

    def __init__(
        self,
        formatter: Formatter,
        sink: TextIO,
        *,
        host: Optional[str] = None,
    ) -> None:
        self.formatter = formatter
        self.sink = sink
        self.host = (host or DEFAULT_HOST).rstrip("/")

    def _write(self, text: str) -> None:
        try:
            self.sink.write(text)
        except OSError as exc:
            raise OutputError(f"failed to write output: {exc}") from exc

    def _url(self, *parts: str) -> str:
        return "/".join([self.host, *parts])

    def render(self, document: ChangelogDocument) -> None:
        self._write(self.formatter.heading(1, DOCUMENT_TITLE))
        for release in document.releases:
            self.render_release(document, release)
        try:
            self.sink.flush()
        except OSError as exc:
            raise OutputError(f"failed to flush output: {exc}") from exc

    def render_release(self, document: ChangelogDocument, release: Release) -> None:
        log_debug(f"rendering release {release.name}.")
        formatter = self.formatter
        tag_link = formatter.link(
            release.name, self._url(document.repo, "releases", "tag", release.name)
        )
        title = f"{formatter.icon(RELEASE_ICON)} {tag_link} ({release.date})"
        self._write(formatter.heading(2, title))

        if release.notice:
            context = ExpansionContext(formatter=formatter, host=self.host)
            self._write(f"{expand(release.notice, context, NOTICE_EXPANDERS)}\n\n")

        for short_name in release.repository_names():
            definition = document.repository(short_name)
            if definition is None:
                raise MissingRepositoryError(short_name, release.name)
            self.render_repository(short_name, definition, release.repos[short_name])

    def render_repository(
        self,
        short_name: str,
        definition: RepositoryDefinition,
        changes: Changes,
    ) -> None:
        formatter = self.formatter
        title = formatter.link(short_name, self._url(definition.repo))
        if definition.description:
            title = f"{title} - {definition.description}"
        self._write(formatter.heading(3, title))

        context = ExpansionContext(
            formatter=formatter, repository=definition.repo, host=self.host
        )
        for category in CATEGORY_RENDER_ORDER:
            for line in changes.get(category):
                self._write(self.render_change(category, line, context))
        self._write("\n")

    def render_change(self, category: Category, line: str, context: ExpansionContext) -> str:
        """Return the bullet for one change line."""
        info = category_info(category)
        prefix = self.formatter.icon(info.icon)
        if category is Category.BREAKING:
            prefix += f"[{info.label}]"
        expanded = expand(line, context, LINE_EXPANDERS)
        return self.formatter.bullet_point(f"{prefix} {expanded}")


def write_document(
    document: ChangelogDocument,
    formatter: Formatter,
    sink: TextIO,
    *,
    host: Optional[str] = None,
) -> None:
    """Render ``document`` incrementally into ``sink``."""
    DocumentRenderer(formatter, sink, host=host).render(document)


def render_document(
    document: ChangelogDocument,
    formatter: Formatter,
    *,
    host: Optional[str] = None,
) -> str:
    """Render ``document`` and return the complete text."""
    buffer = io.StringIO()
    write_document(document, formatter, buffer, host=host)
    return buffer.getvalue()
