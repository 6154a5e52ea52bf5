"""Python-friendly facade for rendering changelogs without the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

from .config import Config, load_config
from .document import ChangelogDocument, load_document, read_document
from .formatters import Formatter, formatter_for
from .render import render_document, write_document


class ChangelogYaml:
    """High-level helper that mirrors the CLI for Python callers."""

    def __init__(
        self,
        document: ChangelogDocument,
        *,
        config: Config | Path | str | None = None,
    ) -> None:
        if config is None:
            self._config = Config()
        elif isinstance(config, Config):
            self._config = config
        else:
            self._config = load_config(Path(config))
        self._document = document

    @classmethod
    def from_file(
        cls, path: Path | str, *, config: Config | Path | str | None = None
    ) -> "ChangelogYaml":
        """Load a changelog YAML file."""

        return cls(read_document(Path(path)), config=config)

    @classmethod
    def from_text(
        cls, text: str, *, config: Config | Path | str | None = None
    ) -> "ChangelogYaml":
        """Parse changelog YAML held in a string."""

        return cls(load_document(text), config=config)

    @property
    def document(self) -> ChangelogDocument:
        """Expose the parsed document for advanced scenarios."""

        return self._document

    @property
    def config(self) -> Config:
        return self._config

    def _formatter(self, output_format: Optional[str]) -> Formatter:
        return formatter_for(output_format or self._config.output_format)

    def render(self, output_format: Optional[str] = None) -> str:
        """Return the document rendered as Markdown or AsciiDoc."""

        return render_document(
            self._document, self._formatter(output_format), host=self._config.host
        )

    def write(self, sink: TextIO, output_format: Optional[str] = None) -> None:
        """Render the document incrementally into ``sink``."""

        write_document(
            self._document, self._formatter(output_format), sink, host=self._config.host
        )
