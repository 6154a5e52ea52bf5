"""The render command: YAML changelog in, Markdown or AsciiDoc out."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional

import click

from .. import __version__ as package_version
from ..document import ChangelogDocument, load_document, read_document
from ..errors import InputError
from ..formatters import formatter_for
from ..render import write_document
from ..utils import log_debug
from ._core import CLIContext, create_cli_context
from ._stats import show_stats

__all__ = ["run_render", "create_cli_command"]


def _read_input(source: Path) -> ChangelogDocument:
    if str(source) == "-":
        log_debug("reading changelog from stdin.")
        stdin = click.get_text_stream("stdin", encoding="utf-8")
        try:
            return load_document(stdin)
        except OSError as exc:
            raise InputError(f"failed to read stdin: {exc}") from exc
    log_debug(f"reading changelog from {source}.")
    return read_document(source)


def run_render(
    ctx: CLIContext,
    *,
    source: Path,
    sink: IO[str],
    output_format: Optional[str] = None,
    host: Optional[str] = None,
    stats: bool = False,
) -> None:
    """Load the changelog from ``source`` and render it into ``sink``."""

    try:
        config = ctx.ensure_config().with_overrides(output_format=output_format, host=host)
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    ctx.reset_config(config)

    formatter = formatter_for(config.output_format)
    document = _read_input(source)
    write_document(document, formatter, sink, host=config.host)
    if stats:
        show_stats(document)


def create_cli_command() -> click.Command:
    """Create the top-level command."""

    @click.command(
        "changelog-yaml", context_settings={"help_option_names": ["-h", "--help"]}
    )
    @click.argument(
        "source",
        metavar="INPUT",
        type=click.Path(path_type=Path, dir_okay=False, allow_dash=True),
        default="-",
    )
    @click.option(
        "--format",
        "-f",
        "output_format",
        default=None,
        help="Output format: md/markdown (default) or adoc/asciidoc.",
    )
    @click.option(
        "--output",
        "-o",
        "sink",
        type=click.File("w", encoding="utf-8"),
        default="-",
        help="Write the document to a file instead of stdout.",
    )
    @click.option(
        "--host",
        default=None,
        help="Base URL for generated links (default: https://github.com).",
    )
    @click.option(
        "--config",
        type=click.Path(path_type=Path, dir_okay=False),
        help="Path to a changelog-yaml config file.",
    )
    @click.option(
        "--stats",
        is_flag=True,
        help="Print a summary of releases and entry counts to stderr.",
    )
    @click.option(
        "--debug",
        "-d",
        is_flag=True,
        help="Enable debug logging.",
    )
    @click.pass_context
    def _cli(
        ctx: click.Context,
        source: Path,
        output_format: Optional[str],
        sink: IO[str],
        host: Optional[str],
        config: Optional[Path],
        stats: bool,
        debug: bool,
    ) -> None:
        """Render a YAML changelog INPUT (default: stdin) as Markdown or AsciiDoc."""

        ctx.obj = create_cli_context(config=config, debug=debug)
        run_render(
            ctx.obj,
            source=source,
            sink=sink,
            output_format=output_format,
            host=host,
            stats=stats,
        )

    return click.version_option(version=package_version)(_cli)
