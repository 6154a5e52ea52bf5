"""Core CLI infrastructure: context, exit codes, and the entry point."""

from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from .. import __version__ as package_version
from ..config import Config, default_config_path, load_config
from ..errors import ChangelogError, FatalChangelogError
from ..utils import (
    INFO_PREFIX,
    abort_on_user_interrupt,
    configure_logging,
    log_debug,
    log_error,
)

__all__ = [
    "CLIContext",
    "INFO_PREFIX",
    "EXIT_FATAL",
    "EXIT_PROPAGATED",
    "VERSION_FLAGS",
    "create_cli_context",
    "exit_code_for",
    "main",
]

VERSION_FLAGS = {"--version", "-V"}

# Invalid or incomplete input document.
EXIT_FATAL = 3
# Malformed reference, unreadable input, or failed write.
EXIT_PROPAGATED = 4


@dataclass
class CLIContext:
    """Shared command context."""

    config_path: Optional[Path]
    debug: bool = False
    _config: Optional[Config] = None

    def ensure_config(self) -> Config:
        if self._config is None:
            if self.config_path is None:
                self._config = Config()
            else:
                try:
                    self._config = load_config(self.config_path)
                except FileNotFoundError as error:
                    raise click.ClickException(
                        f"config file not found: {self.config_path}"
                    ) from error
                except ValueError as error:
                    raise click.ClickException(str(error)) from error
        return self._config

    def reset_config(self, config: Config) -> None:
        self._config = config


def create_cli_context(
    *,
    config: Optional[Path] = None,
    debug: bool = False,
    search_root: Optional[Path] = None,
) -> CLIContext:
    """Return a CLIContext, picking up a config file next to ``search_root``."""

    configure_logging(debug)

    config_path = config.resolve() if config else None
    if config_path is None:
        candidate = default_config_path(search_root or Path("."))
        if candidate.is_file():
            config_path = candidate.resolve()
    log_debug(f"using config path: {config_path or '<defaults>'}")
    return CLIContext(config_path=config_path, debug=debug)


def exit_code_for(error: ChangelogError) -> int:
    """Return the process exit status for a rendering failure."""
    if isinstance(error, FatalChangelogError):
        return EXIT_FATAL
    return EXIT_PROPAGATED


def main(argv: list[str] | None = None) -> int:
    """Entry point for console_scripts."""
    # Import here to avoid a circular import at module load time.
    from . import cli

    args = list(argv) if argv is not None else list(sys.argv[1:])

    if any(flag in args for flag in VERSION_FLAGS):
        click.echo(package_version)
        return 0

    try:
        cli.main(args=args, prog_name="changelog-yaml", standalone_mode=False)
    except ChangelogError as exc:
        log_error(str(exc))
        log_debug(traceback.format_exc())
        return exit_code_for(exc)
    except click.ClickException as exc:
        exc.show(file=sys.stderr)
        exit_code = getattr(exc, "exit_code", 1)
        return exit_code if isinstance(exit_code, int) else 1
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except (click.exceptions.Abort, KeyboardInterrupt) as exc:
        try:
            abort_on_user_interrupt(exc)
        except click.exceptions.Exit as exit_exc:
            exit_code = getattr(exit_exc, "exit_code", 130)
            return exit_code if isinstance(exit_code, int) else 130
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    return 0
