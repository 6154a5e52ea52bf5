"""CLI package for changelog-yaml.

This package contains the command line implementation:
- _core.py: CLIContext, exit codes, main entry point
- _render.py: the render command
- _stats.py: rich summary table for --stats
"""

from __future__ import annotations

from ._core import (
    CLIContext,
    EXIT_FATAL,
    EXIT_PROPAGATED,
    INFO_PREFIX,
    VERSION_FLAGS,
    create_cli_context,
    exit_code_for,
    main,
)
from ._render import create_cli_command, run_render
from ._stats import build_stats_table, show_stats

cli = create_cli_command()


__all__ = [
    "cli",
    "main",
    "CLIContext",
    "EXIT_FATAL",
    "EXIT_PROPAGATED",
    "INFO_PREFIX",
    "VERSION_FLAGS",
    "create_cli_context",
    "exit_code_for",
    "run_render",
    "build_stats_table",
    "show_stats",
]
