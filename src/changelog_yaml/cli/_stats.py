"""Summary table of what a rendered changelog contains."""

from __future__ import annotations

from rich.table import Table

from ..categories import CATEGORY_INFO, CATEGORY_RENDER_ORDER, Category
from ..document import ChangelogDocument
from ..utils import console, print_renderable

__all__ = ["build_stats_table", "show_stats"]


def _category_header(category: Category) -> str:
    return CATEGORY_INFO[category].label


def build_stats_table(document: ChangelogDocument) -> Table:
    """Return one row per release and repository with per-category counts."""
    used = [
        category
        for category in CATEGORY_RENDER_ORDER
        if any(
            changes.get(category)
            for release in document.releases
            for changes in release.repos.values()
        )
    ]

    table = Table(
        box=None, padding=(0, 2, 0, 0), show_header=True, header_style="stats.header"
    )
    table.add_column("RELEASE", style="cyan", no_wrap=True)
    table.add_column("DATE", style="dim", no_wrap=True)
    table.add_column("REPOSITORY", no_wrap=True)
    for category in used:
        table.add_column(_category_header(category).upper(), justify="right", no_wrap=True)
    table.add_column("Σ", justify="right", style="stats.count", no_wrap=True)

    for release in document.releases:
        if not release.repos:
            table.add_row(release.name, release.date, "-", *["-"] * len(used), "0")
            continue
        for short_name in release.repository_names():
            changes = release.repos[short_name]
            counts = [
                str(len(changes.get(category))) if changes.get(category) else "-"
                for category in used
            ]
            table.add_row(release.name, release.date, short_name, *counts, str(len(changes)))
    return table


def show_stats(document: ChangelogDocument) -> None:
    """Print the summary table to stderr."""
    if not document.releases:
        console.print("[dim]No releases.[/dim]")
        return
    print_renderable(build_stats_table(document))
