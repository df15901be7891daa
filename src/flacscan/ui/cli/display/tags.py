"""Render the entries of a single tag block."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flacscan.features.tags import TagEntry


def render_tag_table(
    console: Console,
    path: Path,
    entries: Iterable[TagEntry],
    *,
    vendor: str | None = None,
) -> int:
    """Print ``entries`` as a table in file order and return how many were shown."""

    table = Table(title=str(path), caption=f"vendor: {vendor}" if vendor else None)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    shown = 0
    for shown, entry in enumerate(entries, start=1):
        table.add_row(str(shown), escape(entry.key), escape(entry.value))

    if shown:
        console.print(table)
    else:
        console.print(f"[yellow]No vorbis comments in {escape(str(path))}[/yellow]")
    return shown


__all__ = ["render_tag_table"]
