"""Utilities for rendering counter results."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flacscan.features.scan import ScanResult


def format_result_line(result: ScanResult) -> str:
    """Return the one-line report for a counter run."""
    return (
        f"{result.reader} returns {result.matches} results "
        f"in {result.elapsed_seconds}s."
    )


def render_scan_summary(
    console: Console,
    results: Sequence[ScanResult],
    *,
    value: str,
    quiet: bool = False,
) -> None:
    """Print one line per counter run, followed by a comparison table.

    Args:
        console: Rich console instance used to render output.
        results: Counter runs in execution order.
        value: The tag value that was counted.
        quiet: Only print the one-line reports.
    """
    for result in results:
        console.print(format_result_line(result), markup=False, highlight=False)

    if quiet or not results:
        return

    table = Table(title=f"Matches for {escape(repr(value))}")
    table.add_column("Reader", style="cyan")
    table.add_column("Matches", justify="right")
    table.add_column("Files", justify="right")
    table.add_column("Failed", justify="right")
    table.add_column("Seconds", justify="right")

    for result in results:
        failed_style = "red" if result.failures else "green"
        table.add_row(
            result.reader,
            str(result.matches),
            str(result.files),
            f"[{failed_style}]{result.failures}[/{failed_style}]",
            f"{result.elapsed_seconds:.4f}",
        )
    console.print(table)

    counts = {result.matches for result in results}
    if len(counts) > 1:
        console.print("[yellow]Readers disagree on the number of matches.[/yellow]")


__all__ = ["format_result_line", "render_scan_summary"]
