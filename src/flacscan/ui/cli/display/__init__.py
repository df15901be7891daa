"""Display helpers for the CLI."""

from flacscan.ui.cli.display.summary import render_scan_summary
from flacscan.ui.cli.display.tags import render_tag_table

__all__ = ["render_scan_summary", "render_tag_table"]
