"""Command line interface package."""

from flacscan.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
