"""Command line argument handling package."""

from flacscan.ui.cli.args.parser import ArgumentParser
from flacscan.ui.cli.args.options import CLIArgs, CountArgs, TagsArgs

__all__ = ["ArgumentParser", "CLIArgs", "CountArgs", "TagsArgs"]
