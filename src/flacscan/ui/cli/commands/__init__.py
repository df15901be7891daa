"""Command execution package for CLI."""

from flacscan.ui.cli.commands.executor import CommandExecutor
from flacscan.ui.cli.commands.count import CountCommand
from flacscan.ui.cli.commands.tags import TagsCommand

__all__ = ["CommandExecutor", "CountCommand", "TagsCommand"]
