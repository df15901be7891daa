"""src/flacscan/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Keep argument and console handling identical across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rich.console import Console

ArgsT = TypeVar("ArgsT")
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """Base class for command execution."""

    args: ArgsT
    console: Console

    def __init__(self, args: ArgsT, console: Console | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Parsed command line arguments.
            console: Console for report output. Defaults to stdout.
        """
        self.args = args
        self.console = console or Console()

    @abstractmethod
    def execute(self) -> ResultT:
        """Execute the command."""
        pass
