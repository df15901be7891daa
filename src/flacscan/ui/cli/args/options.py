"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CountArgs:
    """Command line arguments for the ``count`` subcommand."""

    command: Literal["count"]
    root: Path
    value: str
    key: str | None
    follow_links: bool
    suffix: str
    include_baseline: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TagsArgs:
    """Command line arguments for the ``tags`` subcommand."""

    command: Literal["tags"]
    file_path: Path
    verbose: bool
    quiet: bool


CLIArgs = CountArgs | TagsArgs

__all__ = ["CLIArgs", "CountArgs", "TagsArgs"]
