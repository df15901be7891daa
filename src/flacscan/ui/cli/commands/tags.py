"""src/flacscan/ui/cli/commands/tags.py
What: Print the vorbis comments of one FLAC file.
Why: Inspect what the streaming reader sees in a single file.
"""

from typing import override

from flacscan.features.tags import TagEntry, TagReadError, read_from
from flacscan.platform.logging import logger
from flacscan.ui.cli.args.options import TagsArgs
from flacscan.ui.cli.commands.executor import CommandExecutor
from flacscan.ui.cli.display import render_tag_table


class TagsCommand(CommandExecutor[TagsArgs, bool]):
    """Command for listing the tags of a single file."""

    @override
    def execute(self) -> bool:
        """Read and display the file's entries.

        Returns:
            bool: ``False`` if the file could not be read completely.
        """
        path = self.args.file_path
        entries: list[TagEntry] = []
        try:
            cursor = read_from(path)
            vendor = cursor.vendor or None
            entries.extend(cursor)
        except TagReadError as e:
            logger.error(
                "Failed to read tags",
                extra={
                    "scan_event": "scan.file.error",
                    "source_path": str(path),
                    "error_message": str(e),
                },
            )
            return False

        _ = render_tag_table(self.console, path, entries, vendor=vendor)
        return True
