"""Command line interface for flacscan."""

import sys
from typing import final

from flacscan.platform.logging import logger
from flacscan.ui.cli.args import ArgumentParser
from flacscan.ui.cli.args.options import CLIArgs, CountArgs, TagsArgs
from flacscan.ui.cli.commands import CountCommand, TagsCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, CountArgs):
                _ = CountCommand(args).execute()
                return

            assert isinstance(args, TagsArgs)
            if not TagsCommand(args).execute():
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
