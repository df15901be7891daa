"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from flacscan.config.config import Config
from flacscan.config.paths import default_log_file
from flacscan.platform.logging import logger, setup_logger
from flacscan.ui.cli.args.options import CLIArgs, CountArgs, TagsArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="flacscan",
            description="flacscan - stream vorbis comments out of FLAC files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        count_parser = subparsers.add_parser(
            "count",
            help="Count tag values across a music library and time each reader",
        )
        _ = count_parser.add_argument(
            "root",
            type=str,
            help="FLAC file or directory to scan",
            metavar="ROOT",
        )
        _ = count_parser.add_argument(
            "--value",
            type=str,
            help="Tag value to count (defaults to match_value from the config file)",
        )
        _ = count_parser.add_argument(
            "--key",
            type=str,
            help="Only count values stored under this field name",
        )
        _ = count_parser.add_argument(
            "--skip-baseline",
            action="store_true",
            help="Do not run the mutagen reader for comparison",
        )
        _ = count_parser.add_argument(
            "--no-follow-links",
            action="store_true",
            help="Do not descend into symlinked directories",
        )
        ArgumentParser._add_verbosity_flags(count_parser)

        tags_parser = subparsers.add_parser(
            "tags",
            help="List the vorbis comments of a single FLAC file",
        )
        _ = tags_parser.add_argument(
            "file_path",
            type=str,
            help="FLAC file to read",
            metavar="FILE",
        )
        ArgumentParser._add_verbosity_flags(tags_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or default_log_file()
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "count":
            return ArgumentParser._process_count(parsed_args, configuration)

        if command == "tags":
            return ArgumentParser._process_tags(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_count(parsed_args: argparse.Namespace, configuration: Config) -> CountArgs:
        root = Path(parsed_args.root)
        if not root.exists():
            logger.error("Path does not exist: %s", root)
            sys.exit(1)

        return CountArgs(
            command="count",
            root=root,
            value=parsed_args.value if parsed_args.value is not None else configuration.match_value,
            key=parsed_args.key,
            follow_links=configuration.follow_links and not parsed_args.no_follow_links,
            suffix=configuration.file_suffix,
            include_baseline=not parsed_args.skip_baseline,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_tags(parsed_args: argparse.Namespace) -> TagsArgs:
        file_path = Path(parsed_args.file_path)
        if not file_path.is_file():
            logger.error("File does not exist: %s", file_path)
            sys.exit(1)

        return TagsArgs(
            command="tags",
            file_path=file_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser"]
