"""src/flacscan/ui/cli/commands/count.py
What: Run the tag counters over a library from the CLI.
Why: Bridge parsed arguments with the library scan service.
"""

from typing import override

from rich.console import Console

from flacscan.application.services import LibraryScanService, ScanRequest
from flacscan.features.scan import ScanResult
from flacscan.ui.cli.args.options import CountArgs
from flacscan.ui.cli.commands.executor import CommandExecutor
from flacscan.ui.cli.display import render_scan_summary


class CountCommand(CommandExecutor[CountArgs, list[ScanResult]]):
    """Command for counting tag values under a directory."""

    def __init__(
        self,
        args: CountArgs,
        console: Console | None = None,
        service: LibraryScanService | None = None,
    ) -> None:
        super().__init__(args, console)
        self.service = service or LibraryScanService()
        self.request = ScanRequest(
            root=args.root,
            value=args.value,
            key=args.key,
            follow_links=args.follow_links,
            suffix=args.suffix,
            include_baseline=args.include_baseline,
        )

    @override
    def execute(self) -> list[ScanResult]:
        """Run every requested counter and print the comparison.

        Returns:
            List of timed counter results.
        """
        results = self.service.run(self.request)
        render_scan_summary(self.console, results, value=self.args.value, quiet=self.args.quiet)
        return results
