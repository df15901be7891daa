"""Application service that times tag counters over a music library.

The CLI builds a ``ScanRequest`` and hands it to ``LibraryScanService`` so the
walking, timing and logging live in one place.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import final

from flacscan.config.config import FILE_SUFFIX_DEFAULT
from flacscan.features.scan.domain.models import (
    MUTAGEN_READER,
    STREAMING_READER,
    MatchCount,
    ScanResult,
)
from flacscan.features.scan.usecases.counters import (
    count_mutagen_matches,
    count_streaming_matches,
)
from flacscan.features.scan.usecases.walker import iter_flac_files
from flacscan.platform.logging import logger

Counter = Callable[..., MatchCount]


@dataclass(frozen=True)
class ScanRequest:
    """Input parameters for a counting run.

    Attributes:
        root: File or directory to scan.
        value: Tag value to count.
        key: Optional field name the value must belong to.
        follow_links: Whether the walker follows symlinked directories.
        suffix: File name ending that marks a FLAC file.
        include_baseline: Also run the mutagen counter.
    """

    root: Path
    value: str
    key: str | None = None
    follow_links: bool = True
    suffix: str = FILE_SUFFIX_DEFAULT
    include_baseline: bool = True


@final
class LibraryScanService:
    """Run the configured counters and time each one."""

    def __init__(
        self,
        *,
        counters: dict[str, Counter] | None = None,
        walker: Callable[..., Iterable[Path]] = iter_flac_files,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._counters = counters or {
            MUTAGEN_READER: count_mutagen_matches,
            STREAMING_READER: count_streaming_matches,
        }
        self._walker = walker
        self._clock = clock

    def readers_for(self, request: ScanRequest) -> list[str]:
        """Return the reader names a request runs, in execution order."""
        return [
            name
            for name in self._counters
            if request.include_baseline or name != MUTAGEN_READER
        ]

    def run(self, request: ScanRequest) -> list[ScanResult]:
        """Walk ``request.root`` once per reader and count matches.

        Each reader gets a fresh walk so that directory listing cost is
        included in every timing.
        """
        results: list[ScanResult] = []
        for name in self.readers_for(request):
            counter = self._counters[name]
            logger.debug(
                "Counter started: %s",
                name,
                extra={"scan_event": "scan.reader.start", "source_path": str(request.root)},
            )

            start = self._clock()
            paths = self._walker(
                request.root,
                follow_links=request.follow_links,
                suffix=request.suffix,
            )
            count = counter(paths, request.value, key=request.key)
            elapsed = self._clock() - start

            logger.info(
                "Counter %s finished over %d files",
                name,
                count.files,
                extra={
                    "scan_event": "scan.reader.complete",
                    "matches": count.matches,
                    "failures": count.failures,
                    "duration_seconds": elapsed,
                },
            )
            results.append(ScanResult(reader=name, count=count, elapsed_seconds=elapsed))
        return results


__all__ = ["LibraryScanService", "ScanRequest"]
