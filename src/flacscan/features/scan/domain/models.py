# Where: flacscan.features.scan.domain.models
# What: Result records produced by library scans.
# Why: Share one shape between the counters, the benchmark runner and the CLI.

from dataclasses import dataclass
from typing import Final

STREAMING_READER: Final[str] = "streaming"
MUTAGEN_READER: Final[str] = "mutagen"


@dataclass(frozen=True, slots=True)
class MatchCount:
    """Outcome of counting matching tag values over a set of files."""

    matches: int = 0
    files: int = 0
    failures: int = 0
    skipped_entries: int = 0


@dataclass(frozen=True, slots=True)
class ScanResult:
    """A timed counter run for one reader."""

    reader: str
    count: MatchCount
    elapsed_seconds: float

    @property
    def matches(self) -> int:
        return self.count.matches

    @property
    def files(self) -> int:
        return self.count.files

    @property
    def failures(self) -> int:
        return self.count.failures


__all__ = ["MUTAGEN_READER", "STREAMING_READER", "MatchCount", "ScanResult"]
