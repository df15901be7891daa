# Where: flacscan.features.scan.__init__
# What: Expose the library scan use cases and result records.
# Why: Provide a cohesive import surface for the application layer.

from .domain import MUTAGEN_READER, STREAMING_READER, MatchCount, ScanResult
from .usecases import count_mutagen_matches, count_streaming_matches, iter_flac_files

__all__ = [
    "MUTAGEN_READER",
    "STREAMING_READER",
    "MatchCount",
    "ScanResult",
    "count_mutagen_matches",
    "count_streaming_matches",
    "iter_flac_files",
]
