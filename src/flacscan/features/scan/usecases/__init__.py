"""Use cases for scanning a music library."""

from .counters import count_mutagen_matches, count_streaming_matches
from .walker import iter_flac_files

__all__ = ["count_mutagen_matches", "count_streaming_matches", "iter_flac_files"]
