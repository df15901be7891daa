"""Domain records for library scans."""

from .models import MUTAGEN_READER, STREAMING_READER, MatchCount, ScanResult

__all__ = ["MUTAGEN_READER", "STREAMING_READER", "MatchCount", "ScanResult"]
