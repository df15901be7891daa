"""Where: src/flacscan/features/scan/usecases/counters.py
What: Count tag values equal to a needle across many FLAC files.
Why: Compare the streaming parser with mutagen on the same workload.

Failing files are logged, counted and skipped; a bad entry only skips that
entry in the streaming counter.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from flacscan.features.scan.domain.models import MatchCount
from flacscan.features.tags.adapters import read_entries_with_mutagen
from flacscan.features.tags.domain.errors import (
    CommentDecodeError,
    MalformedCommentError,
    TagReadError,
)
from flacscan.features.tags.usecases.block_scanner import read_from
from flacscan.platform.logging import logger


def _key_matches(key: str, wanted: str | None) -> bool:
    # Vorbis comment field names are case-insensitive.
    return wanted is None or key.casefold() == wanted.casefold()


def _log_file_failure(path: Path, error: Exception) -> None:
    logger.debug(
        "Skipping file",
        extra={
            "scan_event": "scan.file.error",
            "source_path": str(path),
            "error_message": str(error),
        },
    )


def count_streaming_matches(
    paths: Iterable[Path],
    value: str,
    *,
    key: str | None = None,
) -> MatchCount:
    """Count entries equal to ``value`` using the streaming block scanner.

    One scratch buffer is reused for every file.

    Args:
        paths: Files to read.
        value: Tag value to look for (exact match).
        key: Restrict matching to this field name (case-insensitive).

    Returns:
        MatchCount: Totals for the run.
    """
    buffer = bytearray()
    matches = files = failures = skipped_entries = 0

    for path in paths:
        files += 1
        try:
            cursor = read_from(path, buffer)
            while cursor.advance():
                try:
                    entry = cursor.current()
                except (CommentDecodeError, MalformedCommentError) as e:
                    skipped_entries += 1
                    logger.debug("Skipping entry in %s: %s", path, e)
                    continue
                if entry is not None and entry.value == value and _key_matches(entry.key, key):
                    matches += 1
        except TagReadError as e:
            failures += 1
            _log_file_failure(path, e)

    return MatchCount(
        matches=matches,
        files=files,
        failures=failures,
        skipped_entries=skipped_entries,
    )


def count_mutagen_matches(
    paths: Iterable[Path],
    value: str,
    *,
    key: str | None = None,
) -> MatchCount:
    """Count entries equal to ``value`` using mutagen's FLAC reader."""

    matches = files = failures = 0

    for path in paths:
        files += 1
        try:
            for entry in read_entries_with_mutagen(path):
                if entry.value == value and _key_matches(entry.key, key):
                    matches += 1
        except TagReadError as e:
            failures += 1
            _log_file_failure(path, e)

    return MatchCount(matches=matches, files=files, failures=failures)


__all__ = ["count_mutagen_matches", "count_streaming_matches"]
