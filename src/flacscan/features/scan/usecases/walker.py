"""Summary: Walk a directory tree and yield FLAC file paths.
Why: Feed the counters a lazy stream of candidate files.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from flacscan.config.config import FILE_SUFFIX_DEFAULT
from flacscan.platform.logging import logger


def iter_flac_files(
    root: Path,
    *,
    follow_links: bool = True,
    suffix: str = FILE_SUFFIX_DEFAULT,
) -> Iterator[Path]:
    """Yield regular files under ``root`` whose name ends with ``suffix``.

    Directories that cannot be listed are logged and skipped. A ``root``
    that is itself a matching file is yielded as-is.

    Args:
        root: File or directory to walk.
        follow_links: Whether to descend into symlinked directories.
        suffix: Name ending that marks a FLAC file (no leading dot required).

    Yields:
        Path: Matching files in sorted, depth-first order.
    """
    if root.is_file():
        if root.name.endswith(suffix):
            yield root
        return

    def _on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory %s: %s", error.filename, error)

    for dirpath, dirnames, filenames in os.walk(root, followlinks=follow_links, onerror=_on_error):
        dirnames.sort()
        for name in sorted(filenames):
            if not name.endswith(suffix):
                continue
            candidate = Path(dirpath) / name
            if candidate.is_file():
                yield candidate


__all__ = ["iter_flac_files"]
