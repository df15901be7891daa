"""Where: src/flacscan/features/tags/adapters/mutagen_reader.py
What: Read vorbis comments through mutagen's full FLAC parser.
Why: Provide a reference reader to compare the streaming parser against.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, cast

from mutagen import MutagenError
from mutagen.flac import FLAC

from flacscan.features.tags.domain.errors import TagIOError, TagReadError
from flacscan.features.tags.domain.vorbis_comment import TagEntry

if TYPE_CHECKING:
    from mutagen.flac import VCFLACDict
else:  # pragma: no cover - typing convenience
    VCFLACDict: type[object] = object


def read_entries(path: Path) -> Iterator[TagEntry]:
    """Yield every vorbis comment of ``path`` as loaded by mutagen.

    Keys are reported as mutagen returns them from ``as_dict()``.

    Raises:
        TagReadError: If mutagen cannot parse the file.
        TagIOError: If the file cannot be read.
    """
    try:
        audio = FLAC(path)
    except MutagenError as e:
        raise TagReadError(f"mutagen could not read file: {e}", path) from e
    except OSError as e:
        raise TagIOError(str(e), path) from e

    tags = cast("VCFLACDict | None", audio.tags)
    if tags is None:
        return

    for key, values in tags.as_dict().items():
        for value in values:
            yield TagEntry(path, key, value)


__all__ = ["read_entries"]
