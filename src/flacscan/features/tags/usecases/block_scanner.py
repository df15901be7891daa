"""Where: src/flacscan/features/tags/usecases/block_scanner.py
What: Validate the FLAC signature and walk metadata blocks up to the tag block.
Why: Read only the VORBIS_COMMENT payload and seek over everything else.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final, Protocol

from flacscan.features.tags.domain.errors import InvalidFlacHeaderError, TagIOError
from flacscan.features.tags.domain.vorbis_comment import VorbisComment
from flacscan.platform.logging import logger

# See https://xiph.org/flac/format.html
FLAC_MAGIC: Final[bytes] = b"fLaC"
BLOCK_HEADER_SIZE: Final[int] = 4
VORBIS_COMMENT_BLOCK: Final[int] = 4

LAST_BLOCK_FLAG: Final[int] = 0b1000_0000
BLOCK_TYPE_MASK: Final[int] = 0b0111_1111
BLOCK_LENGTH_MASK: Final[int] = 0x00FF_FFFF


class TagSource(Protocol):
    """Seekable binary stream the scanner reads from."""

    def read(self, size: int = -1, /) -> bytes: ...

    def readinto(self, buffer: memoryview, /) -> int | None: ...

    def seek(self, offset: int, whence: int = os.SEEK_SET, /) -> int: ...


def decode_block_header(header: bytes) -> tuple[bool, int, int]:
    """Split a 4-byte metadata block header.

    Returns:
        tuple[bool, int, int]: ``(is_last, block_type, length)``.
    """
    is_last = bool(header[0] & LAST_BLOCK_FLAG)
    block_type = header[0] & BLOCK_TYPE_MASK
    length = int.from_bytes(header[:BLOCK_HEADER_SIZE], "big") & BLOCK_LENGTH_MASK
    return is_last, block_type, length


def read_from(path: Path | str, buffer: bytearray | None = None) -> VorbisComment:
    """Open ``path`` and return a cursor over its tag entries.

    Args:
        path: FLAC file to read.
        buffer: Optional scratch buffer reused across files. The returned
            cursor reads from it, so it must not be refilled while the
            cursor is still being iterated.

    Returns:
        VorbisComment: Populated cursor, or an empty one if the file has no
        tag block.

    Raises:
        InvalidFlacHeaderError: If the file does not start with ``fLaC``.
        TagIOError: If the file cannot be opened, read or seeked.
    """
    file_path = Path(path)
    try:
        with open(file_path, "rb") as reader:
            return read_tags(reader, file_path, buffer)
    except OSError as e:
        raise TagIOError(str(e), file_path) from e


def read_tags(reader: TagSource, path: Path, buffer: bytearray | None = None) -> VorbisComment:
    """Validate the signature of ``reader`` and scan its metadata blocks.

    ``reader`` must be positioned at the start of the stream and seekable.
    """
    ident = _read_exact(reader, len(FLAC_MAGIC), path)
    if ident != FLAC_MAGIC:
        raise InvalidFlacHeaderError(path)

    while True:
        is_last, block_type, length = decode_block_header(
            _read_exact(reader, BLOCK_HEADER_SIZE, path)
        )

        if block_type == VORBIS_COMMENT_BLOCK:
            logger.debug("Found vorbis comment block (%d bytes) in %s", length, path)
            if buffer is None:
                return VorbisComment.from_bytes(path, _read_exact(reader, length, path))
            _read_into(reader, buffer, length, path)
            return VorbisComment.from_bytes(path, buffer)

        if is_last:
            logger.debug("No vorbis comment block in %s", path)
            return VorbisComment.empty(path)

        try:
            _ = reader.seek(length, os.SEEK_CUR)
        except OSError as e:
            raise TagIOError(str(e), path) from e


def _read_exact(reader: TagSource, size: int, path: Path) -> bytes:
    try:
        data = reader.read(size)
    except OSError as e:
        raise TagIOError(str(e), path) from e
    if len(data) != size:
        raise TagIOError(
            f"unexpected end of stream (wanted {size} bytes, got {len(data)})",
            path,
        )
    return data


def _read_into(reader: TagSource, buffer: bytearray, size: int, path: Path) -> None:
    """Fill ``buffer`` with exactly ``size`` bytes from ``reader``, in place."""

    if len(buffer) > size:
        del buffer[size:]
    elif len(buffer) < size:
        buffer.extend(bytes(size - len(buffer)))

    filled = 0
    with memoryview(buffer) as view:
        while filled < size:
            with view[filled:] as chunk:
                try:
                    count = reader.readinto(chunk)
                except OSError as e:
                    raise TagIOError(str(e), path) from e
            if not count:
                break
            filled += count

    if filled != size:
        raise TagIOError(
            f"unexpected end of stream (wanted {size} bytes, got {filled})",
            path,
        )


__all__ = [
    "BLOCK_HEADER_SIZE",
    "FLAC_MAGIC",
    "TagSource",
    "VORBIS_COMMENT_BLOCK",
    "decode_block_header",
    "read_from",
    "read_tags",
]
