"""Summary: Lazy, single-pass cursor over the entries of a VORBIS_COMMENT block.
Why: Decode each ``KEY=VALUE`` entry only when the caller visits it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import final

from .errors import CommentDecodeError, CorruptTagBlockError, MalformedCommentError

Payload = bytes | bytearray

U32_SIZE = 4


@dataclass(frozen=True, slots=True)
class TagEntry:
    """One decoded tag entry together with the file it came from."""

    path: Path
    key: str
    value: str


def split_comment(raw: Payload, path: Path | None = None) -> tuple[str, str]:
    """Decode ``raw`` as UTF-8 and split it on the first ``=``.

    Args:
        raw: Entry bytes without the length prefix.
        path: File the entry belongs to, used for error reporting.

    Returns:
        tuple[str, str]: Key and value. The value keeps any further ``=``.

    Raises:
        CommentDecodeError: If ``raw`` is not valid UTF-8.
        MalformedCommentError: If the text has no ``=`` delimiter.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CommentDecodeError(e, path) from e

    key, sep, value = text.partition("=")
    if not sep:
        raise MalformedCommentError(text, path)
    return key, value


@final
class VorbisComment:
    """Cursor over the entries of one tag block.

    The cursor follows a two-step protocol: ``advance()`` moves to the next
    entry and reports whether there is one, ``current()`` decodes the entry
    under the cursor. Iterating the cursor drives the same state, so entries
    can be consumed only once.

    When the payload is a caller-owned ``bytearray`` the cursor reads it in
    place; the caller must not refill that buffer while the cursor is in use.
    """

    __slots__ = ("path", "_payload", "_entry_count", "_offset", "_visited", "_vendor_length")

    def __init__(
        self,
        path: Path,
        payload: Payload,
        entry_count: int,
        offset: int,
        vendor_length: int = 0,
    ) -> None:
        self.path = path
        self._payload = payload
        self._entry_count = entry_count
        self._offset = offset
        self._visited = 0
        self._vendor_length = vendor_length

    @classmethod
    def empty(cls, path: Path) -> VorbisComment:
        """Create a cursor for a file without a tag block."""
        return cls(path, b"", entry_count=0, offset=0)

    @classmethod
    def from_bytes(cls, path: Path, payload: Payload) -> VorbisComment:
        """Parse the vendor string length and entry count of a tag block payload.

        Raises:
            CorruptTagBlockError: If the preamble runs past the payload.
        """
        vendor_length = _read_u32le(payload, 0, path, "vendor length")
        entry_count = _read_u32le(payload, U32_SIZE + vendor_length, path, "entry count")
        return cls(
            path,
            payload,
            entry_count=entry_count,
            offset=2 * U32_SIZE + vendor_length,
            vendor_length=vendor_length,
        )

    @property
    def entry_count(self) -> int:
        return self._entry_count

    @property
    def is_empty(self) -> bool:
        return self._entry_count == 0

    @property
    def vendor(self) -> str:
        """Vendor string of the encoder that wrote the block."""
        raw = self._payload[U32_SIZE:U32_SIZE + self._vendor_length]
        return raw.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return self._entry_count

    def advance(self) -> bool:
        """Move to the next entry.

        Returns:
            bool: ``True`` if an entry is available through ``current()``,
            ``False`` once the entries are exhausted (and on every later call).
        """
        if self._visited == 0 and self._entry_count > 0:
            self._visited = 1
            return True
        if self._visited < self._entry_count:
            length = _read_u32le(self._payload, self._offset, self.path, "entry length")
            self._visited += 1
            self._offset += U32_SIZE + length
            return True
        if self._visited <= self._entry_count:
            self._visited += 1
        return False

    def current(self) -> TagEntry | None:
        """Decode the entry under the cursor.

        Returns:
            TagEntry | None: The entry, or ``None`` before the first
            ``advance()`` and after exhaustion.

        Raises:
            CommentDecodeError: If the entry is not valid UTF-8.
            MalformedCommentError: If the entry has no ``=``.
            CorruptTagBlockError: If the entry runs past the payload.
        """
        if not 1 <= self._visited <= self._entry_count:
            return None

        length = _read_u32le(self._payload, self._offset, self.path, "entry length")
        start = self._offset + U32_SIZE
        end = start + length
        if end > len(self._payload):
            raise CorruptTagBlockError(
                f"entry {self._visited} of {self._entry_count} needs bytes "
                f"{start}..{end}, payload has {len(self._payload)}",
                self.path,
            )

        key, value = split_comment(self._payload[start:end], self.path)
        return TagEntry(self.path, key, value)

    def entries(self) -> Iterator[TagEntry]:
        """Yield the remaining entries in file order."""
        while self.advance():
            entry = self.current()
            if entry is not None:
                yield entry

    def __iter__(self) -> Iterator[TagEntry]:
        return self.entries()

    def __repr__(self) -> str:
        return (
            f"VorbisComment(path={self.path!r}, entry_count={self._entry_count}, "
            f"offset={self._offset}, visited={self._visited})"
        )


def _read_u32le(payload: Payload, offset: int, path: Path | None, field: str) -> int:
    end = offset + U32_SIZE
    if end > len(payload):
        raise CorruptTagBlockError(
            f"{field} at offset {offset} is past the end of the {len(payload)}-byte payload",
            path,
        )
    return int.from_bytes(payload[offset:end], "little")


__all__ = ["Payload", "TagEntry", "VorbisComment", "split_comment"]
