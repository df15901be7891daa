"""Where: src/flacscan/features/tags/domain/errors.py
What: Typed failures raised while reading FLAC tag blocks.
Why: Let callers tell I/O problems, bad headers and bad entries apart.
"""

from __future__ import annotations

from pathlib import Path


class TagReadError(Exception):
    """Base class for every failure raised by the tag reader."""

    path: Path | None

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TagIOError(TagReadError):
    """A read or seek on the byte source failed or came up short."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(f"I/O Error: {message}", path)


class CommentDecodeError(TagReadError):
    """Entry bytes are not valid UTF-8."""

    def __init__(self, error: UnicodeDecodeError, path: Path | None = None) -> None:
        super().__init__(f"UTF8 error: {error}", path)


class MalformedCommentError(TagReadError, ValueError):
    """Entry text has no ``=`` delimiter."""

    text: str

    def __init__(self, text: str, path: Path | None = None) -> None:
        super().__init__(f"Malformed vorbis comment: {text}", path)
        self.text = text


class InvalidFlacHeaderError(TagReadError):
    """The stream does not start with the ``fLaC`` signature."""

    def __init__(self, path: Path | None) -> None:
        super().__init__(f"Invalid flac file: {path}", path)


class CorruptTagBlockError(TagReadError):
    """A declared length or count runs past the end of the tag block payload."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(f"Corrupt vorbis comment block: {message}", path)


__all__ = [
    "CommentDecodeError",
    "CorruptTagBlockError",
    "InvalidFlacHeaderError",
    "MalformedCommentError",
    "TagIOError",
    "TagReadError",
]
