"""flacscan - stream vorbis comments out of FLAC files."""

from flacscan.features.tags import (
    CommentDecodeError,
    CorruptTagBlockError,
    InvalidFlacHeaderError,
    MalformedCommentError,
    TagEntry,
    TagIOError,
    TagReadError,
    VorbisComment,
    read_from,
    read_tags,
)

__version__ = "0.1.0"

__all__ = [
    "CommentDecodeError",
    "CorruptTagBlockError",
    "InvalidFlacHeaderError",
    "MalformedCommentError",
    "TagEntry",
    "TagIOError",
    "TagReadError",
    "VorbisComment",
    "read_from",
    "read_tags",
]
