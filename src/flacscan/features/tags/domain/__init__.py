"""Domain types for FLAC tag reading."""

from .errors import (
    CommentDecodeError,
    CorruptTagBlockError,
    InvalidFlacHeaderError,
    MalformedCommentError,
    TagIOError,
    TagReadError,
)
from .vorbis_comment import TagEntry, VorbisComment, split_comment

__all__ = [
    "CommentDecodeError",
    "CorruptTagBlockError",
    "InvalidFlacHeaderError",
    "MalformedCommentError",
    "TagEntry",
    "TagIOError",
    "TagReadError",
    "VorbisComment",
    "split_comment",
]
