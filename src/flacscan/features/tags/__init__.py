"""Summary: Public entry points of the FLAC tag reading feature.
Why: Give callers one import path for the scanner, cursor and errors.
"""

from flacscan.features.tags.domain import (
    CommentDecodeError,
    CorruptTagBlockError,
    InvalidFlacHeaderError,
    MalformedCommentError,
    TagEntry,
    TagIOError,
    TagReadError,
    VorbisComment,
)
from flacscan.features.tags.usecases import read_from, read_tags

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
