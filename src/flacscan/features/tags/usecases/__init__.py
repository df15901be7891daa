"""Use cases that locate and open FLAC tag blocks."""

from .block_scanner import read_from, read_tags

__all__ = ["read_from", "read_tags"]
