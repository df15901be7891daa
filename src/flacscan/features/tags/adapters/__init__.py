"""Adapters backed by third-party tag readers."""

from .mutagen_reader import read_entries as read_entries_with_mutagen

__all__ = ["read_entries_with_mutagen"]
