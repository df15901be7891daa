"""Shared pytest fixtures: in-memory FLAC builders and config isolation."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

BlockSpec = tuple[int, bytes]
FlacBuilder = Callable[..., bytes]
PayloadBuilder = Callable[..., bytes]


def build_vorbis_payload(
    entries: Sequence[str | bytes],
    vendor: bytes = b"",
    entry_count: int | None = None,
) -> bytes:
    """Encode a VORBIS_COMMENT payload (vendor, count, length-prefixed entries)."""

    out = bytearray()
    out += len(vendor).to_bytes(4, "little")
    out += vendor
    count = len(entries) if entry_count is None else entry_count
    out += count.to_bytes(4, "little")
    for entry in entries:
        raw = entry.encode("utf-8") if isinstance(entry, str) else entry
        out += len(raw).to_bytes(4, "little")
        out += raw
    return bytes(out)


def build_streaminfo(sample_rate: int = 44100, channels: int = 2, bits_per_sample: int = 16) -> bytes:
    """Encode a 34-byte STREAMINFO block body describing an empty stream."""

    packed = (sample_rate << 44) | ((channels - 1) << 41) | ((bits_per_sample - 1) << 36)
    return (
        (4096).to_bytes(2, "big")
        + (4096).to_bytes(2, "big")
        + bytes(3)
        + bytes(3)
        + packed.to_bytes(8, "big")
        + bytes(16)
    )


def build_flac(
    blocks: Sequence[BlockSpec],
    magic: bytes = b"fLaC",
    audio: bytes = b"\xff\xf8audio",
) -> bytes:
    """Encode a FLAC stream; the last block in ``blocks`` gets the last-block flag."""

    out = bytearray(magic)
    for index, (block_type, payload) in enumerate(blocks):
        is_last = index == len(blocks) - 1
        out.append((0x80 if is_last else 0x00) | (block_type & 0x7F))
        out += len(payload).to_bytes(3, "big")
        out += payload
    out += audio
    return bytes(out)


@pytest.fixture
def flac_bytes() -> FlacBuilder:
    """Provide the in-memory FLAC stream builder."""

    return build_flac


@pytest.fixture
def vorbis_payload() -> PayloadBuilder:
    """Provide the VORBIS_COMMENT payload builder."""

    return build_vorbis_payload


@pytest.fixture
def write_flac(tmp_path: Path) -> Callable[..., Path]:
    """Write a FLAC file built from ``entries`` under ``tmp_path``."""

    def _write(relative: str, entries: Sequence[str | bytes], *, padding: int = 16) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        blocks: list[BlockSpec] = [(0, build_streaminfo()), (4, build_vorbis_payload(entries))]
        if padding:
            blocks.append((1, bytes(padding)))
        _ = target.write_bytes(build_flac(blocks))
        return target

    return _write


@pytest.fixture(autouse=True)
def isolated_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config discovery at a temporary root and reset the config singleton."""

    import flacscan.config.paths as paths
    from flacscan.config.config import Config

    repo_root = tmp_path / "repo"
    repo_root.mkdir()

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return repo_root

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("FLACSCAN_CONFIG", raising=False)

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield repo_root
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
