"""Shared pytest fixtures producing small tagged audio files."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest
from mutagen.flac import FLAC
from mutagen.id3 import ID3, TALB, TCON, TDRC, TIT2, TPE1, TPE2, TPOS, TRCK

FlacWriter = Callable[..., Path]
Mp3Writer = Callable[..., Path]

_ID3_FRAMES = {
    "TPE1": TPE1,
    "TIT2": TIT2,
    "TPE2": TPE2,
    "TALB": TALB,
    "TPOS": TPOS,
    "TRCK": TRCK,
    "TCON": TCON,
    "TDRC": TDRC,
}


def _streaminfo_block() -> bytes:
    """Return a FLAC STREAMINFO block flagged as the last metadata block."""

    header = bytes([0x80]) + (34).to_bytes(3, "big")
    # 44.1 kHz, 2 channels, 16 bits per sample, 0 samples
    packed = (44100 << 44) | (1 << 41) | (15 << 36)
    body = (
        (4096).to_bytes(2, "big")
        + (4096).to_bytes(2, "big")
        + bytes(6)
        + packed.to_bytes(8, "big")
        + bytes(16)
    )
    return header + body


def make_flac(path: Path, tags: Mapping[str, str] | None = None) -> Path:
    """Write a sample-free FLAC file; ``tags`` keys keep their case."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(b"fLaC" + _streaminfo_block())
    if tags is not None:
        audio = FLAC(path)
        audio.add_tags()
        for key, value in tags.items():
            audio.tags.append((key, value))
        audio.save()
    return path


def make_mp3(path: Path, frames: Mapping[str, str] | None = None) -> Path:
    """Write a file holding an ID3v2.4 tag built from ``frame_id -> text``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(bytes(32))
    tags = ID3()
    for frame_id, text in (frames or {}).items():
        tags.add(_ID3_FRAMES[frame_id](encoding=3, text=[text]))
    tags.save(path)
    return path


@pytest.fixture
def flac_file(tmp_path: Path) -> FlacWriter:
    """Factory writing FLAC files relative to ``tmp_path``."""

    def _write(name: str = "track.flac", tags: Mapping[str, str] | None = None) -> Path:
        return make_flac(tmp_path / name, tags)

    return _write


@pytest.fixture
def mp3_file(tmp_path: Path) -> Mp3Writer:
    """Factory writing ID3-tagged MP3 files relative to ``tmp_path``."""

    def _write(name: str = "track.mp3", frames: Mapping[str, str] | None = None) -> Path:
        return make_mp3(tmp_path / name, frames)

    return _write
