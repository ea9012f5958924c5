"""
Summary: Fallback rules turning optional tags into concrete hierarchy keys.
Why: Every node in the library tree needs a non-optional identity.
"""

from __future__ import annotations

from typing import NamedTuple

from tunetree.shared.track_metadata import TrackMetadata

DEFAULT_DISC_NUMBER: int = 1
DEFAULT_TRACK_NUMBER: int = 1


class TrackSlot(NamedTuple):
    """Resolved position of a track in the library tree."""

    artist: str
    album: str
    disc_number: int
    track_number: int


def resolve_album_artist(track: TrackMetadata) -> str:
    """Album artist if tagged, else the track artist."""
    return track.album_artist if track.album_artist is not None else track.artist


def resolve_album(track: TrackMetadata) -> str:
    """Album if tagged, else the track title (the track is its own single)."""
    return track.album if track.album is not None else track.title


def resolve_disc_number(track: TrackMetadata) -> int:
    """Disc number if tagged, else 1 (single-disc release)."""
    return track.disc_number if track.disc_number is not None else DEFAULT_DISC_NUMBER


def resolve_track_number(track: TrackMetadata) -> int:
    """Track number if tagged, else 1 (lone track of its album)."""
    return track.track_number if track.track_number is not None else DEFAULT_TRACK_NUMBER


def resolve_slot(track: TrackMetadata) -> TrackSlot:
    return TrackSlot(
        artist=resolve_album_artist(track),
        album=resolve_album(track),
        disc_number=resolve_disc_number(track),
        track_number=resolve_track_number(track),
    )


__all__ = [
    "DEFAULT_DISC_NUMBER",
    "DEFAULT_TRACK_NUMBER",
    "TrackSlot",
    "resolve_album",
    "resolve_album_artist",
    "resolve_disc_number",
    "resolve_slot",
    "resolve_track_number",
]
