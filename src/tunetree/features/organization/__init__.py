"""Public API for the organization feature."""

from .domain.library import Album, Artist, Disc, Library
from .domain.resolution import (
    TrackSlot,
    resolve_album,
    resolve_album_artist,
    resolve_disc_number,
    resolve_slot,
    resolve_track_number,
)
from .usecases.organize_tracks import organize_tracks

__all__ = [
    "Album",
    "Artist",
    "Disc",
    "Library",
    "TrackSlot",
    "organize_tracks",
    "resolve_album",
    "resolve_album_artist",
    "resolve_disc_number",
    "resolve_slot",
    "resolve_track_number",
]
