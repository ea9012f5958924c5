"""tunetree - build an Artist/Album/Disc/Track tree from tagged audio files."""

from tunetree.application.services.library_service import build_library
from tunetree.features.organization import Album, Artist, Disc, Library
from tunetree.shared import (
    ConflictingTrackError,
    ExpectedNumericValueError,
    LibraryError,
    MissingMetadataKeyError,
    TrackMetadata,
)

__version__ = "0.1.0"

__all__ = [
    "Album",
    "Artist",
    "ConflictingTrackError",
    "Disc",
    "ExpectedNumericValueError",
    "Library",
    "LibraryError",
    "MissingMetadataKeyError",
    "TrackMetadata",
    "build_library",
]
