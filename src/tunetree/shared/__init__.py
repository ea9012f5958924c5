# Where: tunetree.shared
# What: Dataclasses and error types used by every pipeline stage.
# Why: Keep cross-feature types in one dependency-free place.

from .errors import (
    ConflictingTrackError,
    ExpectedNumericValueError,
    LibraryError,
    MissingMetadataKeyError,
)
from .track_metadata import TrackMetadata

__all__ = [
    "ConflictingTrackError",
    "ExpectedNumericValueError",
    "LibraryError",
    "MissingMetadataKeyError",
    "TrackMetadata",
]
