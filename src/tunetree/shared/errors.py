"""Typed failures raised while building a library.

I/O problems surface as the built-in ``OSError`` family and malformed
containers as ``mutagen.MutagenError``; the classes below cover what is
specific to tag extraction and tree assembly.
"""

from __future__ import annotations

from pathlib import Path


class LibraryError(Exception):
    """Base class for library build failures."""


class MissingMetadataKeyError(LibraryError):
    """A required tag (artist or title) is absent from a file."""

    def __init__(self, file: Path, key: str) -> None:
        self.file: Path = file
        self.key: str = key
        super().__init__(f"Missing required tag '{key}' in {file}")


class ExpectedNumericValueError(LibraryError):
    """A numeric tag (disc/track number or total) holds a non-integer value."""

    def __init__(self, file: Path, key: str, value: str) -> None:
        self.file: Path = file
        self.key: str = key
        self.value: str = value
        super().__init__(f"Expected a number for tag '{key}' in {file}, got {value!r}")


class ConflictingTrackError(LibraryError):
    """Two files resolved to the same artist/album/disc/track slot."""

    def __init__(
        self,
        *,
        artist: str,
        album: str,
        disc_number: int,
        track_number: int,
        existing_title: str,
        conflicting_title: str,
        existing_path: Path,
        conflicting_path: Path,
    ) -> None:
        self.artist: str = artist
        self.album: str = album
        self.disc_number: int = disc_number
        self.track_number: int = track_number
        self.existing_title: str = existing_title
        self.conflicting_title: str = conflicting_title
        self.existing_path: Path = existing_path
        self.conflicting_path: Path = conflicting_path
        super().__init__(
            f"Track slot {artist} / {album} / disc {disc_number} / track {track_number} "
            f"is already taken by '{existing_title}' ({existing_path}); "
            f"cannot place '{conflicting_title}' ({conflicting_path})"
        )


__all__ = [
    "ConflictingTrackError",
    "ExpectedNumericValueError",
    "LibraryError",
    "MissingMetadataKeyError",
]
