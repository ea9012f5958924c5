# Where: tunetree.shared.track_metadata
# What: Canonical TrackMetadata dataclass produced by every format extractor.
# Why: One record shape regardless of the container the tags came from.

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class TrackMetadata:
    """Metadata for a music track.

    ``artist`` and ``title`` are always present; every other tag is optional
    and left as ``None`` when the file does not carry it.
    """

    artist: str
    title: str
    path: Path
    album_artist: str | None = None
    album: str | None = None
    disc_number: int | None = None
    disc_total: int | None = None
    track_number: int | None = None
    track_total: int | None = None
    genre: str | None = None
    date: str | None = None

    @property
    def file_extension(self) -> str:
        return self.path.suffix.lower()


__all__ = ["TrackMetadata"]
