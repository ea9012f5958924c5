"""Read-only Artist → Album → Disc → Track tree.

Where: src/tunetree/features/organization/domain/library.py
What: Frozen node types whose child mappings iterate in ascending key order.
Why: Collaborators (CLI, GUI, playback) read the tree; nothing mutates it after the build.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from tunetree.shared.track_metadata import TrackMetadata


K = TypeVar("K", str, int)
V = TypeVar("V")


def sorted_view(items: Mapping[K, V]) -> Mapping[K, V]:
    """Return a read-only copy of ``items`` ordered by ascending key."""
    return MappingProxyType(dict(sorted(items.items(), key=lambda item: item[0])))


@dataclass(frozen=True, slots=True)
class Disc:
    """One disc of an album, holding at most one track per number."""

    number: int
    tracks: Mapping[int, TrackMetadata]

    def track(self, number: int) -> TrackMetadata:
        return self.tracks[number]


@dataclass(frozen=True, slots=True)
class Album:
    name: str
    discs: Mapping[int, Disc]

    def disc(self, number: int) -> Disc:
        return self.discs[number]

    def iter_tracks(self) -> Iterator[TrackMetadata]:
        for disc in self.discs.values():
            yield from disc.tracks.values()


@dataclass(frozen=True, slots=True)
class Artist:
    """An album artist; ``name`` is the resolved album-artist value of its tracks."""

    name: str
    albums: Mapping[str, Album]

    def album(self, name: str) -> Album:
        return self.albums[name]

    def iter_tracks(self) -> Iterator[TrackMetadata]:
        for album in self.albums.values():
            yield from album.iter_tracks()


@dataclass(frozen=True, slots=True)
class Library:
    """Root of the tree, keyed by artist name."""

    artists: Mapping[str, Artist]

    def artist(self, name: str) -> Artist:
        """Look up an artist by resolved name.

        Raises:
            KeyError: If no artist with that name exists.
        """
        return self.artists[name]

    def iter_tracks(self) -> Iterator[TrackMetadata]:
        """Yield every track in artist, album, disc, track order."""
        for artist in self.artists.values():
            yield from artist.iter_tracks()

    @property
    def track_count(self) -> int:
        return sum(1 for _ in self.iter_tracks())

    def __len__(self) -> int:
        return self.track_count


__all__ = ["Album", "Artist", "Disc", "Library", "sorted_view"]
