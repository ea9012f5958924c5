"""Assemble track records into the library tree.

Where: src/tunetree/features/organization/usecases/organize_tracks.py
What: Insert each record at its resolved artist/album/disc/track slot, rejecting occupied slots.
Why: Two files claiming one slot must fail the build instead of one silently replacing the other.
"""

from __future__ import annotations

from collections.abc import Iterable

from tunetree.platform.logging import logger
from tunetree.shared.errors import ConflictingTrackError
from tunetree.shared.track_metadata import TrackMetadata

from ..domain.library import Album, Artist, Disc, Library, sorted_view
from ..domain.resolution import resolve_slot

# artist -> album -> disc -> track -> record
_SlotTable = dict[str, dict[str, dict[int, dict[int, TrackMetadata]]]]


def organize_tracks(tracks: Iterable[TrackMetadata]) -> Library:
    """Build a ``Library`` from ``tracks``.

    Records are placed in the order given. The first record whose slot is
    already taken raises ``ConflictingTrackError`` and nothing is returned;
    the record already at the slot is never replaced.

    Args:
        tracks: Parsed records, ideally in a stable order so the reported
            conflict is reproducible.

    Returns:
        Library: The complete tree, ordered by key at every level.

    Raises:
        ConflictingTrackError: If two records resolve to the same slot.
    """
    table: _SlotTable = {}

    for track in tracks:
        slot = resolve_slot(track)
        disc_slots = (
            table.setdefault(slot.artist, {})
            .setdefault(slot.album, {})
            .setdefault(slot.disc_number, {})
        )

        existing = disc_slots.get(slot.track_number)
        if existing is not None:
            logger.debug("Slot %s already holds %s; rejecting %s", slot, existing.path, track.path)
            raise ConflictingTrackError(
                artist=slot.artist,
                album=slot.album,
                disc_number=slot.disc_number,
                track_number=slot.track_number,
                existing_title=existing.title,
                conflicting_title=track.title,
                existing_path=existing.path,
                conflicting_path=track.path,
            )
        disc_slots[slot.track_number] = track

    return _freeze(table)


def _freeze(table: _SlotTable) -> Library:
    artists = {
        artist_name: Artist(
            name=artist_name,
            albums=sorted_view(
                {
                    album_name: Album(
                        name=album_name,
                        discs=sorted_view(
                            {
                                disc_number: Disc(number=disc_number, tracks=sorted_view(tracks))
                                for disc_number, tracks in discs.items()
                            }
                        ),
                    )
                    for album_name, discs in albums.items()
                }
            ),
        )
        for artist_name, albums in table.items()
    }
    return Library(artists=sorted_view(artists))


__all__ = ["organize_tracks"]
