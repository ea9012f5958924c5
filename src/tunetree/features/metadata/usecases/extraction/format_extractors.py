"""Format-specific metadata extractors.

Where: src/tunetree/features/metadata/usecases/extraction/format_extractors.py
What: Define concrete metadata extractors for the supported audio containers.
Why: FLAC exposes a flat key/value dictionary while MP3 exposes ID3 frames; each needs its own lookup rules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Callable

from mutagen.flac import FLAC
from mutagen.id3 import ID3

from tunetree.shared.errors import ExpectedNumericValueError
from tunetree.shared.track_metadata import TrackMetadata

from ._base_extractors import BaseAudioExtractor
from ._tag_utils import lowercase_tag_map, parse_number, parse_slash_separated

__all__ = [
    "FlacExtractor",
    "Mp3Extractor",
]


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files using Vorbis comments.

    Vorbis comment keys are case-insensitive, so every key is lower-cased
    before lookup. Numeric tags must hold plain integers; anything else is an
    ``ExpectedNumericValueError``. Optional text tags are kept as found, so a
    blank ``ALBUM`` is an album named "" rather than a missing one.
    """

    FILE_CLASS: ClassVar[Callable[..., Any] | None] = FLAC
    FORMAT_NAME: ClassVar[str] = "FLAC"

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album_artist": "albumartist",
        "album": "album",
        "disc_number": "discnumber",
        "disc_total": "disctotal",
        "track_number": "tracknumber",
        "track_total": "tracktotal",
        "genre": "genre",
        "date": "date",
    }

    def _build_metadata(self, file_path: Path, audio: Any) -> TrackMetadata:
        tag_map = lowercase_tag_map(audio.tags if audio.tags is not None else [])
        mapping = self.TAG_MAPPING

        return TrackMetadata(
            artist=self._require(file_path, mapping["artist"], tag_map.get(mapping["artist"])),
            title=self._require(file_path, mapping["title"], tag_map.get(mapping["title"])),
            path=file_path,
            album_artist=tag_map.get(mapping["album_artist"]),
            album=tag_map.get(mapping["album"]),
            disc_number=self._get_number(file_path, tag_map, mapping["disc_number"]),
            disc_total=self._get_number(file_path, tag_map, mapping["disc_total"]),
            track_number=self._get_number(file_path, tag_map, mapping["track_number"]),
            track_total=self._get_number(file_path, tag_map, mapping["track_total"]),
            genre=tag_map.get(mapping["genre"]),
            date=tag_map.get(mapping["date"]),
        )

    @staticmethod
    def _get_number(file_path: Path, tag_map: dict[str, str], key: str) -> int | None:
        raw = tag_map.get(key)
        if raw is None:
            return None
        number = parse_number(raw)
        if number is None:
            raise ExpectedNumericValueError(file_path, key, raw)
        return number


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using ID3v2 frames.

    Numeric frames are read as ``number/total`` pairs; text that does not
    parse yields ``None`` rather than an error.
    """

    FILE_CLASS: ClassVar[Callable[..., Any] | None] = ID3
    FORMAT_NAME: ClassVar[str] = "MP3"

    def _build_metadata(self, file_path: Path, audio: Any) -> TrackMetadata:
        tags: ID3 = audio
        disc_number, disc_total = self._number_pair(tags, "TPOS")
        track_number, track_total = self._number_pair(tags, "TRCK")

        return TrackMetadata(
            artist=self._require(file_path, "artist", self._text(tags, "TPE1")),
            title=self._require(file_path, "title", self._text(tags, "TIT2")),
            path=file_path,
            album_artist=self._text(tags, "TPE2"),
            album=self._text(tags, "TALB"),
            disc_number=disc_number,
            disc_total=disc_total,
            track_number=track_number,
            track_total=track_total,
            genre=self._genre(tags),
            date=self._date(tags),
        )

    @staticmethod
    def _text(tags: ID3, frame_id: str) -> str | None:
        """Return the first text value of ``frame_id``, if any."""
        frame = tags.get(frame_id)
        if frame is None:
            return None
        text: list[Any] = list(getattr(frame, "text", []))
        return str(text[0]) if text else None

    @classmethod
    def _number_pair(cls, tags: ID3, frame_id: str) -> tuple[int | None, int | None]:
        return parse_slash_separated(cls._text(tags, frame_id) or "")

    @staticmethod
    def _genre(tags: ID3) -> str | None:
        frame = tags.get("TCON")
        if frame is None:
            return None
        genres: list[str] = list(frame.genres)
        return genres[0] if genres else None

    @staticmethod
    def _date(tags: ID3) -> str | None:
        frame = tags.get("TDRC")
        if frame is None or not frame.text:
            return None
        return frame.text[0].text
