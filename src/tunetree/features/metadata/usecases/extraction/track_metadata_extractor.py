"""Extension-based dispatch to the format extractors.

Where: src/tunetree/features/metadata/usecases/extraction/track_metadata_extractor.py
What: Provide the MetadataExtractor facade routing files to format extractors.
Why: The extension is inspected once here and nowhere else.
"""

from pathlib import Path
from typing import ClassVar

from ._base_extractors import AudioFormatExtractor
from .format_extractors import FlacExtractor, Mp3Extractor
from tunetree.shared.track_metadata import TrackMetadata

__all__ = [
    "MetadataExtractor",
    "FlacExtractor",
    "Mp3Extractor",
]


class MetadataExtractor:
    """Routes each file to the extractor registered for its suffix."""

    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".flac": FlacExtractor(),
        ".mp3": Mp3Extractor(),
    }

    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset(_format_map)

    @classmethod
    def extract(cls, file_path: Path) -> TrackMetadata:
        """Read the tags of ``file_path`` with the extractor for its suffix.

        Raises:
            ValueError: If the file format is unsupported. The scanner only
                hands over supported files, so this signals a caller bug.
            MissingMetadataKeyError: If artist or title is absent.
            ExpectedNumericValueError: If a numeric FLAC tag is not an integer.
            OSError: If the file cannot be read.
            mutagen.MutagenError: If the container cannot be decoded.
        """
        suffix = file_path.suffix.lower()
        extractor = cls._format_map.get(suffix)
        if extractor is None:
            raise ValueError(f"Unsupported file format: {suffix or '<none>'} ({file_path})")
        return extractor.extract_metadata(file_path)
