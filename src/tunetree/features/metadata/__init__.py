# Where: tunetree.features.metadata.__init__
# What: Expose tag extraction services and the shared TrackMetadata dataclass.
# Why: Provide a cohesive import surface for the build service and tests.

from tunetree.shared.track_metadata import TrackMetadata
from .usecases.extraction import FlacExtractor, MetadataExtractor, Mp3Extractor
from .usecases.parse_music_files import parse_music_files

__all__ = [
    "TrackMetadata",
    "MetadataExtractor",
    "FlacExtractor",
    "Mp3Extractor",
    "parse_music_files",
]
