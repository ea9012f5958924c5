"""
Summary: Public surface for metadata extraction modules.
Why: Provide a stable import path for orchestrators and tests.
"""

from .format_extractors import FlacExtractor, Mp3Extractor
from .track_metadata_extractor import MetadataExtractor

__all__ = [
    "MetadataExtractor",
    "FlacExtractor",
    "Mp3Extractor",
]
