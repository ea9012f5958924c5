"""Sequential tag extraction over a list of audio files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from tunetree.platform.logging import logger
from tunetree.shared.track_metadata import TrackMetadata

from .extraction import MetadataExtractor


def parse_music_files(paths: Iterable[Path]) -> list[TrackMetadata]:
    """Extract metadata for every path, in order.

    The first failing file aborts the batch; its exception propagates unchanged.
    """

    records: list[TrackMetadata] = []
    for sequence, path in enumerate(paths, start=1):
        logger.debug("[%d] Parsing %s", sequence, path)
        records.append(MetadataExtractor.extract(path))
    return records


__all__ = ["parse_music_files"]
