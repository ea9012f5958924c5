"""Application service for building a music library.

This layer wires scan → parse → organize in one place so that every UI
(the CLI today, a GUI or player later) builds the library the same way.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import final

from tunetree.features.metadata import TrackMetadata, parse_music_files
from tunetree.features.organization import Library, organize_tracks
from tunetree.features.scanning import find_music_files
from tunetree.platform.logging import logger


@dataclass(frozen=True)
class BuildLibraryRequest:
    """Input parameters for a library build.

    Attributes:
        root: Directory scanned recursively for audio files.
    """

    root: Path


@final
class LibraryService:
    """Application service that runs the full library build pipeline."""

    def __init__(
        self,
        *,
        scanner: Callable[[Path], Sequence[Path]] | None = None,
        parser: Callable[[Iterable[Path]], list[TrackMetadata]] | None = None,
        organizer: Callable[[Iterable[TrackMetadata]], Library] | None = None,
    ) -> None:
        """Create a service with overridable pipeline stages.

        Tests can inject light-weight doubles while production code relies on
        the default feature functions.
        """
        self._scanner: Callable[[Path], Sequence[Path]] = scanner or find_music_files
        self._parser: Callable[[Iterable[Path]], list[TrackMetadata]] = parser or parse_music_files
        self._organizer: Callable[[Iterable[TrackMetadata]], Library] = organizer or organize_tracks

    def build(self, request: BuildLibraryRequest) -> Library:
        """Build the library for ``request.root``.

        Paths are sorted before parsing so the organizer sees the same order
        on every run. Any stage failure propagates unchanged and no partial
        library is returned.
        """
        started = time.perf_counter()
        root = request.root
        logger.info("Building library from %s", root)

        try:
            paths = sorted(self._scanner(root))
            records = self._parser(paths)
            library = self._organizer(records)
        except Exception as exc:
            logger.error(
                "Library build failed",
                extra={
                    "processing_event": "library.build.error",
                    "error_message": str(exc),
                    "root_path": str(root),
                },
            )
            raise

        logger.info(
            "Library built from %s",
            root,
            extra={
                "processing_event": "library.build.complete",
                "tracks": library.track_count,
                "artists": len(library.artists),
                "albums": sum(len(artist.albums) for artist in library.artists.values()),
                "duration_seconds": time.perf_counter() - started,
                "root_path": str(root),
            },
        )
        return library


def build_library(root: Path | str) -> Library:
    """Scan, parse, and organize every supported audio file under ``root``."""

    return LibraryService().build(BuildLibraryRequest(root=Path(root)))


__all__ = ["BuildLibraryRequest", "LibraryService", "build_library"]
