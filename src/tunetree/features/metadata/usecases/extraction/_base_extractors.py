"""Shared base classes for metadata extractors.

Where: src/tunetree/features/metadata/usecases/extraction/_base_extractors.py
What: Define the extraction interface and the file-opening/error mapping shared by formats.
Why: Keep per-format classes down to the tag lookups that actually differ.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, Callable, ClassVar

from typing_extensions import override

from mutagen import MutagenError

from tunetree.platform.logging import logger
from tunetree.shared.errors import MissingMetadataKeyError
from tunetree.shared.track_metadata import TrackMetadata

from ._tag_utils import non_empty

__all__ = [
    "AudioFormatExtractor",
    "BaseAudioExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file."""
        raise NotImplementedError


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for mutagen-backed extractors."""

    FILE_CLASS: ClassVar[Callable[..., Any] | None] = None
    FORMAT_NAME: ClassVar[str] = ""

    def _open_file(self, file_path: Path) -> Any:
        """Open ``file_path`` with ``FILE_CLASS``.

        mutagen reports every failure as ``MutagenError``; when one wraps an
        ``OSError`` the ``OSError`` is raised instead so callers can tell an
        unreadable file from a malformed container.
        """
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")

        try:
            return self.FILE_CLASS(file_path)
        except MutagenError as exc:
            logger.debug(
                "Failed to read %s tags from %s: %s",
                self.FORMAT_NAME,
                file_path,
                exc,
            )
            underlying = exc.__cause__ or exc.__context__
            if isinstance(underlying, OSError):
                raise underlying from exc
            raise

    @staticmethod
    def _require(file_path: Path, key: str, value: str | None) -> str:
        """Return a required tag value or raise ``MissingMetadataKeyError``."""
        present = non_empty(value)
        if present is None:
            raise MissingMetadataKeyError(file_path, key)
        return present

    @abc.abstractmethod
    def _build_metadata(self, file_path: Path, audio: Any) -> TrackMetadata:
        """Map the opened file's native tags onto ``TrackMetadata``."""
        raise NotImplementedError

    @override
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        audio = self._open_file(file_path)
        logger.debug("Opened %s file %s", self.FORMAT_NAME, file_path)
        try:
            metadata = self._build_metadata(file_path, audio)
        except Exception as exc:
            logger.debug("Failed to extract metadata from %s: %s", file_path, exc)
            raise
        logger.debug("Extracted metadata: %s", metadata)
        return metadata
