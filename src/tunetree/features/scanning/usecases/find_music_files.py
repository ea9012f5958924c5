"""Recursive discovery of supported audio files.

Where: src/tunetree/features/scanning/usecases/find_music_files.py
What: Walk a library root and collect files whose extension names a supported container.
Why: Unsupported files are reported and skipped here so later stages only see parseable input.
"""

from __future__ import annotations

import os
from collections.abc import Collection
from pathlib import Path

from tunetree.features.metadata.usecases.extraction import MetadataExtractor
from tunetree.platform.logging import logger


def find_music_files(
    root: Path | str,
    extensions: Collection[str] | None = None,
) -> list[Path]:
    """Return every supported audio file below ``root``.

    Args:
        root: Directory to scan recursively.
        extensions: Lower-case suffixes (with leading dot) to accept.
            Defaults to the formats ``MetadataExtractor`` can read.

    Returns:
        list[Path]: Matching files, sorted by path.

    Raises:
        OSError: If any directory cannot be listed or an entry's type cannot
            be determined. The scan is aborted; no partial result is returned.
    """
    root_path = Path(root)
    if extensions is None:
        extensions = MetadataExtractor.SUPPORTED_FORMATS
    accepted = frozenset(ext.lower() for ext in extensions)

    found: list[Path] = []
    _scan_directory(root_path, root_path, accepted, found)
    found.sort()

    logger.debug(
        "Found %d supported files under %s",
        len(found),
        root_path,
        extra={
            "processing_event": "scan.complete",
            "total_files": len(found),
            "root_path": str(root_path),
        },
    )
    return found


def _scan_directory(
    directory: Path,
    root: Path,
    accepted: frozenset[str],
    found: list[Path],
) -> None:
    with os.scandir(directory) as entries:
        for entry in entries:
            entry_path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                _scan_directory(entry_path, root, accepted, found)
                continue
            if not entry.is_file(follow_symlinks=False):
                continue

            suffix = entry_path.suffix.lower()
            if not suffix:
                logger.debug(
                    "Skipping file with no extension: %s",
                    entry_path,
                    extra={
                        "processing_event": "scan.file.skip.no_extension",
                        "source_path": str(entry_path),
                        "root_path": str(root),
                    },
                )
            elif suffix not in accepted:
                logger.debug(
                    "Skipping file with unsupported extension: %s",
                    entry_path,
                    extra={
                        "processing_event": "scan.file.skip.unsupported",
                        "source_path": str(entry_path),
                        "root_path": str(root),
                    },
                )
            else:
                found.append(entry_path)


__all__ = ["find_music_files"]
