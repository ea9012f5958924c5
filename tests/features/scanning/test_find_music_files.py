"""Tests for recursive audio file discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tunetree.features.scanning import find_music_files


def _touch(root: Path, relative: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return path


def test_collects_supported_files_at_any_depth(tmp_path: Path) -> None:
    top = _touch(tmp_path, "top.flac")
    nested = _touch(tmp_path, "Artist/Album/CD1/01.mp3")
    deep = _touch(tmp_path, "a/b/c/d/e/f/deep.flac")

    assert find_music_files(tmp_path) == sorted([top, nested, deep])


def test_extension_match_is_case_insensitive(tmp_path: Path) -> None:
    upper = _touch(tmp_path, "LOUD.FLAC")
    mixed = _touch(tmp_path, "mixed.Mp3")

    assert find_music_files(tmp_path) == sorted([upper, mixed])


def test_skips_unsupported_and_extensionless_files(tmp_path: Path) -> None:
    kept = _touch(tmp_path, "album/01.flac")
    _ = _touch(tmp_path, "album/cover.jpg")
    _ = _touch(tmp_path, "album/notes.txt")
    _ = _touch(tmp_path, "album/README")
    _ = _touch(tmp_path, "album/song.ogg")

    assert find_music_files(tmp_path) == [kept]


def test_directory_named_like_audio_is_descended_not_returned(tmp_path: Path) -> None:
    inner = _touch(tmp_path, "weird.flac/inner.mp3")

    assert find_music_files(tmp_path) == [inner]


def test_empty_directory(tmp_path: Path) -> None:
    assert find_music_files(tmp_path) == []


def test_custom_extensions(tmp_path: Path) -> None:
    flac = _touch(tmp_path, "a.flac")
    _ = _touch(tmp_path, "b.mp3")

    assert find_music_files(tmp_path, extensions=[".FLAC"]) == [flac]


def test_result_is_sorted(tmp_path: Path) -> None:
    names = ["c.mp3", "a.flac", "b/z.flac", "b/a.mp3"]
    for name in names:
        _ = _touch(tmp_path, name)

    found = find_music_files(tmp_path)

    assert found == sorted(found)
    assert len(found) == len(names)


def test_accepts_string_root(tmp_path: Path) -> None:
    track = _touch(tmp_path, "x.mp3")

    assert find_music_files(str(tmp_path)) == [track]


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = find_music_files(tmp_path / "nope")


def test_file_root_raises(tmp_path: Path) -> None:
    file_root = _touch(tmp_path, "single.flac")

    with pytest.raises(NotADirectoryError):
        _ = find_music_files(file_root)


def test_unreadable_subdirectory_aborts_scan(mocker: MockerFixture, tmp_path: Path) -> None:
    """A listing failure anywhere below the root propagates; no partial list is returned."""
    _ = _touch(tmp_path, "ok/track.flac")
    locked = tmp_path / "locked"
    locked.mkdir()

    real_scandir = os.scandir

    def fake_scandir(path: str | os.PathLike[str]) -> object:
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    _ = mocker.patch(
        "tunetree.features.scanning.usecases.find_music_files.os.scandir",
        side_effect=fake_scandir,
    )

    with pytest.raises(PermissionError):
        _ = find_music_files(tmp_path)


def test_symlinked_directories_are_not_followed(tmp_path: Path) -> None:
    real = _touch(tmp_path, "real/track.flac")
    try:
        (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported on this platform")

    assert find_music_files(tmp_path) == [real]


def test_skip_events_are_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    _ = _touch(tmp_path, "cover.jpg")
    _ = _touch(tmp_path, "LICENSE")

    with caplog.at_level(logging.DEBUG, logger="tunetree"):
        _ = find_music_files(tmp_path)

    events = {getattr(record, "processing_event", None) for record in caplog.records}
    assert "scan.file.skip.unsupported" in events
    assert "scan.file.skip.no_extension" in events
    assert "scan.complete" in events
