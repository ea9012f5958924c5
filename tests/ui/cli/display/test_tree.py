"""Tests for the Rich library tree display."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich.console import Console

from tunetree.features.organization import Library, organize_tracks
from tunetree.shared.track_metadata import TrackMetadata
from tunetree.ui.cli.display import LibraryTreeDisplay


def _display() -> tuple[LibraryTreeDisplay, StringIO]:
    buffer = StringIO()
    return LibraryTreeDisplay(Console(file=buffer, width=120, color_system=None)), buffer


def _library() -> Library:
    return organize_tracks(
        [
            TrackMetadata(artist="B", title="Two", path=Path("/m/2.mp3"), album="Alb", track_number=2),
            TrackMetadata(artist="B", title="One", path=Path("/m/1.mp3"), album="Alb", track_number=1),
            TrackMetadata(artist="A", title="[live]", path=Path("/m/3.flac")),
        ]
    )


def test_tree_lists_nodes_in_order() -> None:
    display, buffer = _display()

    display.show_library(_library())

    lines = [line for line in buffer.getvalue().splitlines() if line.strip()]
    labels = [line.split("── ", 1)[-1].rstrip() for line in lines]
    assert labels == [
        "Library",
        "Artist: A",
        "Album: [live]",
        "Disc: 1",
        "Track:   1 - [live]",
        "Artist: B",
        "Album: Alb",
        "Disc: 1",
        "Track:   1 - One",
        "Track:   2 - Two",
    ]


def test_quiet_suppresses_output() -> None:
    display, buffer = _display()

    display.show_library(_library(), quiet=True)

    assert buffer.getvalue() == ""


def test_build_tree_escapes_markup() -> None:
    """Square brackets in tag values render literally."""
    display, _ = _display()

    tree = display.build_tree(_library())

    artist_a = tree.children[0]
    album = artist_a.children[0]
    assert str(album.label).endswith("\\[live]")
