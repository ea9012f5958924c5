"""src/tunetree/ui/cli/display/tree.py
What: Render a built library as a Rich tree.
Why: Keep console formatting out of the command processor.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from tunetree.features.organization import Library


@final
class LibraryTreeDisplay:
    """Prints artists, albums, discs, and tracks as a nested tree."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def build_tree(self, library: Library) -> Tree:
        root = Tree("[bold]Library[/bold]")
        for artist in library.artists.values():
            artist_node = root.add(f"[cyan]Artist:[/cyan] {escape(artist.name)}")
            for album in artist.albums.values():
                album_node = artist_node.add(f"[magenta]Album:[/magenta] {escape(album.name)}")
                for disc in album.discs.values():
                    disc_node = album_node.add(f"Disc: {disc.number}")
                    for number, track in disc.tracks.items():
                        _ = disc_node.add(f"Track: {number:>3} - {escape(track.title)}")
        return root

    def show_library(self, library: Library, quiet: bool = False) -> None:
        """Print the library tree.

        Args:
            library: Library to render.
            quiet: Whether to suppress output.
        """
        if quiet:
            return
        self.console.print(self.build_tree(library))


__all__ = ["LibraryTreeDisplay"]
